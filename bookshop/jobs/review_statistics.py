# bookshop/jobs/review_statistics.py
# Print the day (or month) with the most reviews
#
# Usage:
#   python -m bookshop.jobs.review_statistics           # busiest day
#   python -m bookshop.jobs.review_statistics --month   # busiest month
#
# Counting is done in the database (GROUP BY period). Ties go to the earliest period.

import argparse
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

import bookshop.db.base  # noqa: F401
from bookshop.core.logging import setup_logging
from bookshop.models.review import Review

# period formats per dialect: (day, month)
_PERIOD_FORMATS = {
    "postgresql": ("YYYY-MM-DD", "YYYY-MM"),
    "sqlite": ("%Y-%m-%d", "%Y-%m"),
}


def _period(db: Session, month: bool):
    dialect = db.get_bind().dialect.name
    if dialect not in _PERIOD_FORMATS:
        raise ValueError(f"Review statistics are not supported on {dialect}")
    fmt = _PERIOD_FORMATS[dialect][1 if month else 0]
    if dialect == "sqlite":
        return func.strftime(fmt, Review.published_at)
    return func.to_char(Review.published_at, fmt)


def _busiest(db: Session, month: bool) -> Optional[str]:
    period = _period(db, month).label("period")
    reviews = func.count(Review.id).label("reviews")
    row = (
        db.query(period, reviews)
        .group_by(period)
        .order_by(reviews.desc(), period.asc())
        .first()
    )
    return row.period if row else None


def highest_review_day(db: Session) -> Optional[str]:
    return _busiest(db, month=False)


def highest_review_month(db: Session) -> Optional[str]:
    return _busiest(db, month=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Display the day/month with the most reviews")
    parser.add_argument("--month", action="store_true", help="Display by month")
    args = parser.parse_args(argv)

    setup_logging()
    from bookshop.db.session import SessionLocal

    db = SessionLocal()
    try:
        if args.month:
            result = highest_review_month(db)
            print(f"Most reviews in: {result or 'no reviews yet'}")
        else:
            result = highest_review_day(db)
            print(f"Most reviews on: {result or 'no reviews yet'}")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
