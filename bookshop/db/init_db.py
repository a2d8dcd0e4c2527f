# bookshop/db/init_db.py
# Seed initial data into the database
# Run once after migrations: python -m bookshop.db.init_db
#
# Creates:
#   1. Admin user (from env vars or defaults)
#   2. Default categories (News, Science, History)

import logging
import os

import bookshop.db.base  # noqa: F401
from bookshop.core.logging import setup_logging
from bookshop.core.security import create_access_token
from bookshop.db.session import SessionLocal
from bookshop.models.category import Category
from bookshop.models.enums import UserRole
from bookshop.models.user import User

logger = logging.getLogger("bookshop.init_db")

DEFAULT_CATEGORIES = ["News", "Science", "History"]


def seed_admin(db) -> User:
    """Create the admin user if it doesn't exist."""
    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com")

    existing = db.query(User).filter(User.email == admin_email).first()
    if existing:
        logger.info(f"  Admin already exists: {admin_email}")
        return existing

    admin = User(
        email=admin_email,
        first_name=os.getenv("ADMIN_FIRST_NAME", "Shop"),
        last_name=os.getenv("ADMIN_LAST_NAME", "Admin"),
        role=UserRole.ADMIN,
    )
    db.add(admin)
    db.flush()
    logger.info(f"  Admin created: {admin_email}")
    return admin


def seed_categories(db) -> None:
    """Create default categories if they don't exist."""
    existing = {name for (name,) in db.query(Category.name).all()}
    for name in DEFAULT_CATEGORIES:
        if name in existing:
            logger.info(f"  Category already exists: {name}")
            continue
        db.add(Category(name=name))
        logger.info(f"  Category created: {name}")


def init_db() -> None:
    logger.info("Seeding database...")
    db = SessionLocal()
    try:
        logger.info("[1/2] Admin user")
        admin = seed_admin(db)

        logger.info("[2/2] Categories")
        seed_categories(db)

        db.commit()
        logger.info("Done. Database seeded successfully.")
        if os.getenv("APP_ENV", "development") == "development":
            logger.info(f"Admin token (dev only): {create_access_token(admin.id, UserRole.ADMIN.value)}")
    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging()
    init_db()
