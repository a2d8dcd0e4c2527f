# bookshop/api/v1/endpoints/admin_reviews.py
# Review moderation (admin only)

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookshop.core.dependencies import require_admin
from bookshop.db.session import get_db
from bookshop.models.review import Review
from bookshop.models.user import User
from bookshop.schemas.common import MessageResponse

router = APIRouter()
logger = logging.getLogger("bookshop.admin_reviews")


@router.delete("/{review_id}", response_model=MessageResponse)
def delete_review(review_id: UUID, current_user: User = Depends(require_admin), db: Session = Depends(get_db)):
    review = db.get(Review, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    db.delete(review)
    db.commit()
    logger.info(f"Review {review_id} removed by {current_user.email}")
    return MessageResponse(message="Review deleted.")
