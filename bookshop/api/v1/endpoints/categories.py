# bookshop/api/v1/endpoints/categories.py
# Categories: public listing, admin-only create/delete.
# Two routers -- mounted under /categories and /admin/categories.

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookshop.core.dependencies import require_admin
from bookshop.db.session import get_db
from bookshop.models.category import Category
from bookshop.models.user import User
from bookshop.schemas.category import CategoryCreateRequest, CategoryResponse
from bookshop.schemas.common import MessageResponse

router = APIRouter()
admin_router = APIRouter()
logger = logging.getLogger("bookshop.categories")


@router.get("", response_model=List[CategoryResponse])
def list_categories(db: Session = Depends(get_db)):
    return db.query(Category).order_by(Category.name).all()


@admin_router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    payload: CategoryCreateRequest,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    category = Category(name=payload.name)
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info(f"Category created: {category.name} (id={category.id})")
    return category


@admin_router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    category = db.get(Category, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    name = category.name
    db.delete(category)
    db.commit()
    return MessageResponse(message=f"Category '{name}' deleted.")
