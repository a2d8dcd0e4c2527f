# bookshop/api/v1/router.py
# Master router -- registers all endpoint routers under /api/v1
# Each endpoint module registers its own router; prefixes and tags live here

from fastapi import APIRouter

from bookshop.api.v1.endpoints import admin_books, admin_reviews, bookmarks, books, categories

api_router = APIRouter()

# Public catalogue
api_router.include_router(books.router, prefix="/books", tags=["Books"])
api_router.include_router(categories.router, prefix="/categories", tags=["Categories"])

# Current user
api_router.include_router(bookmarks.router, prefix="/bookmarks", tags=["Bookmarks"])

# Admin
api_router.include_router(admin_books.router, prefix="/admin/books", tags=["Admin - Books"])
api_router.include_router(categories.admin_router, prefix="/admin/categories", tags=["Admin - Categories"])
api_router.include_router(admin_reviews.router, prefix="/admin/reviews", tags=["Admin - Reviews"])
