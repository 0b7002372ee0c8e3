"""
API Routers Package

Router Structure:
- auth.py: /api/auth/* endpoints (registration, login, current user)
- items.py: /api/items/* catalog endpoints
- reviews.py: item reviews and owner-scoped review mutations
- comments.py: review comments and owner-scoped comment mutations

Each router is imported and registered in main.py.
"""

from review_api.routers.auth import router as auth_router
from review_api.routers.comments import router as comments_router
from review_api.routers.items import router as items_router
from review_api.routers.reviews import router as reviews_router

__all__ = [
    "auth_router",
    "comments_router",
    "items_router",
    "reviews_router",
]
