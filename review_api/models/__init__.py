"""
SQLAlchemy Models Package

Model Relationships:
- User 1-N Review, Item 1-N Review
- Review 1-N Comment, User 1-N Comment

Import all models here to:
1. Make them available as: from review_api.models import User, Item
2. Ensure Alembic discovers them for migrations
"""

from review_api.models.user import User
from review_api.models.item import Item
from review_api.models.review import Review
from review_api.models.comment import Comment

__all__ = [
    "User",
    "Item",
    "Review",
    "Comment",
]
