"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating
- XxxResponse: Fields returned in API responses
"""

from review_api.schemas.comment import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
)
from review_api.schemas.item import (
    ItemDetailResponse,
    ItemResponse,
)
from review_api.schemas.review import (
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
)
from review_api.schemas.user import (
    Credentials,
    LoginRequest,
    TokenResponse,
    UserIdentity,
)

__all__ = [
    "CommentCreate",
    "CommentResponse",
    "CommentUpdate",
    "Credentials",
    "LoginRequest",
    "ItemDetailResponse",
    "ItemResponse",
    "ReviewCreate",
    "ReviewResponse",
    "ReviewUpdate",
    "TokenResponse",
    "UserIdentity",
]
