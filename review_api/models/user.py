"""
User Model

Represents a registered user. The password is stored only as a bcrypt hash.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from review_api.database import Base

if TYPE_CHECKING:
    from review_api.models.comment import Comment
    from review_api.models.review import Review


class User(Base):
    """
    User model representing registered users.

    Table: users

    Relationships:
    - reviews: One-to-Many relationship with Review model
    - comments: One-to-Many relationship with Comment model

    Username uniqueness is enforced by the database, not by a lookup before
    insert, so two concurrent registrations cannot both succeed.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        nullable=False,
        comment="Unique, case-sensitive login name"
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="user",
        passive_deletes=True,
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, username='{self.username}')"
