"""
Review Model

Represents a user's rating and text review of an item.

Business Rules:
- One review per user per item (unique constraint)
- Only the owning user can edit/delete a review
- Deleting a review deletes its comments (ON DELETE CASCADE)
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from review_api.database import Base

if TYPE_CHECKING:
    from review_api.models.comment import Comment
    from review_api.models.item import Item
    from review_api.models.user import User


class Review(Base):
    """
    Review model for item reviews.

    Attributes:
        id: Primary key
        text: Review text content
        rating: Numeric rating
        user_id: Foreign key to users table (the owner)
        item_id: Foreign key to items table
    """

    __tablename__ = "reviews"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    rating: Mapped[float] = mapped_column(
        Float,
        nullable=False,
    )

    # Foreign keys
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="reviews")
    item: Mapped["Item"] = relationship("Item", back_populates="reviews")
    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="review",
        passive_deletes=True,
    )

    __table_args__ = (
        # One review per user per item
        UniqueConstraint("user_id", "item_id", name="unique_user_id_and_item_id"),
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, item_id={self.item_id}, user_id={self.user_id}, rating={self.rating})>"
