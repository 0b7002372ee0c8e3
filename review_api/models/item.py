"""
Item Model

A catalog entry that users review. Items have no owner; they are created by
seeding, not by users.

The average rating is NOT a column. It is computed from the reviews table on
every read (see review_api.services.items).
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from review_api.database import Base

if TYPE_CHECKING:
    from review_api.models.review import Review


class Item(Base):
    __tablename__ = "items"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    reviews: Mapped[list["Review"]] = relationship(
        "Review",
        back_populates="item",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"Item(id={self.id}, name='{self.name}')"
