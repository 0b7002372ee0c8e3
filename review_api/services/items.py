"""
Items Service

Catalog items and their read-time rating aggregate.

The average rating is computed with a LEFT JOIN + AVG on every request
rather than kept on the item row, so edits and deletions of reviews are
reflected immediately.
"""

import uuid
from collections.abc import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from review_api.errors import NotFound
from review_api.models import Item, Review
from review_api.schemas.item import ItemDetailResponse


def create_item(db: Session, name: str, description: str) -> Item:
    """Add an item to the catalog."""
    item = Item(name=name, description=description)

    db.add(item)
    db.commit()
    db.refresh(item)

    return item


def list_items(db: Session, search: str | None = None) -> Sequence[Item]:
    """
    List catalog items, optionally filtered.

    Args:
        db: Database session
        search: Case-insensitive substring matched against name OR description

    Returns:
        Matching items ordered by name
    """
    stmt = select(Item)

    if search:
        pattern = f"%{search}%"
        stmt = stmt.where(
            or_(
                Item.name.ilike(pattern),
                Item.description.ilike(pattern),
            )
        )

    stmt = stmt.order_by(Item.name)
    return db.execute(stmt).scalars().all()


def get_item_with_average_rating(db: Session, item_id: uuid.UUID) -> ItemDetailResponse:
    """
    Get an item together with the mean of its review ratings.

    Returns:
        Item detail; average_rating is None when the item has no reviews

    Raises:
        NotFound: If the item does not exist
    """
    stmt = (
        select(Item, func.avg(Review.rating).label("average_rating"))
        .outerjoin(Review, Review.item_id == Item.id)
        .where(Item.id == item_id)
        .group_by(Item.id)
    )
    row = db.execute(stmt).one_or_none()

    if row is None:
        raise NotFound(f"Item with id {item_id} not found")

    item, average_rating = row
    return ItemDetailResponse(
        id=item.id,
        name=item.name,
        description=item.description,
        average_rating=float(average_rating) if average_rating is not None else None,
    )
