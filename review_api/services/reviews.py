"""
Reviews Service

Creation, listing and ownership-scoped mutation of reviews.

Ownership Pattern:
==================
Updates and deletes are ONE statement whose WHERE clause names both the
review id and the owner:

    UPDATE reviews SET ... WHERE id = :review_id AND user_id = :user_id

A non-owner's statement simply matches zero rows, so there is no window
between "check owner" and "write" for a concurrent request to exploit.
Zero matched rows are reported as NotFound whether the review is missing,
owned by someone else, or already deleted.
"""

import logging
import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from review_api.database import is_unique_violation
from review_api.errors import DuplicateReviewForUserItem, NotFound
from review_api.models import Review

logger = logging.getLogger(__name__)


def create_review(
    db: Session,
    text: str,
    rating: float,
    user_id: uuid.UUID,
    item_id: uuid.UUID,
) -> Review:
    """
    Create a review owned by user_id.

    The one-review-per-user-per-item rule is left to the unique constraint;
    a second review is rejected, never merged into the first.

    Raises:
        DuplicateReviewForUserItem: If the user already reviewed this item
        NotFound: If the item or the user does not exist
    """
    review = Review(
        text=text,
        rating=rating,
        user_id=user_id,
        item_id=item_id,
    )

    db.add(review)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            logger.info(f"Duplicate review by user {user_id} for item {item_id}")
            raise DuplicateReviewForUserItem() from e
        logger.info(f"Review rejected, item {item_id} or user {user_id} does not exist")
        raise NotFound(f"Item {item_id} or user {user_id} not found") from e
    db.refresh(review)

    logger.info(f"Review {review.id} created by user {user_id} for item {item_id}")

    return review


def list_reviews(db: Session, item_id: uuid.UUID) -> Sequence[Review]:
    """List all reviews of an item (empty for unknown items)."""
    stmt = select(Review).where(Review.item_id == item_id)
    return db.execute(stmt).scalars().all()


def get_review(db: Session, review_id: uuid.UUID) -> Review | None:
    """Get a review by id, or None."""
    return db.get(Review, review_id)


def update_review(
    db: Session,
    acting_user_id: uuid.UUID,
    review_id: uuid.UUID,
    fields: dict[str, Any],
) -> Review:
    """
    Update text and/or rating of a review the acting user owns.

    Args:
        db: Database session
        acting_user_id: The resolved caller
        review_id: Review to update
        fields: Subset of {"text", "rating"} to change

    Returns:
        The updated review

    Raises:
        NotFound: If no review with that id is owned by acting_user_id
    """
    owned = (Review.id == review_id, Review.user_id == acting_user_id)

    if fields:
        stmt = update(Review).where(*owned).values(**fields).returning(Review)
        review = db.execute(stmt).scalar_one_or_none()
        db.commit()
    else:
        review = db.execute(select(Review).where(*owned)).scalar_one_or_none()

    if review is None:
        logger.info(f"Review update matched no row: {review_id} for user {acting_user_id}")
        raise NotFound(f"Review with id {review_id} not found")

    return review


def delete_review(db: Session, acting_user_id: uuid.UUID, review_id: uuid.UUID) -> None:
    """
    Delete a review the acting user owns, along with its comments.

    Raises:
        NotFound: If no review with that id is owned by acting_user_id
    """
    stmt = delete(Review).where(
        Review.id == review_id,
        Review.user_id == acting_user_id,
    )
    result = db.execute(stmt)
    db.commit()

    if result.rowcount == 0:
        logger.info(f"Review delete matched no row: {review_id} for user {acting_user_id}")
        raise NotFound(f"Review with id {review_id} not found")

    logger.info(f"Review {review_id} deleted by user {acting_user_id}")
