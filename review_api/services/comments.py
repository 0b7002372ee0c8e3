"""
Comments Service

Comments follow the same ownership-scoped statement pattern as reviews
(see review_api.services.reviews). Unlike reviews, a user may comment on
the same review any number of times.
"""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from review_api.errors import NotFound
from review_api.models import Comment

logger = logging.getLogger(__name__)


def create_comment(
    db: Session,
    text: str,
    user_id: uuid.UUID,
    review_id: uuid.UUID,
) -> Comment:
    """
    Create a comment owned by user_id.

    Raises:
        NotFound: If the review or the user does not exist
    """
    comment = Comment(text=text, user_id=user_id, review_id=review_id)

    db.add(comment)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Comment rejected, review {review_id} or user {user_id} does not exist")
        raise NotFound(f"Review {review_id} or user {user_id} not found") from e
    db.refresh(comment)

    return comment


def list_comments_by_user(db: Session, user_id: uuid.UUID) -> Sequence[Comment]:
    """List every comment written by a user."""
    stmt = select(Comment).where(Comment.user_id == user_id)
    return db.execute(stmt).scalars().all()


def update_comment(
    db: Session,
    acting_user_id: uuid.UUID,
    comment_id: uuid.UUID,
    text: str,
) -> Comment:
    """
    Replace the text of a comment the acting user owns.

    Raises:
        NotFound: If no comment with that id is owned by acting_user_id
    """
    stmt = (
        update(Comment)
        .where(Comment.id == comment_id, Comment.user_id == acting_user_id)
        .values(text=text)
        .returning(Comment)
    )
    comment = db.execute(stmt).scalar_one_or_none()
    db.commit()

    if comment is None:
        logger.info(f"Comment update matched no row: {comment_id} for user {acting_user_id}")
        raise NotFound(f"Comment with id {comment_id} not found")

    return comment


def delete_comment(db: Session, acting_user_id: uuid.UUID, comment_id: uuid.UUID) -> None:
    """
    Delete a comment the acting user owns.

    Raises:
        NotFound: If no comment with that id is owned by acting_user_id
    """
    stmt = delete(Comment).where(
        Comment.id == comment_id,
        Comment.user_id == acting_user_id,
    )
    result = db.execute(stmt)
    db.commit()

    if result.rowcount == 0:
        logger.info(f"Comment delete matched no row: {comment_id} for user {acting_user_id}")
        raise NotFound(f"Comment with id {comment_id} not found")
