"""
Identity Resolution and Authorization

resolve_identity() is the single gate every authenticated endpoint passes
through: token → live user. authorize() is the ownership check run before
any update or delete of a review or comment.

There are exactly two authority levels: the owner of a resource, and
everyone else. There is no administrative override.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from review_api.errors import InvalidToken, NotAuthorized
from review_api.models import User
from review_api.schemas.user import UserIdentity
from review_api.services.security import TokenService

logger = logging.getLogger(__name__)


def resolve_identity(
    db: Session,
    token_service: TokenService,
    token: str | None,
) -> UserIdentity:
    """
    Recover the user a token was issued to.

    A missing token, a bad token and a token for a user that no longer
    exists all fail the same way, so callers cannot tell them apart.

    Args:
        db: Database session
        token_service: Service that verifies token signatures
        token: Raw token string (may be None if no header was sent)

    Returns:
        The caller's {id, username}

    Raises:
        NotAuthorized: If no live user can be recovered from the token
    """
    if not token:
        raise NotAuthorized()

    try:
        user_id = token_service.verify(token)
    except InvalidToken as e:
        raise NotAuthorized() from e

    stmt = select(User.id, User.username).where(User.id == user_id)
    row = db.execute(stmt).one_or_none()

    if row is None:
        logger.warning(f"Token refers to unknown user: {user_id}")
        raise NotAuthorized()

    return UserIdentity(id=row.id, username=row.username)


def authorize(identity: UserIdentity, owner_id: uuid.UUID) -> None:
    """
    Require the acting identity to be the resource owner.

    Raises:
        NotAuthorized: If identity.id != owner_id
    """
    if identity.id != owner_id:
        logger.warning(
            f"User {identity.id} attempted to act on resources of user {owner_id}"
        )
        raise NotAuthorized()
