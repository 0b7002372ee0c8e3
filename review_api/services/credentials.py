"""
Credential Store

Persists username → password hash and checks login attempts.

Security Features:
=================
1. Plain passwords are hashed with bcrypt and never stored or logged
2. Username uniqueness is enforced by the database constraint, so two
   concurrent registrations of the same name cannot both succeed
3. Unknown usernames and wrong passwords fail identically (same error,
   comparable timing)
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from review_api.errors import DuplicateUsername, InvalidCredentials
from review_api.models import User
from review_api.services.security import (
    dummy_verify_password,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


def register_user(db: Session, username: str, password: str) -> User:
    """
    Create a user with a freshly generated id and a hashed password.

    Args:
        db: Database session
        username: Case-sensitive username
        password: Plain text password

    Returns:
        The persisted User record

    Raises:
        DuplicateUsername: If the username is already registered
    """
    user = User(
        username=username,
        password_hash=hash_password(password),
    )

    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Registration rejected, username taken: {username}")
        raise DuplicateUsername() from e
    db.refresh(user)

    logger.info(f"New user registered: {user.username}")

    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Args:
        db: Database session
        username: Username to look up
        password: Plain text password to verify

    Returns:
        The matching User record

    Raises:
        InvalidCredentials: If the user does not exist or the password is wrong
    """
    stmt = select(User).where(User.username == username)
    user = db.execute(stmt).scalar_one_or_none()

    if user is None:
        dummy_verify_password()
        logger.warning(f"Login failed: user not found for {username}")
        raise InvalidCredentials()

    if not verify_password(password, user.password_hash):
        logger.warning(f"Login failed: incorrect password for {username}")
        raise InvalidCredentials()

    return user
