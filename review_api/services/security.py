"""
Security Service

Handles password hashing and identity token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib), fixed configurable work factor
2. Stateless JWT identity tokens (python-jose), no server-side session table
3. Constant-time password verification

Usage:
    from review_api.services.security import hash_password, verify_password

    hashed = hash_password("m_pw")
    is_valid = verify_password("m_pw", hashed)

    tokens = get_token_service()
    token = tokens.issue(user.id)
    user_id = tokens.verify(token)
"""

import logging
import uuid
from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from review_api.config import get_settings
from review_api.errors import InvalidToken

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# - schemes: bcrypt is salted and deliberately slow
# - deprecated: "auto" means old hashes are automatically upgraded
# - default_rounds: the work factor, fixed for the life of the process
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("m_pw")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify_password() -> None:
    """
    Spend the time a real verification would take.

    Called when the username does not exist, so a failed login for an
    unknown user takes as long as one with a wrong password.
    """
    pwd_context.dummy_verify()


# -------------------------------------------------------------------------
# Identity Tokens
# -------------------------------------------------------------------------
class TokenService:
    """
    Issues and verifies signed identity tokens.

    The token's only identity claim is the user id (``sub``). Verification
    checks nothing but the signature, the structure and, when configured,
    the expiry; it never touches the database.

    Args:
        secret_key: Signing secret, fixed at construction
        algorithm: JWT signing algorithm
        expires_delta: Token lifetime; None means tokens never expire
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_delta: timedelta | None = None,
    ) -> None:
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, user_id: uuid.UUID) -> str:
        """
        Create a signed token for a user.

        The payload embeds the issue time, so two tokens for the same user
        may differ.

        Example:
            >>> token = TokenService("secret").issue(uuid.uuid4())
            >>> token.count(".") == 2  # JWT format: header.payload.signature
            True
        """
        now = datetime.now(UTC)
        claims = {"sub": str(user_id), "iat": now}
        if self.expires_delta is not None:
            claims["exp"] = now + self.expires_delta

        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> uuid.UUID:
        """
        Decode a token and return the user id it carries.

        Raises:
            InvalidToken: bad signature, malformed payload or expired token
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
            )
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise InvalidToken() from e

        try:
            return uuid.UUID(payload["sub"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("JWT payload has no valid subject")
            raise InvalidToken() from e


@lru_cache
def get_token_service() -> TokenService:
    """Token service built once from application settings."""
    expires_delta = None
    if settings.access_token_expire_minutes is not None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    return TokenService(
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
        expires_delta=expires_delta,
    )
