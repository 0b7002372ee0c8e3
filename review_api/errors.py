"""
Service Errors

Every core operation either returns a value or raises exactly one of these
exceptions. They describe WHAT went wrong, not how to present it: each class
carries the HTTP status the boundary layer should use, and main.py registers
a single handler that renders them.

Error Kinds:
- DuplicateUsername: username already registered
- InvalidCredentials: unknown username OR wrong password (indistinguishable)
- InvalidToken: bad signature, malformed payload or expired token
- NotAuthorized: no usable identity, or identity is not the resource owner
- DuplicateReviewForUserItem: second review by the same user on the same item
- NotFound: no row matched (wrong id, not the owner, or already deleted)
"""

from fastapi import status


class ReviewServiceError(Exception):
    """Base class for all typed failures raised by the core."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateUsername(ReviewServiceError):
    """Raised when registering a username that is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Username already taken"


class InvalidCredentials(ReviewServiceError):
    """Raised when login fails, without saying which half was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "not authorized"


class InvalidToken(ReviewServiceError):
    """Raised by the token service; never reaches HTTP callers directly."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "not authorized"


class NotAuthorized(ReviewServiceError):
    """Raised when a request has no valid identity or is not the owner."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "not authorized"


class DuplicateReviewForUserItem(ReviewServiceError):
    """Raised when a user reviews the same item a second time."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "You have already reviewed this item"


class NotFound(ReviewServiceError):
    """Raised when a lookup or ownership-scoped mutation matched no row."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
