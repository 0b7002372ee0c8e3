"""
Authentication Router

Handles user authentication endpoints:
- Registration (username/password → token)
- Login (username/password → token)
- Get current user (token → {id, username})

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Tokens are stateless JWTs; there is no session table and no logout
"""

import logging

from fastapi import APIRouter

from review_api.dependencies import CurrentUser, DbSession, Tokens
from review_api.schemas.user import Credentials, LoginRequest, TokenResponse, UserIdentity
from review_api.services.credentials import authenticate_user, register_user

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        401: {"description": "Unauthorized"},
        409: {"description": "Conflict (username already exists)"},
    },
)


@router.post(
    "/register",
    response_model=TokenResponse,
    summary="Register a new user",
    description="""
    Create a new user account and receive an identity token.

    **Username Requirements:**
    - 1-20 characters
    - Case-sensitive and unique
    """,
)
def register(
    user_data: Credentials,
    db: DbSession,
    token_service: Tokens,
) -> TokenResponse:
    """
    Register a new user and log them straight in.

    Raises:
        DuplicateUsername: 409 if the username is taken
    """
    user = register_user(db, user_data.username, user_data.password)
    return TokenResponse(token=token_service.issue(user.id))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with username and password",
    description="""
    Authenticate with username and password to receive an identity token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
def login(
    user_data: LoginRequest,
    db: DbSession,
    token_service: Tokens,
) -> TokenResponse:
    """
    Raises:
        InvalidCredentials: 401 for an unknown user or a wrong password
    """
    user = authenticate_user(db, user_data.username, user_data.password)

    logger.info(f"User logged in: {user.username}")

    return TokenResponse(token=token_service.issue(user.id))


@router.get(
    "/me",
    response_model=UserIdentity,
    summary="Get current user",
)
def get_me(current_user: CurrentUser) -> UserIdentity:
    """Return the authenticated caller's id and username."""
    return current_user
