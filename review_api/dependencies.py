"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Dependencies here:
- DbSession: per-request database session
- Tokens: the process-wide token service
- CurrentUser: the resolved caller (every authenticated route uses it)
- OwnerUser: the resolved caller, additionally required to equal the
  {user_id} declared in the route path
"""

import uuid
from typing import Annotated

from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from review_api.database import get_db
from review_api.schemas.user import UserIdentity
from review_api.services.identity import authorize, resolve_identity
from review_api.services.security import TokenService, get_token_service

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]
Tokens = Annotated[TokenService, Depends(get_token_service)]


# =============================================================================
# Bearer Token Authentication
# =============================================================================
# HTTPBearer extracts the token from "Authorization: Bearer <token>" and adds
# the "Authorize" button to Swagger UI. auto_error=False lets a missing header
# fail through resolve_identity like any other bad token, with the same 401.

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    db: DbSession,
    token_service: Tokens,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> UserIdentity:
    """
    Resolve the caller from the bearer token.

    Raises:
        NotAuthorized: If the token is missing, invalid, or its user is gone
    """
    token = credentials.credentials if credentials else None
    return resolve_identity(db, token_service, token)


CurrentUser = Annotated[UserIdentity, Depends(get_current_user)]


def get_path_owner(
    current_user: CurrentUser,
    user_id: uuid.UUID = Path(..., description="Owner declared by the route"),
) -> UserIdentity:
    """
    Resolve the caller and require them to be the {user_id} in the path.

    Used by every update/delete route under /users/{user_id}/...

    Raises:
        NotAuthorized: If the caller is not the declared owner
    """
    authorize(current_user, user_id)
    return current_user


OwnerUser = Annotated[UserIdentity, Depends(get_path_owner)]
