"""
User Pydantic Schemas

Schemas:
- Credentials: Registration body (username, password)
- LoginRequest: Login body (username, password)
- TokenResponse: What register and login return
- UserIdentity: The minimal identity projection (never the password hash)
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """
    Username/password pair used by /auth/register.

    Usernames are case-sensitive and are stored exactly as given.
    """

    username: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Unique username (at most 20 characters)",
        examples=["moe"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=72,  # bcrypt only uses the first 72 bytes
        description="Plain text password",
        examples=["m_pw"],
    )


class LoginRequest(BaseModel):
    """
    Username/password pair for /auth/login.

    No length limits beyond non-empty: a pair that cannot match any account
    fails as invalid credentials, not as a validation error.
    """

    username: str = Field(..., min_length=1, examples=["moe"])
    password: str = Field(..., min_length=1, examples=["m_pw"])


class TokenResponse(BaseModel):
    """
    Identity token returned after registration or login.

    Send it back as:
        Authorization: Bearer <token>
    """

    token: str = Field(..., description="Signed identity token")
    token_type: str = Field(default="bearer", description="Token type")


class UserIdentity(BaseModel):
    """
    Schema for the authenticated caller.

    SECURITY: Never includes the password hash.
    """

    id: uuid.UUID = Field(..., description="Unique user identifier")
    username: str = Field(..., description="Unique username")

    model_config = ConfigDict(from_attributes=True)
