"""Request/response schemas for auth endpoints and verified token claims."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

USERNAME_MAX_LEN = 255
EMAIL_MAX_LEN = 320
PASSWORD_MAX_LEN = 128


class RegisterRequest(BaseModel):
    """
    Body for POST /auth/register.

    Fields are optional at the schema level so that a missing or empty field is
    reported by the account service with its own message rather than a schema error.
    """

    model_config = ConfigDict(extra="forbid")

    username: str | None = Field(default=None, max_length=USERNAME_MAX_LEN)
    email: str | None = Field(default=None, max_length=EMAIL_MAX_LEN)
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN)


class LoginRequest(BaseModel):
    """Credentials for login."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = Field(default=None, max_length=EMAIL_MAX_LEN)
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN)


class UserPublic(BaseModel):
    """User view safe to return to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str


class RegisterResponse(BaseModel):
    message: str
    user: UserPublic


class LoginResponse(BaseModel):
    """JWT access token returned after successful login."""

    message: str
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")


class TokenClaims(BaseModel):
    """Verified identity claim set attached to each authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    issued_at: datetime
    expires_at: datetime
