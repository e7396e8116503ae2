"""Registration and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tasktrack.api.deps import get_token_service
from tasktrack.core.database import get_db
from tasktrack.core.security import TokenService
from tasktrack.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserPublic,
)
from tasktrack.services import accounts

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RegisterResponse:
    """Create an account. Email must not already be registered."""
    user = accounts.register_user(db, body.username, body.email, body.password)
    return RegisterResponse(
        message="User registered successfully.",
        user=UserPublic.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    token = accounts.login(db, tokens, body.email, body.password)
    return LoginResponse(message="Login successful.", token=token)
