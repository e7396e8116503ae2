"""Shared route dependencies: token service and the auth gate for protected routes."""

import logging
from typing import Annotated

from fastapi import Depends, Header, Request, status

from tasktrack.api.errors import AccessDeniedError
from tasktrack.core.config import Settings
from tasktrack.core.security import TokenError, TokenService
from tasktrack.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

TOKEN_REQUIRED = "Access denied. Token is required."
INVALID_TOKEN = "Invalid token."


def get_app_settings(request: Request) -> Settings:
    """Dependency: the settings the running app was built with."""
    return request.app.state.settings


def get_token_service(
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TokenService:
    """Dependency: token service built from the app's settings."""
    return TokenService.from_settings(settings)


def require_claims(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """
    Auth gate: verify the Bearer token and attach its claims to the request.

    401 when the Authorization header is absent, 403 when the token fails
    verification for any reason. The failure cause is logged, never returned.
    """
    if not authorization:
        raise AccessDeniedError(status.HTTP_401_UNAUTHORIZED, TOKEN_REQUIRED)

    parts = authorization.split()
    token = parts[1] if len(parts) > 1 else ""
    try:
        claims = tokens.verify(token)
    except TokenError as e:
        logger.warning(
            "Token verification failed (%s): %s", type(e).__name__, e.message
        )
        raise AccessDeniedError(status.HTTP_403_FORBIDDEN, INVALID_TOKEN) from e

    request.state.claims = claims
    return claims


CurrentClaims = Annotated[TokenClaims, Depends(require_claims)]
