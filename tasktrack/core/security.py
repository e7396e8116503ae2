"""Password hashing and JWT issuance/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import SecretStr

from tasktrack.core.config import Settings
from tasktrack.schemas.auth import TokenClaims


# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Claim carrying the authenticated user's identifier.
USER_ID_CLAIM = "userId"


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenError(Exception):
    """Raised when a token cannot be verified. Subclasses name the specific cause."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class TokenSignatureError(TokenError):
    """Signature does not match the server secret."""


class TokenExpiredError(TokenError):
    """Token is past its embedded expiry."""


class TokenClaimError(TokenError):
    """Decoded payload is missing a required claim (userId, exp or iat)."""


class TokenService:
    """
    Issue and verify signed, time-bound identity tokens.

    Stateless: no revocation list, expiry is the only invalidation mechanism.
    The signing key is fixed for the lifetime of the instance.
    """

    def __init__(self, secret: SecretStr, algorithm: str, expire_minutes: int) -> None:
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        """Create a token embedding userId, iat and an exp one expiry window later."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            USER_ID_CLAIM: str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self._secret.get_secret_value(), algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token; return its claims.

        Raises TokenSignatureError, TokenExpiredError or TokenClaimError for the
        specific failure, and TokenError for anything else that does not decode.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret.get_secret_value(),
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired", e) from e
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureError("Token signature does not match", e) from e
        except jwt.MissingRequiredClaimError as e:
            raise TokenClaimError(f"Token is missing required claim: {e.claim}", e) from e
        except jwt.PyJWTError as e:
            raise TokenError(f"Token could not be decoded: {e}", e) from e

        user_id = payload.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id.strip():
            raise TokenClaimError(f"{USER_ID_CLAIM} not found in token payload")
        return TokenClaims(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
