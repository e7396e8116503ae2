"""Account service: registration and login. The only places that create credentials or mint tokens."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktrack.core.security import TokenService, hash_password, verify_password
from tasktrack.models import User
from tasktrack.services.errors import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS = "All fields are required."
USER_EXISTS = "User already exists."
USER_NOT_FOUND = "User not found."
INVALID_CREDENTIALS = "Invalid credentials."


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def register_user(
    db: Session,
    username: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Raises ValidationError if any field is empty and ConflictError if the email
    is already registered.
    """
    if _is_blank(username) or _is_blank(email) or _is_blank(password):
        raise ValidationError(MISSING_FIELDS)

    email = normalize_email(email)
    if db.query(User).filter(User.email == email).first() is not None:
        raise ConflictError(USER_EXISTS)

    user = User(
        username=username.strip(),
        email=email,
        password_hash=hash_password(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email.
        db.rollback()
        raise ConflictError(USER_EXISTS) from e
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def authenticate_user(db: Session, email: str | None, password: str | None) -> User:
    """Return the user whose email and password match, or raise."""
    if _is_blank(email) or _is_blank(password):
        raise ValidationError(MISSING_FIELDS)

    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    if not verify_password(password, user.password_hash):
        logger.info("Failed login for user id=%s", user.id)
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return user


def login(
    db: Session,
    tokens: TokenService,
    email: str | None,
    password: str | None,
) -> str:
    """Verify credentials and return a signed token for the user."""
    user = authenticate_user(db, email, password)
    token = tokens.issue(user.id)
    logger.info("Issued token for user id=%s", user.id)
    return token
