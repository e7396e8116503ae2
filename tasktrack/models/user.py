"""ORM model for registered users."""

from sqlalchemy import Column, DateTime, String

from tasktrack.models.base import Base, new_id, utcnow


class User(Base):
    """
    Registered account. Email is the login identifier and is unique.

    Only the bcrypt hash of the password is stored.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
