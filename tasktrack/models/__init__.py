"""SQLAlchemy ORM models."""

from tasktrack.models.base import Base
from tasktrack.models.task import Task
from tasktrack.models.user import User

__all__ = ["Base", "Task", "User"]
