"""Core app configuration, database and security."""

from tasktrack.core.config import Settings, get_settings
from tasktrack.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
