"""Database engine and session management."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasktrack.core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create an engine for settings.DATABASE_URL."""
    url = settings.DATABASE_URL
    kwargs: dict = {"echo": settings.DEBUG}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory databases live in a single connection.
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def session_factory_for(settings: Settings) -> sessionmaker[Session]:
    """Engine + sessionmaker for callers outside the web app (CLI scripts)."""
    return build_session_factory(build_engine(settings))


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a session from the app's own engine and closes it when done."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
