"""Shared test fixtures: in-memory SQLite store, test settings and an API client."""

import unittest
from datetime import date

from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.engine import Engine

from tasktrack.core.config import Settings
from tasktrack.core.database import build_engine, build_session_factory
from tasktrack.core.security import TokenService, hash_password
from tasktrack.main import create_app
from tasktrack.models import Base, Task, User
from tasktrack.schemas.auth import TokenClaims

TEST_SECRET = "test-secret-key-for-tasktrack-unit-tests"


def make_settings(**overrides: object) -> Settings:
    """Build settings for tests without reading the environment's .env file."""
    values: dict[str, object] = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": SecretStr(TEST_SECRET),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def claims_for(user_id: str) -> TokenClaims:
    """Claims as the auth gate would attach them for user_id."""
    tokens = TokenService.from_settings(make_settings())
    return tokens.verify(tokens.issue(user_id))


class DatabaseTestCase(unittest.TestCase):
    """Fresh in-memory database per test."""

    def make_engine(self) -> Engine:
        return build_engine(make_settings())

    def setUp(self) -> None:
        self.engine = self.make_engine()
        Base.metadata.create_all(self.engine)
        self.session_factory = build_session_factory(self.engine)
        self.db = self.session_factory()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def add_user(
        self,
        username: str = "testuser",
        email: str = "test@example.com",
        password: str = "password123",
    ) -> User:
        # Low bcrypt cost keeps fixtures fast; verification reads the cost from the hash.
        user = User(username=username, email=email, password_hash=hash_password(password, rounds=4))
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def add_task(
        self,
        user: User,
        title: str = "Task",
        priority: str = "Low",
        description: str | None = None,
        deadline: date | None = None,
    ) -> Task:
        task = Task(
            title=title,
            priority=priority,
            description=description,
            deadline=deadline,
            user_id=user.id,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient for an app built from the test settings.

    The app owns its engine; fixtures write through that same engine.
    """

    def make_engine(self) -> Engine:
        self.settings = make_settings()
        self.tokens = TokenService.from_settings(self.settings)
        self.app = create_app(self.settings)
        return self.app.state.engine

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        super().tearDown()

    def auth_headers(self, user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.tokens.issue(user.id)}"}
