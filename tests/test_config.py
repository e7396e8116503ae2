"""Unit tests for tasktrack.core.config.Settings validation."""

import unittest

from pydantic import SecretStr, ValidationError

from support import make_settings
from tasktrack.core.config import DEFAULT_JWT_SECRET


class TestSettingsDefaults(unittest.TestCase):
    def test_token_expiry_defaults_to_one_hour(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")

    def test_settings_are_immutable(self) -> None:
        settings = make_settings()
        with self.assertRaises(ValidationError):
            settings.JWT_EXPIRE_MINUTES = 5


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_non_sql_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mongodb://localhost:27017/tasks")

    def test_accepts_postgres_url(self) -> None:
        settings = make_settings(DATABASE_URL=" postgresql://u:p@db:5432/tasktrack ")
        self.assertEqual(settings.DATABASE_URL, "postgresql://u:p@db:5432/tasktrack")

    def test_rejects_blank_secret(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET=SecretStr("   "))

    def test_rejects_asymmetric_algorithm(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_ALGORITHM="RS256")

    def test_normalizes_algorithm_case(self) -> None:
        self.assertEqual(make_settings(JWT_ALGORITHM="hs512").JWT_ALGORITHM, "HS512")

    def test_rejects_out_of_range_expiry(self) -> None:
        for minutes in (0, 10081):
            with self.subTest(minutes=minutes):
                with self.assertRaises(ValidationError):
                    make_settings(JWT_EXPIRE_MINUTES=minutes)

    def test_rejects_bad_port(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PORT=70000)

    def test_rejects_unknown_log_level(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(LOG_LEVEL="verbose")

    def test_prod_refuses_default_secret(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(APP_ENV="prod", JWT_SECRET=SecretStr(DEFAULT_JWT_SECRET))

    def test_prod_accepts_custom_secret(self) -> None:
        settings = make_settings(APP_ENV="prod")
        self.assertEqual(settings.APP_ENV, "prod")


if __name__ == "__main__":
    unittest.main()
