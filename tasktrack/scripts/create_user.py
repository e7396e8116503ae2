"""
Create a user account from the command line. Run from project root:
  python -m tasktrack.scripts.create_user USERNAME EMAIL PASSWORD
Example:
  python -m tasktrack.scripts.create_user alice alice@example.com your-secure-password
"""
import argparse
import sys

from tasktrack.core.config import get_settings
from tasktrack.core.database import session_factory_for
from tasktrack.core.log import configure_logging
from tasktrack.services.accounts import register_user
from tasktrack.services.errors import ServiceError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Tasktrack user account.")
    parser.add_argument("username", help="Display name")
    parser.add_argument("email", help="Login email (must be unique)")
    parser.add_argument("password", help="Password")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    db = session_factory_for(settings)()
    try:
        user = register_user(db, args.username, args.email, args.password)
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' <{user.email}> with id {user.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
