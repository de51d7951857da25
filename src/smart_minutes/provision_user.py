"""CLI to register a user who can log in to the service.

Usage:
    smart-minutes-create-user --email alice@example.com --password changeme

Connects to the database configured through the POSTGRES_* environment
variables and creates the tables if they do not exist yet.
"""

import argparse
import logging

from smart_minutes.config import load_config
from smart_minutes.dependencies import session_factory
from smart_minutes.logging import setup_logging
from smart_minutes.repositories import UserRepository

logger = logging.getLogger(__name__)


def create_user(email: str, password: str) -> str | None:
    """Registers a user; returns None when the email is already taken."""
    users = UserRepository(session_factory)
    if users.find_by_email(email) is not None:
        return None
    return users.create(email, password)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Register a Smart Minutes user")
    parser.add_argument("--email", required=True, help="Login email")
    parser.add_argument("--password", required=True, help="Initial password")
    args = parser.parse_args(argv)

    setup_logging(load_config().log_level)

    if not args.email.strip() or not args.password:
        parser.error("email and password must not be empty")

    user_id = create_user(args.email, args.password)
    if user_id is None:
        parser.error(f"a user with email '{args.email}' already exists")

    logger.info("User provisioned", extra={"user_id": user_id})
    print(user_id)


if __name__ == "__main__":
    main()
