"""Repository for user accounts."""

import logging
from collections.abc import Callable
from contextlib import AbstractContextManager

from sqlmodel import Session, select

from smart_minutes.db_models import UserAccount
from smart_minutes.exceptions import PersistenceError
from smart_minutes.security import hash_password

logger = logging.getLogger(__name__)


class UserRepository:
    """Looks up and registers users by email."""

    def __init__(self, session_factory: Callable[[], AbstractContextManager[Session]]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> UserAccount | None:
        statement = select(UserAccount).where(UserAccount.email == email.strip().lower())
        try:
            with self._session_factory() as db_session:
                return db_session.exec(statement).first()
        except Exception as e:
            logger.exception("Failed to look up user")
            raise PersistenceError(email, cause=e) from e

    def create(self, email: str, password: str) -> str:
        """
        Registers a user with a bcrypt-hashed password.

        Returns:
            The new user's id.
        """
        user = UserAccount(
            email=email.strip().lower(), password_hash=hash_password(password)
        )
        try:
            with self._session_factory() as db_session:
                db_session.add(user)
                db_session.commit()
                db_session.refresh(user)
                user_id = user.id
        except Exception as e:
            logger.exception("Failed to create user")
            raise PersistenceError(email, cause=e) from e

        logger.info("User created", extra={"user_id": user_id})
        return user_id
