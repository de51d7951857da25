"""Handler checking user credentials."""

import logging

from smart_minutes.exceptions import AuthenticationError, InvalidInputError
from smart_minutes.repositories import UserRepository
from smart_minutes.security import verify_password

logger = logging.getLogger(__name__)


class LoginHandler:
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    def authenticate(self, email: str | None, password: str | None) -> str:
        """
        Returns the id of the user matching the credentials.

        Raises:
            InvalidInputError: If either credential is blank.
            AuthenticationError: If no user matches.
        """
        if not email or not email.strip():
            raise InvalidInputError("email", "email is required")
        if not password:
            raise InvalidInputError("password", "password is required")

        user = self._user_repository.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Login rejected")
            raise AuthenticationError(email)

        logger.info("Login succeeded", extra={"user_id": user.id})
        return user.id
