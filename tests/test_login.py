"""Tests for credential checks."""

import pytest

from smart_minutes.exceptions import AuthenticationError, InvalidInputError
from smart_minutes.handlers import LoginHandler
from smart_minutes.repositories import UserRepository
from smart_minutes.security import hash_password, verify_password


@pytest.fixture
def users(session_factory) -> UserRepository:
    return UserRepository(session_factory)


@pytest.fixture
def handler(users) -> LoginHandler:
    return LoginHandler(users)


def test_valid_credentials_return_user_id(users, handler):
    user_id = users.create("Alice@Example.com", "s3cret")

    assert handler.authenticate("alice@example.com ", "s3cret") == user_id


def test_wrong_password_is_rejected(users, handler):
    users.create("alice@example.com", "s3cret")

    with pytest.raises(AuthenticationError):
        handler.authenticate("alice@example.com", "wrong")


def test_unknown_email_is_rejected(handler):
    with pytest.raises(AuthenticationError):
        handler.authenticate("nobody@example.com", "anything")


@pytest.mark.parametrize("email, password", [("", "pw"), ("a@b.c", ""), (None, None)])
def test_blank_credentials_are_invalid(handler, email, password):
    with pytest.raises(InvalidInputError):
        handler.authenticate(email, password)


def test_password_is_stored_hashed(users, session_factory):
    users.create("alice@example.com", "s3cret")

    stored = users.find_by_email("alice@example.com")

    assert stored.password_hash != "s3cret"
    assert verify_password("s3cret", stored.password_hash)


def test_verify_password_tolerates_non_bcrypt_hash():
    assert verify_password("s3cret", "s3cret") is False
    assert verify_password("s3cret", hash_password("s3cret")) is True
