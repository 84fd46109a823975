"""Tests for User entity and UserId."""

import pytest

from domain.user.core.entities.user import User
from domain.user.core.value_objects.email_address import EmailAddress
from domain.user.core.value_objects.user_id import UserId


def test_user_id_strips_whitespace():
    """Test UserId normalises surrounding whitespace."""
    assert UserId(" 42 ").value == "42"
    assert UserId(" 42 ") == UserId("42")


@pytest.mark.parametrize("value", ["", "   "])
def test_user_id_rejects_empty(value):
    """Test empty identifiers are rejected."""
    with pytest.raises(ValueError, match="cannot be empty"):
        UserId(value)


def test_user_id_rejects_non_string():
    """Test non-string identifiers are rejected."""
    with pytest.raises(ValueError):
        UserId(42)  # type: ignore[arg-type]


def test_handle_with_username():
    """Test handle is the @-prefixed username."""
    user = User(user_id=UserId("1"), name="Ada", username="ada")
    assert user.handle == "@ada"


@pytest.mark.parametrize("username", [None, ""])
def test_handle_without_username(username):
    """Test handle is None without a username."""
    user = User(user_id=UserId("1"), name="Ada", username=username)
    assert user.handle is None


def test_change_email_sets_and_clears():
    """Test email can be set and cleared."""
    user = User(user_id=UserId("1"), name="Ada")

    user.change_email(EmailAddress("ada@example.com"))
    assert user.email == "ada@example.com"

    user.change_email(None)
    assert user.email is None


def test_stored_email_loaded_as_is():
    """Test emails from other systems are not re-validated on load."""
    user = User(user_id=UserId("1"), name="Bob", email="bob@localhost")

    assert user.email == "bob@localhost"


def test_equality_by_identity():
    """Test users compare by id only."""
    a = User(user_id=UserId("1"), name="Ada")
    b = User(user_id=UserId("1"), name="Someone else", email="x@y.z")

    assert a == b
    assert hash(a) == hash(b)
    assert a != User(user_id=UserId("2"), name="Ada")
