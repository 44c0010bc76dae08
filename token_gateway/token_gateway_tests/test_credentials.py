import pytest

from token_gateway.token_gateway.auth_service.credentials import (
    create_user,
    find_user_by_email,
    normalize_email,
    verify_secret,
)
from token_gateway.token_gateway.auth_service.serializers import serialize_user


def test_normalize_email():
    assert normalize_email("  John.Doe@Example.COM ") == "john.doe@example.com"


def test_create_user_hashes_secret(db_session):
    user = create_user("Test@Test.com", "password123", db_session, name="John Doe")
    assert user.email == "test@test.com"
    assert user.password != "password123"
    assert verify_secret("password123", user.password)
    assert not verify_secret("wrong", user.password)


def test_create_user_rejects_duplicate_email(db_session, user):
    with pytest.raises(ValueError):
        create_user("TEST@test.com", "another", db_session)


def test_create_user_rejects_empty_email(db_session):
    with pytest.raises(ValueError):
        create_user("   ", "password123", db_session)


def test_find_user_by_email(db_session, user):
    assert find_user_by_email("Test@Test.com", db_session).id == user.id
    assert find_user_by_email("missing@test.com", db_session) is None


def test_serialize_user_emits_only_public_attributes(user):
    assert serialize_user(user) == {
        "id": str(user.id),
        "type": "users",
        "attributes": {"name": "John Doe", "email": "test@test.com"},
    }
