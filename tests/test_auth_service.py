from datetime import timedelta

import pytest

from taskboard.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)
from taskboard.core.tokens import create_access_token, verify_access_token
from taskboard.services.auth_service import AuthService
from taskboard.services.user_store import UserStore

from conftest import make_settings


@pytest.fixture
def users():
    return UserStore()


@pytest.fixture
def service(users, settings):
    return AuthService(users, settings)


def test_register_hashes_password(service, users):
    user = service.register("alice", "alice@example.com", "s3cret!")

    stored = users.get(user.id)
    assert stored.password_hash != "s3cret!"
    assert stored.password_hash.startswith("$2")


@pytest.mark.parametrize(
    "fields",
    [("", "a@example.com", "pw"), ("a", None, "pw"), ("a", "a@example.com", "")],
)
def test_register_requires_all_fields(service, fields):
    with pytest.raises(ValidationError):
        service.register(*fields)


def test_register_rejects_overlong_password(service):
    with pytest.raises(ValidationError):
        service.register("a", "a@example.com", "x" * 73)


def test_register_duplicate_email_conflicts(service, users):
    service.register("alice", "alice@example.com", "pw1")

    with pytest.raises(ConflictError):
        service.register("alice2", "alice@example.com", "pw2")

    assert len(users) == 1


def test_login_and_verify(service):
    user = service.register("alice", "alice@example.com", "s3cret!")

    token = service.login("alice@example.com", "s3cret!")

    assert service.verify(token) == user.id
    assert service.current_user(user.id).email == "alice@example.com"


@pytest.mark.parametrize(
    ("email", "password"),
    [("alice@example.com", "wrong"), ("bob@example.com", "s3cret!"), (None, None)],
)
def test_login_rejects_bad_credentials(service, email, password):
    service.register("alice", "alice@example.com", "s3cret!")

    with pytest.raises(InvalidCredentialsError):
        service.login(email, password)


def test_verify_rejects_expired_token(service, settings):
    user = service.register("alice", "alice@example.com", "s3cret!")
    expired = create_access_token(user.id, settings, expires_delta=timedelta(minutes=-5))

    with pytest.raises(InvalidTokenError):
        service.verify(expired)


def test_verify_rejects_foreign_signature(service):
    other = make_settings(JWT_SECRET_KEY="another-secret")
    forged = create_access_token("someone", other)

    with pytest.raises(InvalidTokenError):
        service.verify(forged)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_verify_rejects_malformed_token(service, token):
    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_access_token_claims(settings):
    payload = verify_access_token(create_access_token("u1", settings), settings)
    assert payload["sub"] == "u1"
    assert payload["typ"] == "access"
    assert 120 * 60 - 1 <= payload["exp"] - payload["iat"] <= 120 * 60


def test_current_user_unknown(service):
    with pytest.raises(NotFoundError):
        service.current_user("missing")
