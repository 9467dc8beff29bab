from __future__ import annotations

import logging

from jose import JWTError

from taskboard.core.config import Settings
from taskboard.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)
from taskboard.core.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password
from taskboard.core.tokens import create_access_token, verify_access_token
from taskboard.models.user import User
from taskboard.services.user_store import UserStore

log = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users: UserStore, settings: Settings):
        self.users = users
        self.settings = settings

    def register(self, username: str | None, email: str | None, password: str | None) -> User:
        """
        Create a user with a bcrypt-hashed password.
        - all three fields are required and non-empty
        - email must not be registered yet (ConflictError)
        """
        if not username or not email or not password:
            raise ValidationError(["All fields are required."])
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError([f"Password must be at most {MAX_PASSWORD_BYTES} bytes."])

        # Fail fast before paying for the hash; add() re-checks atomically.
        if self.users.get_by_email(email) is not None:
            raise ConflictError("A user with this email already exists.")

        password_hash = hash_password(password, self.settings.bcrypt_rounds)
        user = self.users.add(User(username=username, email=email, password_hash=password_hash))
        log.info("User registered: %s", user.id)
        return user

    def login(self, email: str | None, password: str | None) -> str:
        user = self.users.get_by_email(email) if email else None
        if user is None:
            log.warning("Login failed: unknown email")
            raise InvalidCredentialsError("Invalid email or password.")
        if not password or not verify_password(password, user.password_hash):
            log.warning("Login failed: bad password for user %s", user.id)
            raise InvalidCredentialsError("Invalid email or password.")
        return create_access_token(user.id, self.settings)

    def verify(self, token: str) -> str:
        """Return the user id carried by a valid token, else raise InvalidTokenError."""
        try:
            payload = verify_access_token(token, self.settings)
        except JWTError as exc:
            log.warning("Rejected token: %s", exc)
            raise InvalidTokenError("Invalid or expired token.")
        return payload["sub"]

    def current_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
