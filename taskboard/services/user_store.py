from __future__ import annotations

import threading
from typing import Dict, Optional

from taskboard.core.errors import ConflictError
from taskboard.models.user import User


class UserStore:
    """Registered users keyed by id, with a unique email index."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._by_email: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def add(self, user: User) -> User:
        with self._lock:
            if user.email in self._by_email:
                raise ConflictError("A user with this email already exists.")
            self._users[user.id] = user
            self._by_email[user.email] = user.id
        return user

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user_id = self._by_email.get(email)
            return self._users.get(user_id) if user_id else None

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
            self._by_email.clear()
