from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# taskboard.main builds a module-level app from the environment on import
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from fastapi.testclient import TestClient  # noqa: E402

from taskboard.core.config import Settings  # noqa: E402
from taskboard.main import create_app  # noqa: E402


def make_settings(**overrides) -> Settings:
    values = {
        "JWT_SECRET_KEY": "test-secret-key",
        "BCRYPT_ROUNDS": 4,
        "LOG_LEVEL": "WARNING",
        "AUTH_ENABLED": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings) -> TestClient:
    """Auth-enabled application with fresh stores."""
    return TestClient(create_app(settings))


@pytest.fixture
def open_client() -> TestClient:
    """Application with AUTH_ENABLED=false."""
    return TestClient(create_app(make_settings(AUTH_ENABLED=False)))


@pytest.fixture
def register_and_login(client):
    def _do(email: str = "alice@example.com", password: str = "s3cret!", username: str = "alice"):
        r = client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        assert r.status_code == 201, r.text
        r = client.post("/api/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}

    return _do


@pytest.fixture
def auth_headers(register_and_login):
    return register_and_login()
