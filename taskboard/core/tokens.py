from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import JWTError, jwt

from taskboard.core.config import Settings


# ---- common ----
def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def _make_jwt(payload: Dict[str, Any], settings: Settings, exp: datetime) -> str:
    to_encode = payload.copy()
    to_encode["iat"] = int(_utcnow().timestamp())
    to_encode["exp"] = int(exp.timestamp())
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def _decode(token: str, settings: Settings) -> Dict[str, Any]:
    # jose.jwt.decode raises JWTError (ExpiredSignatureError included) on failure
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


# ---- access token ----
def create_access_token(
    sub: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Issue a signed access token for the given user id.
    expires_delta overrides ACCESS_TOKEN_EXPIRE_MINUTES (negative values yield an expired token).
    """
    delta = expires_delta if expires_delta is not None else timedelta(
        minutes=settings.access_token_expire_minutes
    )
    payload = {"sub": str(sub), "typ": "access"}
    return _make_jwt(payload, settings, _utcnow() + delta)


def verify_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Return the payload of a valid access token.
    Raises JWTError on bad signature, expiry, wrong type or missing subject.
    """
    payload = _decode(token, settings)
    if payload.get("typ") != "access":
        raise JWTError("Invalid token type")
    if not payload.get("sub"):
        raise JWTError("Missing sub")
    return payload

