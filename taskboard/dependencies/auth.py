from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from taskboard.core.config import Settings
from taskboard.core.errors import MissingTokenError
from taskboard.dependencies.services import get_app_settings, get_auth_service
from taskboard.services.auth_service import AuthService

# auto_error=False: a missing header must become 401, anything else 403
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def _extract_bearer(request: Request, token: Optional[str]) -> Optional[str]:
    """
    Token from "Authorization: Bearer <token>".
    Returns None when no (or an empty) header was sent and "" when the header has no second part.
    """
    if token:
        return token
    header = request.headers.get("authorization")
    if not header:
        return None
    parts = header.split(" ")
    return parts[1] if len(parts) > 1 else ""


def get_current_user_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    """Strict auth dependency; 401 without a header, 403 for a bad token."""
    jwt_token = _extract_bearer(request, token)
    if jwt_token is None:
        raise MissingTokenError("Access denied, token missing.")
    return auth.verify(jwt_token)


def get_task_owner_id(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_app_settings),
    auth: AuthService = Depends(get_auth_service),
) -> Optional[str]:
    """Auth gate for task routes; open (returns None) when AUTH_ENABLED is false."""
    if not settings.auth_enabled:
        return None
    return get_current_user_id(request, token, auth)
