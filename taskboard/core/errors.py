"""Error taxonomy shared by services and mapped to HTTP responses in main."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class TaskboardError(Exception):
    status_code: int = 500
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(TaskboardError):
    """Payload violated one or more field rules; every violation is reported."""

    status_code = 400

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)

    def to_body(self) -> Dict[str, Any]:
        return {"errors": self.errors}


class InvalidFilterError(TaskboardError):
    status_code = 400


class NotFoundError(TaskboardError):
    status_code = 404


class ConflictError(TaskboardError):
    status_code = 400


class InvalidCredentialsError(TaskboardError):
    status_code = 400


class MissingTokenError(TaskboardError):
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenError(TaskboardError):
    status_code = 403
