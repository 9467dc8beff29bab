from fastapi import Request

from taskboard.core.config import Settings
from taskboard.services.auth_service import AuthService
from taskboard.services.task_store import TaskStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service
