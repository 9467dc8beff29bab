# taskboard/routers/auth.py
from fastapi import APIRouter, Depends

from taskboard.dependencies.auth import get_current_user_id
from taskboard.dependencies.services import get_auth_service
from taskboard.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserOut,
)
from taskboard.services.auth_service import AuthService

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@auth_router.post("/register", response_model=MessageResponse, status_code=201)
def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    # sync route: bcrypt runs in the threadpool and the response waits for it
    auth.register(body.username, body.email, body.password)
    return MessageResponse(message="User registered successfully.")


@auth_router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return TokenResponse(token=auth.login(body.email, body.password))


@auth_router.get("/me", response_model=UserOut)
def me(
    user_id: str = Depends(get_current_user_id),
    auth: AuthService = Depends(get_auth_service),
):
    user = auth.current_user(user_id)
    return UserOut(id=user.id, username=user.username, email=user.email)
