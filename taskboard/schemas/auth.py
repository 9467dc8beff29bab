from typing import Optional

from pydantic import BaseModel


# missing fields are reported by AuthService, not by request parsing
class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str


class UserOut(BaseModel):
    id: str
    username: str
    email: str
