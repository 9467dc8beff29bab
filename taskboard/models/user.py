from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    username: str
    email: str
    password_hash: str  # bcrypt, never serialized to clients
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
