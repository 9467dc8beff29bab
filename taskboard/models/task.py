from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def new_task_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class Task(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=new_task_id)
    title: str
    description: str = ""
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: Optional[str] = None  # YYYY-MM-DD, kept as submitted
    created_at: datetime = Field(default_factory=_utcnow)
    owner_id: Optional[str] = None  # only set when auth is enabled
