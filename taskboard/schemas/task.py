from pydantic import BaseModel

from taskboard.models.task import Task


class DeleteTaskResponse(BaseModel):
    message: str
    task: Task
