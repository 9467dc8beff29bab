from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from taskboard.core.errors import InvalidFilterError, NotFoundError, ValidationError
from taskboard.models.task import Priority, Task, new_task_id
from taskboard.services.validator import is_valid_date, validate_task_payload

log = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection keyed by id.
    Iteration follows insertion order; every mutation holds the store lock.
    """

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._tasks)

    def list(
        self,
        completed: Optional[str] = None,
        priority: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> List[Task]:
        with self._lock:
            result = list(self._tasks.values())

        if completed is not None:
            val = completed.lower()
            if val not in ("true", "false"):
                raise InvalidFilterError("The completed filter must be true or false.")
            wanted = val == "true"
            result = [t for t in result if t.completed is wanted]

        if priority:
            result = [t for t in result if t.priority.value == priority]

        if due_date:
            if not is_valid_date(due_date):
                raise InvalidFilterError("The dueDate filter must use the YYYY-MM-DD format.")
            result = [t for t in result if t.due_date == due_date]

        return result

    def get(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    def create(self, payload: Dict[str, Any], owner_id: Optional[str] = None) -> Task:
        errors = validate_task_payload(payload, for_update=False)
        if errors:
            raise ValidationError(errors)

        task = Task(
            title=payload["title"].strip(),
            description=str(payload["description"]).strip() if payload.get("description") else "",
            completed=payload.get("completed", False),
            priority=Priority(payload["priority"]) if payload.get("priority") else Priority.MEDIUM,
            due_date=payload.get("dueDate") or None,
            owner_id=owner_id,
        )
        with self._lock:
            while task.id in self._tasks:
                task.id = new_task_id()
            self._tasks[task.id] = task

        log.info("Task created: %s (owner=%s)", task.id, owner_id)
        return task

    def update(self, task_id: str, payload: Dict[str, Any]) -> Task:
        with self._lock:
            if task_id not in self._tasks:
                raise NotFoundError("Task not found")

        errors = validate_task_payload(payload, for_update=True)
        if errors:
            raise ValidationError(errors)

        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise NotFoundError("Task not found")
            # partial update: absent keys keep their current values
            if "title" in payload:
                task.title = payload["title"].strip()
            if "description" in payload:
                task.description = payload["description"].strip()
            if "completed" in payload:
                task.completed = payload["completed"]
            if "priority" in payload:
                task.priority = Priority(payload["priority"])
            if "dueDate" in payload:
                task.due_date = payload["dueDate"]

        log.info("Task updated: %s fields=%s", task_id, sorted(payload))
        return task

    def delete(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks.pop(task_id, None)
        if task is None:
            raise NotFoundError("Task not found")
        log.info("Task deleted: %s", task_id)
        return task

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()
