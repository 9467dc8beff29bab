# taskboard/routers/task.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from taskboard.dependencies.auth import get_task_owner_id
from taskboard.dependencies.services import get_task_store
from taskboard.models.task import Task
from taskboard.schemas.task import DeleteTaskResponse
from taskboard.services.task_store import TaskStore

router = APIRouter(prefix="/api/tasks", tags=["Tasks"])


# Ownership is recorded on create but listing is not scoped to the caller.
@router.get("", response_model=List[Task])
def list_tasks(
    completed: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    due_date: Optional[str] = Query(None, alias="dueDate"),
    store: TaskStore = Depends(get_task_store),
    owner_id: Optional[str] = Depends(get_task_owner_id),
):
    return store.list(completed=completed, priority=priority, due_date=due_date)


@router.get("/{task_id}", response_model=Task)
def get_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
    owner_id: Optional[str] = Depends(get_task_owner_id),
):
    return store.get(task_id)


@router.post("", response_model=Task, status_code=201)
def create_task(
    payload: Dict[str, Any] = Body(...),
    store: TaskStore = Depends(get_task_store),
    owner_id: Optional[str] = Depends(get_task_owner_id),
):
    return store.create(payload, owner_id=owner_id)


@router.put("/{task_id}", response_model=Task)
def update_task(
    task_id: str,
    payload: Dict[str, Any] = Body(...),
    store: TaskStore = Depends(get_task_store),
    owner_id: Optional[str] = Depends(get_task_owner_id),
):
    return store.update(task_id, payload)


@router.delete("/{task_id}", response_model=DeleteTaskResponse)
def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
    owner_id: Optional[str] = Depends(get_task_owner_id),
):
    removed = store.delete(task_id)
    return DeleteTaskResponse(message="Task deleted", task=removed)
