# todoapp/routes/tasks.py
"""CRUD endpoints for tasks."""

import os
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from todoapp.database import get_session
from todoapp.models import TaskCreateRequest, TaskDTO, TaskUpdateRequest
from todoapp.repository import TaskRepository
from todoapp.service import TaskService

API_PREFIX = os.getenv("API_PREFIX", "/api")

router = APIRouter(prefix=API_PREFIX, tags=["tasks"])

# Ids are SQLite INTEGER columns: signed 64-bit.
TaskId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Build a service bound to the request's database session."""
    return TaskService(TaskRepository(session))


@router.get("/all-tasks")
def get_all_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskDTO]:
    """List every task."""
    return service.get_all_tasks()


@router.get("/open-tasks")
def get_open_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskDTO]:
    """List tasks that are still open."""
    return service.get_open_tasks()


@router.get("/closed-tasks")
def get_closed_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskDTO]:
    """List tasks that have been closed."""
    return service.get_closed_tasks()


@router.get("/task/{task_id}")
def get_task(task_id: TaskId, service: TaskService = Depends(get_task_service)) -> TaskDTO:
    """Get a single task by ID."""
    return service.get_task_by_id(task_id)


@router.post("/create")
def create_task(
    body: TaskCreateRequest, service: TaskService = Depends(get_task_service)
) -> TaskDTO:
    """Create a new task. The description must not already be in use."""
    return service.create_task(body)


@router.patch("/update/{task_id}")
def update_task(
    task_id: TaskId,
    body: TaskUpdateRequest,
    service: TaskService = Depends(get_task_service),
) -> TaskDTO:
    """Update an existing task. Only provided fields are changed."""
    return service.update_task(task_id, body)


@router.delete("/delete/{task_id}", response_class=PlainTextResponse)
def delete_task(task_id: TaskId, service: TaskService = Depends(get_task_service)) -> str:
    """Delete a task by ID and return a confirmation message."""
    return service.delete_task(task_id)
