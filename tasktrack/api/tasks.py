"""Task endpoints. Every route runs behind the auth gate and only sees the caller's tasks."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tasktrack.api.deps import CurrentClaims
from tasktrack.core.database import get_db
from tasktrack.schemas.task import (
    SEARCH_MAX_LENGTH,
    MessageResponse,
    Priority,
    TaskCreate,
    TaskFilters,
    TaskListResponse,
    TaskMutationResponse,
    TaskRead,
    TaskResponse,
    TaskUpdate,
)
from tasktrack.services import tasks as task_service

router = APIRouter()


@router.post("", response_model=TaskMutationResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    claims: CurrentClaims,
    db: Annotated[Session, Depends(get_db)],
) -> TaskMutationResponse:
    """Create a task owned by the authenticated user. Title and priority are required."""
    task = task_service.create_task(
        db,
        claims,
        title=body.title,
        priority=body.priority,
        description=body.description,
        deadline=body.deadline,
    )
    return TaskMutationResponse(
        message="Task created successfully.",
        task=TaskRead.model_validate(task),
    )


@router.get("", response_model=TaskListResponse)
def list_tasks(
    claims: CurrentClaims,
    db: Annotated[Session, Depends(get_db)],
    priority: Annotated[Priority | None, Query()] = None,
    due_before: Annotated[date | None, Query(alias="dueBefore")] = None,
    search: Annotated[str | None, Query(max_length=SEARCH_MAX_LENGTH)] = None,
) -> TaskListResponse:
    """
    List the caller's tasks ordered by deadline.

    Optional filters: priority (exact), dueBefore (deadline on or before the
    date) and search (case-insensitive match on title or description).
    """
    filters = TaskFilters(priority=priority, due_before=due_before, search=search)
    tasks = task_service.list_tasks(db, claims, filters)
    return TaskListResponse(tasks=[TaskRead.model_validate(t) for t in tasks])


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: str,
    claims: CurrentClaims,
    db: Annotated[Session, Depends(get_db)],
) -> TaskResponse:
    task = task_service.get_task(db, claims, task_id)
    return TaskResponse(task=TaskRead.model_validate(task))


@router.put("/{task_id}", response_model=TaskMutationResponse)
def update_task(
    task_id: str,
    body: TaskUpdate,
    claims: CurrentClaims,
    db: Annotated[Session, Depends(get_db)],
) -> TaskMutationResponse:
    """Replace the provided fields. Tasks of other users are reported as not found."""
    task = task_service.update_task(db, claims, task_id, body.changes())
    return TaskMutationResponse(
        message="Task updated successfully.",
        task=TaskRead.model_validate(task),
    )


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    claims: CurrentClaims,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    task_service.delete_task(db, claims, task_id)
    return MessageResponse(message="Task deleted successfully.")
