"""Task service: CRUD on tasks, every operation scoped to the authenticated owner."""

import logging
from datetime import date

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from tasktrack.models import Task
from tasktrack.schemas.auth import TokenClaims
from tasktrack.schemas.task import TaskFilters
from tasktrack.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

TITLE_AND_PRIORITY_REQUIRED = "Title and priority are required."
TITLE_EMPTY = "Title cannot be empty."
PRIORITY_EMPTY = "Priority cannot be empty."
TASK_NOT_FOUND = "Task not found or unauthorized."

# Fields a caller may replace on update; id and user_id are immutable.
UPDATABLE_FIELDS = frozenset({"title", "description", "deadline", "priority"})


def _owned(db: Session, claims: TokenClaims) -> Query:
    """Base query restricted to the caller's tasks. Every lookup starts here."""
    return db.query(Task).filter(Task.user_id == claims.user_id)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _get_owned_task(db: Session, claims: TokenClaims, task_id: str) -> Task:
    # Identifiers are opaque: a malformed id simply matches nothing.
    task = _owned(db, claims).filter(Task.id == task_id).first()
    if task is None:
        raise NotFoundError(TASK_NOT_FOUND)
    return task


def create_task(
    db: Session,
    claims: TokenClaims,
    title: str | None,
    priority: str | None,
    description: str | None = None,
    deadline: date | None = None,
) -> Task:
    """Persist a new task owned by the caller."""
    if title is None or not title.strip() or not priority:
        raise ValidationError(TITLE_AND_PRIORITY_REQUIRED)

    task = Task(
        title=title,
        description=description,
        deadline=deadline,
        priority=priority,
        user_id=claims.user_id,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Created task id=%s user_id=%s", task.id, claims.user_id)
    return task


def list_tasks(db: Session, claims: TokenClaims, filters: TaskFilters) -> list[Task]:
    """
    Return the caller's tasks matching the filters, ordered by ascending deadline.

    priority is an exact match, due_before keeps deadlines on or before the date,
    and search is a case-insensitive substring match on title or description.
    Tasks without a deadline sort first.
    """
    query = _owned(db, claims)
    if filters.priority:
        query = query.filter(Task.priority == filters.priority)
    if filters.due_before is not None:
        query = query.filter(Task.deadline <= filters.due_before)
    if filters.search:
        pattern = f"%{_escape_like(filters.search)}%"
        query = query.filter(
            or_(
                Task.title.ilike(pattern, escape="\\"),
                Task.description.ilike(pattern, escape="\\"),
            )
        )
    return query.order_by(Task.deadline.asc().nulls_first(), Task.created_at.asc()).all()


def get_task(db: Session, claims: TokenClaims, task_id: str) -> Task:
    return _get_owned_task(db, claims, task_id)


def update_task(
    db: Session,
    claims: TokenClaims,
    task_id: str,
    changes: dict[str, object],
) -> Task:
    """
    Replace the provided fields on the caller's task.

    A task owned by someone else is reported exactly like a missing one.
    """
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}.")
    if "title" in changes:
        title = changes["title"]
        if not isinstance(title, str) or not title.strip():
            raise ValidationError(TITLE_EMPTY)
    if "priority" in changes and not changes["priority"]:
        raise ValidationError(PRIORITY_EMPTY)

    task = _get_owned_task(db, claims, task_id)
    for field, value in changes.items():
        setattr(task, field, value)
    db.commit()
    db.refresh(task)
    logger.info("Updated task id=%s fields=%s", task.id, sorted(changes))
    return task


def delete_task(db: Session, claims: TokenClaims, task_id: str) -> None:
    """Remove the caller's task; NotFoundError if it is missing or not theirs."""
    task = _get_owned_task(db, claims, task_id)
    db.delete(task)
    db.commit()
    logger.info("Deleted task id=%s user_id=%s", task_id, claims.user_id)
