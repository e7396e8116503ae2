"""Pydantic schemas for task requests, responses and list filters."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Reusable priority levels for validation and type safety across schemas.
Priority = Literal["Low", "Medium", "High"]

PRIORITY_VALUES: frozenset[str] = frozenset({"Low", "Medium", "High"})

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000
SEARCH_MAX_LENGTH = 255


class TaskCreate(BaseModel):
    """Body for POST /tasks. Title and priority presence is checked by the task service."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    deadline: date | None = None
    priority: Priority | None = None


class TaskUpdate(BaseModel):
    """
    Body for PUT /tasks/{id}.

    Only fields present in the request body are replaced; an explicit null clears
    description or deadline.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    deadline: date | None = None
    priority: Priority | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields the caller actually sent."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class TaskFilters(BaseModel):
    """Optional filters for listing the caller's tasks. Absent filters impose no restriction."""

    priority: Priority | None = None
    due_before: date | None = None
    search: str | None = None


class TaskRead(BaseModel):
    """Task as returned to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None
    deadline: date | None
    priority: str
    user_id: str = Field(serialization_alias="userId")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class TaskResponse(BaseModel):
    task: TaskRead


class TaskMutationResponse(BaseModel):
    message: str
    task: TaskRead


class TaskListResponse(BaseModel):
    tasks: list[TaskRead]


class MessageResponse(BaseModel):
    message: str
