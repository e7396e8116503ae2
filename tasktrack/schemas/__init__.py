"""Pydantic request/response schemas."""

from tasktrack.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserPublic,
)
from tasktrack.schemas.health import HealthResponse
from tasktrack.schemas.task import (
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

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "Priority",
    "RegisterRequest",
    "RegisterResponse",
    "TaskCreate",
    "TaskFilters",
    "TaskListResponse",
    "TaskMutationResponse",
    "TaskRead",
    "TaskResponse",
    "TaskUpdate",
    "TokenClaims",
    "UserPublic",
]
