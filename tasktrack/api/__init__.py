"""HTTP routes. The auth gate applies to task routes only."""

from fastapi import APIRouter, Depends

from tasktrack.api import auth, health, tasks
from tasktrack.api.deps import require_claims

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(
    tasks.router,
    prefix="/tasks",
    tags=["tasks"],
    dependencies=[Depends(require_claims)],
)
