"""Global HTTP middleware."""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    """Attach app-level middleware."""

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        # Unhandled errors propagate out of call_next and are rendered as 500 further out.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Process-Time"] = f"{time.perf_counter() - start:.4f}"
            return response
        finally:
            logger.info(
                "%s %s %s %.3fs",
                request.method,
                request.url.path,
                status_code,
                time.perf_counter() - start,
            )
