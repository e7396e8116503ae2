"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasktrack.api import router
from tasktrack.api.errors import register_exception_handlers
from tasktrack.api.middleware import register_middleware
from tasktrack.core.config import Settings, get_settings
from tasktrack.core.database import build_engine, build_session_factory


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given (or cached) settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Tasktrack API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Request dependencies read settings and sessions from app.state.
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middleware(app)
    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Tasktrack API"}

    return app


app = create_app()
