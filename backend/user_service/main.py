"""Users API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every escaping exception to an Envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers (api/error_handlers.py): UserServiceError,
      RequestValidationError, Exception; never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_service.api.error_handlers import register_error_handlers
from user_service.api.routes import auth, health, users
from user_service.config import get_settings
from user_service.infrastructure.database import init_db
from user_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Users API started")
    yield
    logger.info("Users API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Users API", version="1.0.0", lifespan=lifespan,
)

# CORS from settings
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes (explicit registration)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(auth.router)

register_error_handlers(app)
