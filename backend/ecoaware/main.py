"""EcoAware API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EcoAwareError -> structured JSON responses
    - CORS configured from settings (not hardcoded), credentials allowed for cookie sessions
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Static frontend mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from ecoaware.api.error_handlers import register_error_handlers
from ecoaware.api.routes import (
    auth, blogs, community, competitions, events, health, leaderboard, me,
    problems, users,
)
from ecoaware.config import get_settings
from ecoaware.infrastructure import database
from ecoaware.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("EcoAware API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("EcoAware API shutting down")


app = FastAPI(
    title="EcoAware API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(events.router)
app.include_router(competitions.router)
app.include_router(leaderboard.router)
app.include_router(problems.router)
app.include_router(community.router)
app.include_router(blogs.router)
app.include_router(me.router)

# html=True enables SPA fallback (serves index.html for unknown routes)
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
