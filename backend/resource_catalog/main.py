"""Resource Catalog API - FastAPI application entry point.

Invariants:
    - Routers registered explicitly: health, then one router per RESOURCES entry
    - Global error handlers map CatalogError -> {"type", "message"} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resource_catalog import __version__
from resource_catalog.api.error_handlers import register_error_handlers
from resource_catalog.api.routes import health
from resource_catalog.api.routes.resources import build_resource_router
from resource_catalog.config import get_settings
from resource_catalog.infrastructure.database import close_db, init_db
from resource_catalog.infrastructure.observability import setup_logging
from resource_catalog.services.resource_registry import RESOURCES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(
        f"Resource Catalog API started ({len(RESOURCES)} resources)",
    )
    yield
    await close_db()
    logger.info("Resource Catalog API shutting down")


app = FastAPI(
    title="Resource Catalog API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
for descriptor in RESOURCES:
    app.include_router(build_resource_router(descriptor))

register_error_handlers(app)
