"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from idspace import __version__
from idspace.api import health, items
from idspace.api.errors import register_exception_handlers
from idspace.api.middleware import BodySizeLimitMiddleware
from idspace.config import settings
from idspace.logging import setup_logging
from idspace.services.items.store import ItemStore

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    store: ItemStore = app.state.item_store
    logger.info("Starting idspace API", debug=settings.debug, base_max=store.base_max)

    yield

    logger.info(
        "Shutting down idspace API",
        extra_ids=len(store.extra_ids),
        selected=len(store.selection),
    )


def create_app(store: ItemStore | None = None) -> FastAPI:
    """Build the application around an item store (a fresh one by default)."""
    app = FastAPI(
        title="idspace API",
        description="Select and order ids from a virtual id space",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.item_store = store if store is not None else ItemStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    register_exception_handlers(app)

    # API routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(items.router, prefix="/api")

    return app


app = create_app()
