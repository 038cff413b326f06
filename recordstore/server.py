"""FastAPI server exposing the record store."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recordstore.api import router as api_router, persistence_error_handler
from recordstore.models.errors import PersistenceError
from recordstore.services.config_service import get_config_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for app startup/shutdown."""
    settings = get_config_service().settings
    logger.info(
        "Record store ready (id strategy: %s, falsy ids list all: %s)",
        settings.id_strategy.value,
        settings.falsy_id_lists_all,
    )
    yield


app = FastAPI(
    title="Record Store API",
    description="In-memory CRUD store standing in for a persistence backend",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.add_exception_handler(PersistenceError, persistence_error_handler)

# Include routers
app.include_router(api_router, prefix="/records")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
