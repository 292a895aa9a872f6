"""
Deathbat Twin Finder API
=========================
Read-only HTTP API that finds the most alike Deathbat for a given token.

This API provides:
- Health check with catalog statistics
- Twin lookup by token id
- Single record lookup

The catalog is loaded from disk once at startup and never modified.

Usage:
    uvicorn api.main:app --host 0.0.0.0 --port 6660 --reload

Or via the entrypoint script:
    python scripts/run_api.py
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import __version__
from api.deps import get_settings, init_catalog, shutdown_catalog
from api.routers import health_router, twins_router
from catalog.logging_config import setup_logging_from_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    """
    # Startup: catalog must be complete before the first query
    settings = get_settings()
    setup_logging_from_settings(settings.logging)
    logger.info("Deathbat Twin Finder API starting up...")
    init_catalog(settings)
    yield
    # Shutdown
    logger.info("Deathbat Twin Finder API shutting down...")
    shutdown_catalog()


app = FastAPI(
    title="Deathbat Twin Finder API",
    description="""
## Deathbat Twin Finder

Finds the Deathbat most alike a given one by weighted trait similarity.

### Scoring

Matching traits score: Mask 6, Facial Hair 5, Eyes 4, Mouth 4, Nose 4,
Head 3, Skin 2, Background 1. Ties go to the closest token id.

### One-of-ones

Deathbats carrying an artist signature are unique and have no twin;
the response sets `no_twin` and leaves `twin` null.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# The browser front end fetches from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "status_code": 500
        }
    )


# Include routers
app.include_router(health_router)
app.include_router(twins_router)


# Root endpoint
@app.get("/", tags=["Root"])
def root():
    """
    API root - returns welcome message and links.
    """
    return {
        "message": "Welcome to the Deathbat Twin Finder API",
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "health": "/api/v1/health",
            "twin": "/api/v1/twin?token_id={token_id}",
            "record": "/api/v1/records/{token_id}"
        }
    }
