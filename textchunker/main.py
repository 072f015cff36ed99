"""FastAPI app entry: config, logging, health, and error handling."""

from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from textchunker.config.logging import configure_logging, get_logger
from textchunker.config.settings import get_settings
from textchunker.controllers.routes.chunk import router as chunk_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config and logging."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    yield
    logger.info("Application shutting down")


app = FastAPI(
    debug=get_settings().debug,
    title="Text Chunker",
    description="Split documents into chunks and report chunk size statistics",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up."""
    return {"status": "ok"}


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, _exc: Exception):
    """Centralized error handling: unexpected failures return a generic 500 without internals."""
    logger.exception("Unhandled error")
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run("textchunker.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
