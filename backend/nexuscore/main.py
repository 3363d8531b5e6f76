"""Nexuscore API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (health, videos)
    - Global error handlers map NexuscoreError → structured JSON responses
    - CORS configured from settings (any origin by default); the three CORS
      headers are set on every response, preflight answered by CORSMiddleware
    - MongoDB connected on startup and closed on shutdown via lifespan;
      a failed initial connection terminates the process with status 1
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nexuscore.api.error_handlers import register_error_handlers
from nexuscore.api.middleware import register_cors_headers
from nexuscore.api.routes import health, videos
from nexuscore.config import get_settings
from nexuscore.core.errors import DatabaseConnectionError
from nexuscore.infrastructure.database import MongoManager
from nexuscore.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    mongo = MongoManager(
        settings.mongo_uri,
        database=settings.mongo_database,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
    )
    try:
        await mongo.connect()
    except DatabaseConnectionError as e:
        logger.critical(
            f"MongoDB connection failed: {e.message}",
            extra={"error_code": e.code},
        )
        await mongo.close()
        raise SystemExit(1) from e
    app.state.mongo = mongo
    logger.info("Nexuscore API started")
    yield
    logger.info("Nexuscore API shutting down")
    await mongo.close()
    app.state.mongo = None


app = FastAPI(
    title="Nexuscore API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_methods,
    allow_headers=settings.cors_headers,
)
register_cors_headers(app, settings)

app.include_router(health.router)
app.include_router(videos.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
