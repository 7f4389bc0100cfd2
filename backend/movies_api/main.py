"""Movies API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (/api)
    - Swagger UI served at settings.docs_url (/api-docs), generated from route annotations
    - CORS allowed only for settings.cors_origins
    - Movie store reset to its seed records on every startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers registered from api/error_handlers.py, not defined inline
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_api.api.error_handlers import register_error_handlers
from movies_api.api.routes import movies
from movies_api.config import get_settings
from movies_api.infrastructure.movie_store import init_movie_store
from movies_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_movie_store()
    logger.info(f"Movies API listening on {settings.public_url}")
    logger.info(f"Swagger docs: {settings.public_url}{settings.docs_url}")
    yield
    logger.info("Movies API shutting down")


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    contact={"name": settings.contact_name},
    servers=[{"url": settings.public_url}],
    docs_url=settings.docs_url,
    openapi_url=settings.openapi_url,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router, prefix=settings.api_prefix)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
