"""Error Handlers: map exceptions raised while serving /api/movies to responses.

Invariants:
    - MovieNotFoundError -> 404 text/plain "Movie not found" (wire contract existing clients rely on)
    - Unreadable request bodies -> InvalidMovieRequestError envelope (400), one entry per bad field
    - Every other MoviesApiError -> its own JSON envelope and status
    - Anything else -> UnexpectedMoviesApiError (500); the exception text stays in the log

Design Decisions:
    - Handlers only translate; every envelope is built by a core/errors.py class
    - Kept out of main.py so the app factory stays a list of registrations
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from movies_api.core.errors import (
    InvalidMovieRequestError,
    MovieNotFoundError,
    MoviesApiError,
    UnexpectedMoviesApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    app.add_exception_handler(MoviesApiError, movies_api_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


async def movie_not_found_handler(request: Request, exc: MovieNotFoundError):
    logger.warning(
        f"{exc.message}: {request.method} {request.url.path}",
        extra={
            "error_code": exc.code,
            "movie_id": exc.movie_id,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return PlainTextResponse(exc.message, status_code=exc.http_status)


async def invalid_request_handler(request: Request, exc: RequestValidationError):
    error = InvalidMovieRequestError(movie_request_problems(exc))
    logger.warning(
        f"Rejected {request.method} {request.url.path}: {error.problems}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return _envelope(error)


async def movies_api_error_handler(request: Request, exc: MoviesApiError):
    logger.error(
        f"MoviesApiError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return _envelope(exc)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path, "method": request.method},
    )
    return _envelope(UnexpectedMoviesApiError())


def movie_request_problems(exc: RequestValidationError) -> list[dict]:
    """Flatten Pydantic errors into {field, message}; field is relative to the body."""
    problems = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if loc and loc[0] == "body":
            loc = loc[1:]
        problems.append({
            "field": ".".join(loc) or "body",
            "message": e["msg"],
        })
    return problems


def _envelope(error: MoviesApiError) -> JSONResponse:
    return JSONResponse(status_code=error.http_status, content=error.to_response())
