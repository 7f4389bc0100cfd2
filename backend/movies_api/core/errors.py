"""Error Hierarchy: typed, categorized exceptions for Movies API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the JSON error envelope
    - MovieNotFoundError.message is exactly "Movie not found" (sent as plain text)

Design Decisions:
    - Single hierarchy with MoviesApiError base: one global handler catches all
    - Timestamp captured at raise time, not at serialization time
"""

from datetime import datetime, timezone
from enum import Enum

from movies_api.core.domain_types import MovieId


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class MoviesApiError(Exception):
    """Base exception for all Movies API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


class MovieNotFoundError(MoviesApiError):
    """No stored movie matches the requested id (or the id did not parse)."""
    def __init__(self, movie_id: MovieId | None = None):
        super().__init__(
            "Movie not found", "MOVIE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.movie_id = movie_id


class InvalidMovieRequestError(MoviesApiError):
    """Request body could not be read as a movie (bad JSON, uncoercible value)."""
    def __init__(self, problems: list[dict]):
        super().__init__(
            "Invalid movie request", "INVALID_MOVIE_REQUEST",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.problems = problems

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["problems"] = self.problems
        return response


class UnexpectedMoviesApiError(MoviesApiError):
    """Anything the API did not anticipate; the message never carries internals."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
