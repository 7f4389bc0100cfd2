"""Error Hierarchy: codes, categories and the JSON envelope."""

from movies_api.core.domain_types import MovieId
from movies_api.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidMovieRequestError, MovieNotFoundError,
    MoviesApiError, UnexpectedMoviesApiError,
)


def test_not_found_carries_404_and_plain_message():
    exc = MovieNotFoundError(MovieId(9))
    assert exc.http_status == 404
    assert exc.message == "Movie not found"
    assert exc.code == "MOVIE_NOT_FOUND"
    assert exc.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert exc.movie_id == 9


def test_not_found_without_id_for_unparseable_input():
    assert MovieNotFoundError().movie_id is None


def test_not_found_is_a_movies_api_error():
    assert isinstance(MovieNotFoundError(), MoviesApiError)


def test_to_response_envelope():
    exc = MoviesApiError(
        "boom", "SOMETHING_BROKE", ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )
    body = exc.to_response()["error"]
    assert body["code"] == "SOMETHING_BROKE"
    assert body["message"] == "boom"
    assert body["category"] == "internal"
    assert body["severity"] == "critical"
    assert body["timestamp"] == exc.timestamp.isoformat()
    assert exc.http_status == 500


def test_invalid_request_envelope_lists_problems():
    problems = [{"field": "year", "message": "Input should be a valid integer"}]
    exc = InvalidMovieRequestError(problems)
    body = exc.to_response()["error"]
    assert exc.http_status == 400
    assert body["code"] == "INVALID_MOVIE_REQUEST"
    assert body["category"] == "validation"
    assert body["problems"] == problems


def test_unexpected_error_is_generic_500():
    exc = UnexpectedMoviesApiError()
    assert exc.http_status == 500
    assert exc.to_response()["error"]["message"] == "An unexpected error occurred"
