"""Movie Routes: list, get, create, update and delete over the movie repository.

Invariants:
    - Misses (unknown or unparseable id) raise MovieNotFoundError -> 404 "Movie not found"
    - Create answers 201 with the stored record; the id comes from the store
    - Update overwrites title, director and year unconditionally; id never changes
    - A missing request body is treated as {} (every field stored as null)
    - Delete answers a one-element list holding the removed movie

Design Decisions:
    - `id` path param typed str and parsed by parse_movie_id: "abc" is a
      miss, not a 400
    - Delete keeps the list-wrapped body the existing frontend expects
"""

import logging

from fastapi import APIRouter, Depends, Path, Request, status

from movies_api.core.domain_types import Movie, MovieId
from movies_api.core.errors import MovieNotFoundError
from movies_api.core.parse_movie_id import parse_movie_id
from movies_api.core.repository_protocols import MovieRepository
from movies_api.infrastructure.movie_store import get_movie_repository
from movies_api.schemas.movie import MovieResponse, MovieWrite

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])

_NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {
        "description": "Movie not found.",
        "content": {"text/plain": {"example": "Movie not found"}},
    },
}


def _require_id(raw_id: str) -> MovieId:
    movie_id = parse_movie_id(raw_id)
    if movie_id is None:
        raise MovieNotFoundError()
    return movie_id


def _payload(body: MovieWrite | None) -> MovieWrite:
    # No body at all reads as an empty object.
    return body if body is not None else MovieWrite()


def _or_404(movie: Movie | None, movie_id: MovieId) -> Movie:
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return movie


@router.get(
    "", response_model=list[MovieResponse],
    summary="Retrieve a list of movies",
    description="Retrieve a list of movies with their details.",
    response_description="A list of movies.",
)
async def list_movies(
    request: Request, repo: MovieRepository = Depends(get_movie_repository),
):
    logger.debug(f"Query parameters: {dict(request.query_params)}")
    movies = await repo.list_movies()
    return [MovieResponse.from_movie(m) for m in movies]


@router.get(
    "/{id}", response_model=MovieResponse,
    responses=_NOT_FOUND_RESPONSE,
    summary="Retrieve a single movie by ID",
    description="Retrieve a movie with its details by its ID.",
    response_description="A single movie.",
)
async def get_movie(
    id: str = Path(description="The movie ID."),
    repo: MovieRepository = Depends(get_movie_repository),
):
    parsed = _require_id(id)
    movie = _or_404(await repo.get_movie(parsed), parsed)
    return MovieResponse.from_movie(movie)


@router.post(
    "", response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new movie",
    description="Add a new movie to the list.",
    response_description="The created movie.",
)
async def create_movie(
    body: MovieWrite | None = None,
    repo: MovieRepository = Depends(get_movie_repository),
):
    body = _payload(body)
    logger.info(f"Create movie request: {body.model_dump()}")
    movie = await repo.create_movie(body.title, body.director, body.year)
    logger.info("Movie created", extra={"movie_id": movie.id})
    return MovieResponse.from_movie(movie)


@router.put(
    "/{id}", response_model=MovieResponse,
    responses=_NOT_FOUND_RESPONSE,
    summary="Update a movie by ID",
    description="Update the details of an existing movie by its ID.",
    response_description="The updated movie.",
)
async def update_movie(
    id: str = Path(description="The movie ID."),
    body: MovieWrite | None = None,
    repo: MovieRepository = Depends(get_movie_repository),
):
    body = _payload(body)
    parsed = _require_id(id)
    movie = _or_404(
        await repo.update_movie(parsed, body.title, body.director, body.year),
        parsed,
    )
    logger.info("Movie updated", extra={"movie_id": movie.id})
    return MovieResponse.from_movie(movie)


@router.delete(
    "/{id}", response_model=list[MovieResponse],
    responses=_NOT_FOUND_RESPONSE,
    summary="Delete a movie by ID",
    description="Remove a movie from the list by its ID.",
    response_description="The deleted movie, wrapped in a single-element list.",
)
async def delete_movie(
    id: str = Path(description="The movie ID."),
    repo: MovieRepository = Depends(get_movie_repository),
):
    parsed = _require_id(id)
    movie = _or_404(await repo.delete_movie(parsed), parsed)
    logger.info("Movie deleted", extra={"movie_id": movie.id})
    return [MovieResponse.from_movie(movie)]
