"""In-Memory Movie Store: process-wide ordered movie collection with seed data.

Invariants:
    - Ids come from a monotonic counter, never from collection length; deleted ids are not reused
    - Every read-modify-write runs under one lock with no await inside it
    - Returned Movie objects are the stored ones; list_movies returns a shallow copy of the list
    - Collection is reset to SEED_MOVIES whenever init_movie_store() runs (process start)

Design Decisions:
    - threading.Lock over asyncio.Lock: the critical sections never suspend, and a
      thread lock stays correct if handlers are moved to a thread pool
    - Singleton initialized on startup: FastAPI lifespan manages lifecycle,
      tests override get_movie_repository with a fresh instance
"""

import logging
import threading
from collections.abc import Iterable

from movies_api.core.domain_types import Movie, MovieId

logger = logging.getLogger(__name__)

SEED_MOVIES: tuple[Movie, ...] = (
    Movie(MovieId(1), "Inception", "Christopher Nolan", 2010),
    Movie(MovieId(2), "The Matrix", "Lana and Lilly Wachowski", 1999),
    Movie(MovieId(3), "Interstellar", "Christopher Nolan", 2014),
)


class InMemoryMovieRepository:
    """MovieRepository backed by a Python list."""

    def __init__(self, seed: Iterable[Movie] = SEED_MOVIES):
        self._movies: list[Movie] = [
            Movie(m.id, m.title, m.director, m.year) for m in seed
        ]
        self._next_id = max((m.id for m in self._movies), default=0) + 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._movies)

    async def list_movies(self) -> list[Movie]:
        with self._lock:
            return list(self._movies)

    async def get_movie(self, movie_id: MovieId) -> Movie | None:
        with self._lock:
            return self._find(movie_id)

    async def create_movie(
        self, title: str | None, director: str | None, year: int | None,
    ) -> Movie:
        with self._lock:
            movie = Movie(MovieId(self._next_id), title, director, year)
            self._next_id += 1
            self._movies.append(movie)
        logger.debug("Stored movie", extra={"movie_id": movie.id})
        return movie

    async def update_movie(
        self,
        movie_id: MovieId,
        title: str | None,
        director: str | None,
        year: int | None,
    ) -> Movie | None:
        with self._lock:
            movie = self._find(movie_id)
            if movie is None:
                return None
            movie.title = title
            movie.director = director
            movie.year = year
            return movie

    async def delete_movie(self, movie_id: MovieId) -> Movie | None:
        with self._lock:
            for index, movie in enumerate(self._movies):
                if movie.id == movie_id:
                    return self._movies.pop(index)
            return None

    def _find(self, movie_id: MovieId) -> Movie | None:
        # Caller holds the lock.
        return next((m for m in self._movies if m.id == movie_id), None)


# Singleton (initialized on startup)
movie_repository: InMemoryMovieRepository | None = None


def init_movie_store(seed: Iterable[Movie] = SEED_MOVIES) -> InMemoryMovieRepository:
    global movie_repository
    movie_repository = InMemoryMovieRepository(seed)
    logger.info(f"Movie store initialized with {len(movie_repository)} movies")
    return movie_repository


def get_movie_repository() -> InMemoryMovieRepository:
    """FastAPI dependency for the movie store."""
    if movie_repository is None:
        raise RuntimeError("Movie store not initialized")
    return movie_repository
