"""Boundary Protocols: contract between the movie routes and whatever stores movies.

Invariants:
    - Routes depend on MovieRepository only, never on a concrete store
    - Lookups that miss return None; raising NotFound is the caller's job
    - list_movies returns insertion order

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: a persistent implementation will do IO, the in-memory one
      simply never awaits
"""

from typing import Protocol

from movies_api.core.domain_types import Movie, MovieId


class MovieRepository(Protocol):
    """Contract for movie persistence, implemented by infrastructure/."""
    async def list_movies(self) -> list[Movie]: ...
    async def get_movie(self, movie_id: MovieId) -> Movie | None: ...
    async def create_movie(
        self, title: str | None, director: str | None, year: int | None,
    ) -> Movie: ...
    async def update_movie(
        self,
        movie_id: MovieId,
        title: str | None,
        director: str | None,
        year: int | None,
    ) -> Movie | None: ...
    async def delete_movie(self, movie_id: MovieId) -> Movie | None: ...
