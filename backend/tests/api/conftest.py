"""API test fixtures: fresh movie store + FastAPI test client.

Invariants:
    - Every test gets its own InMemoryMovieRepository seeded with SEED_MOVIES
    - get_movie_repository dependency overridden to return that store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from movies_api.infrastructure.movie_store import (
    InMemoryMovieRepository, get_movie_repository,
)
from movies_api.main import app


@pytest.fixture
def movie_store():
    return InMemoryMovieRepository()


@pytest.fixture
async def client(movie_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_movie_repository] = lambda: movie_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
