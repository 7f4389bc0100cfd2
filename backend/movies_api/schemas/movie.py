"""Movie Schemas: request body and response shape for /api/movies.

Invariants:
    - MovieWrite accepts any subset of title/director/year; missing fields become None
    - Only type coercion is applied ("2017" -> 2017, 123 -> "123"); no presence or range checks
    - Values that cannot be coerced (a list for title, "soon" for year) are rejected (400)
    - Unknown body keys are ignored

Design Decisions:
    - Permissive writes kept on purpose: existing clients send partial bodies,
      and an update overwrites every field with whatever arrived
"""

from pydantic import BaseModel, ConfigDict, Field

from movies_api.core.domain_types import Movie


class MovieWrite(BaseModel):
    """Body for create and update."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    title: str | None = Field(None, description="The movie title.")
    director: str | None = Field(None, description="The movie director.")
    year: int | None = Field(None, description="The release year.")


class MovieResponse(BaseModel):
    """Public movie representation."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="The movie ID.")
    title: str | None = Field(description="The movie title.")
    director: str | None = Field(description="The movie director.")
    year: int | None = Field(description="The release year.")

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls.model_validate(movie)
