"""Domain Types: the Movie record and its identity type.

Invariants:
    - MovieId is a positive int, unique within a collection
    - title, director and year may be None (permissive writes store absent fields as null)

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - Movie is a mutable dataclass because updates overwrite fields in place
"""

from dataclasses import dataclass
from typing import NewType


MovieId = NewType("MovieId", int)


@dataclass
class Movie:
    """A single catalogue entry."""
    id: MovieId
    title: str | None
    director: str | None
    year: int | None
