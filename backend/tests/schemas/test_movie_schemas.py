"""Movie Schemas: permissive writes and response mapping."""

import pytest
from pydantic import ValidationError

from movies_api.core.domain_types import Movie, MovieId
from movies_api.schemas.movie import MovieResponse, MovieWrite


def test_write_defaults_missing_fields_to_none():
    body = MovieWrite()
    assert (body.title, body.director, body.year) == (None, None, None)


def test_write_coerces_numeric_year():
    assert MovieWrite(year="1999").year == 1999


def test_write_ignores_unknown_fields():
    body = MovieWrite.model_validate({"title": "Heat", "id": 12, "genre": "crime"})
    assert body.title == "Heat"
    assert not hasattr(body, "genre")


def test_write_rejects_uncoercible_year():
    with pytest.raises(ValidationError):
        MovieWrite(year="soon")


def test_write_accepts_explicit_nulls():
    body = MovieWrite.model_validate({"title": None, "director": None, "year": None})
    assert body.model_dump() == {"title": None, "director": None, "year": None}


def test_response_from_movie():
    movie = Movie(MovieId(3), "Interstellar", "Christopher Nolan", 2014)
    assert MovieResponse.from_movie(movie).model_dump() == {
        "id": 3,
        "title": "Interstellar",
        "director": "Christopher Nolan",
        "year": 2014,
    }


def test_write_coerces_numbers_into_text_fields():
    body = MovieWrite.model_validate({"title": 1917, "director": 2.5})
    assert (body.title, body.director) == ("1917", "2.5")


def test_write_rejects_list_title():
    with pytest.raises(ValidationError):
        MovieWrite(title=["a"])
