"""
Shared fixtures for the movie match test suite.
"""
import io

import pytest
from unittest.mock import Mock
from PIL import Image

from movie_match.metadata import MoviePage, MovieResult


def make_movie(
    movie_id: int,
    title: str,
    release_date: str = "2010-07-16",
    poster_path: str = "/poster.jpg",
    popularity: float = 50.0,
    adult: bool = False,
    overview: str = "",
) -> MovieResult:
    return MovieResult(
        id=movie_id,
        title=title,
        release_date=release_date,
        poster_path=poster_path,
        popularity=popularity,
        adult=adult,
        overview=overview,
    )


def make_page(movies, page: int = 1, total_pages: int = 1) -> MoviePage:
    return MoviePage(page=page, total_pages=total_pages, results=list(movies))


@pytest.fixture
def tmdb_client():
    """A TMDBClient stand-in with no canned responses."""
    return Mock()


def png_bytes(size=(8, 8)) -> bytes:
    """A small, valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color="red").save(buffer, format="PNG")
    return buffer.getvalue()
