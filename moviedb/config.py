"""Read-only settings consumed by the TMDb resource client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from moviedb.utils.env import load_env

TMDB_API_BASE_URL = "http://api.themoviedb.org/2.1/"
TMDB_HOMEPAGE_URL = "http://www.themoviedb.org/"
TMDB_DEFAULT_LANGUAGE = "en"
TMDB_API_MODE = "json/"

MOVIE_SEARCH_PATH = "Movie.search/"
MOVIE_GETINFO_PATH = "Movie.getInfo/"
MOVIE_GETIMAGES_PATH = "Movie.getImages/"
PERSON_SEARCH_PATH = "Person.search/"
PERSON_GETINFO_PATH = "Person.getInfo/"


@dataclass(frozen=True)
class TmdbSettings:
    """
    Per-call configuration for `TmdbClient`.

    An empty `api_key` is allowed: API calls are skipped and return `None`
    instead of raising.
    """

    api_key: str | None = None
    language: str = TMDB_DEFAULT_LANGUAGE
    base_url: str = TMDB_API_BASE_URL
    homepage_url: str = TMDB_HOMEPAGE_URL
    api_mode: str = TMDB_API_MODE
    timeout_seconds: float = 20.0

    @property
    def has_api_key(self) -> bool:
        return bool((self.api_key or "").strip())

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> "TmdbSettings":
        if load_dotenv_file:
            load_env()

        timeout_raw = (os.getenv("TMDB_TIMEOUT_SECONDS") or "").strip()
        try:
            timeout_seconds = float(timeout_raw) if timeout_raw else 20.0
        except ValueError:
            raise ValueError(f"TMDB_TIMEOUT_SECONDS is not a number: {timeout_raw!r}") from None

        return cls(
            api_key=(os.getenv("TMDB_API_KEY") or "").strip() or None,
            language=(os.getenv("TMDB_LANGUAGE") or "").strip() or TMDB_DEFAULT_LANGUAGE,
            base_url=(os.getenv("TMDB_BASE_URL") or "").strip() or TMDB_API_BASE_URL,
            homepage_url=(os.getenv("TMDB_HOMEPAGE_URL") or "").strip() or TMDB_HOMEPAGE_URL,
            timeout_seconds=timeout_seconds,
        )
