from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, TypeVar
from urllib.parse import quote

import requests

from moviedb.config import (
    MOVIE_GETIMAGES_PATH,
    MOVIE_GETINFO_PATH,
    MOVIE_SEARCH_PATH,
    PERSON_GETINFO_PATH,
    PERSON_SEARCH_PATH,
    TmdbSettings,
)
from moviedb.integrations.tmdb.errors import MalformedPayloadError, TmdbTransportError
from moviedb.integrations.tmdb.hydration import Flavor, hydrate_movie, hydrate_movie_images, hydrate_person
from moviedb.integrations.tmdb.listings import ListingSection, extract_ids
from moviedb.integrations.tmdb.payloads import is_nothing_found, load_json, read_body
from moviedb.models.images import MovieImages
from moviedb.models.movies import Movie
from moviedb.models.people import Person

logger = logging.getLogger(__name__)

E = TypeVar("E")


class Transport(Protocol):
    """Port used by `TmdbClient` to issue one blocking GET and read the whole body."""

    def open_and_read(self, url: str) -> bytes: ...


class RequestsTransport:
    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds

    def open_and_read(self, url: str) -> bytes:
        headers = {
            "accept": "application/json, text/html;q=0.9, */*;q=0.8",
            "user-agent": "Mozilla/5.0",
        }
        try:
            resp = self._session.get(url, headers=headers, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise TmdbTransportError(f"TMDb request failed: {exc}") from exc

        if resp.status_code != 200:
            raise TmdbTransportError(
                f"TMDb request failed with HTTP {resp.status_code}.",
                status_code=resp.status_code,
                body_snippet=(resp.text or "")[:400],
            )
        return resp.content or b""


def _redact(url: str, api_key: str | None) -> str:
    if api_key:
        return url.replace(api_key, "***")
    return url


class TmdbClient:
    """
    Resource client for the TMDb 2.1 API and the homepage listings.

    Every logical call performs exactly one blocking request, except the deep
    searches and the full listings, which add one `*.getInfo` request per result
    (sequentially, in result order).

    When `settings` has no API key, API calls are skipped and return `None`.
    """

    def __init__(
        self,
        settings: TmdbSettings | None = None,
        *,
        transport: Transport | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings or TmdbSettings()
        self._transport = transport or RequestsTransport(
            session=session,
            timeout_seconds=self._settings.timeout_seconds,
        )

    @property
    def settings(self) -> TmdbSettings:
        return self._settings

    def build_url(self, path: str, param: str | int) -> str:
        s = self._settings
        return (
            f"{s.base_url}{path}{s.language}/{s.api_mode}{s.api_key or ''}/"
            f"{quote(str(param), safe='')}"
        )

    def _fetch_body(self, url: str) -> str:
        logger.info("GET %s", _redact(url, self._settings.api_key))
        return read_body(self._transport.open_and_read(url))

    def _api_key_missing(self, operation: str) -> bool:
        if self._settings.has_api_key:
            return False
        logger.error("Skipping %s: TMDB_API_KEY is not set.", operation)
        return True

    def _search(self, path: str, query: str, operation: str, build: Callable[[Any], E]) -> list[E] | None:
        if self._api_key_missing(operation):
            return None
        if not query:
            logger.error("Cannot run %s for an empty query.", operation)
            return None

        body = self._fetch_body(self.build_url(path, query))
        if is_nothing_found(body):
            logger.info("%s for %r returned no results", operation, query)
            return []

        payload = load_json(body)
        if not isinstance(payload, list):
            raise MalformedPayloadError(
                f"{operation} returned unexpected JSON shape (not an array).",
                body_snippet=body[:400],
            )
        return [build(item) for item in payload]

    def _lookup(self, path: str, tmdb_id: int, operation: str) -> Any | None:
        if self._api_key_missing(operation):
            return None

        body = self._fetch_body(self.build_url(path, int(tmdb_id)))
        if is_nothing_found(body):
            logger.info("%s for id %s returned no results", operation, tmdb_id)
            return None
        return load_json(body)

    @staticmethod
    def _result_id(item: Any) -> int:
        if not isinstance(item, dict) or "id" not in item:
            raise MalformedPayloadError("Search result entry has no `id`.", field="id")
        try:
            return int(item["id"])
        except (TypeError, ValueError) as exc:
            raise MalformedPayloadError(f"Search result id is not numeric: {item['id']!r}.", field="id") from exc

    # Movies

    def search_movies(self, query: str) -> list[Movie] | None:
        """Search movies by title; results are reduced movies."""
        return self._search(
            MOVIE_SEARCH_PATH,
            query,
            "Movie.search",
            lambda item: hydrate_movie(item, Flavor.REDUCED),
        )

    def deep_search_movies(self, query: str) -> list[Movie | None] | None:
        """
        Search movies by title and fetch the full movie for every result.

        Issues one `Movie.getInfo` request per search result.
        """

        ids = self._search(MOVIE_SEARCH_PATH, query, "Movie.search", self._result_id)
        if ids is None:
            return None
        return [self.get_movie_info(movie_id) for movie_id in ids]

    def get_movie_info(self, tmdb_id: int) -> Movie | None:
        payload = self._lookup(MOVIE_GETINFO_PATH, tmdb_id, "Movie.getInfo")
        if payload is None:
            return None
        return hydrate_movie(payload, Flavor.FULL)

    def get_movie_images(self, tmdb_id: int) -> MovieImages | None:
        payload = self._lookup(MOVIE_GETIMAGES_PATH, tmdb_id, "Movie.getImages")
        if payload is None:
            return None
        return hydrate_movie_images(payload)

    # Homepage listings

    def _listing_ids(self, section: ListingSection) -> list[int]:
        html = self._fetch_body(self._settings.homepage_url)
        return extract_ids(html, section)

    def box_office_ids(self) -> list[int]:
        """Movie ids in the homepage box office list. Does not need an API key."""
        return self._listing_ids(ListingSection.BOX_OFFICE)

    def most_popular_ids(self) -> list[int]:
        """Movie ids in the homepage most popular list. Does not need an API key."""
        return self._listing_ids(ListingSection.MOST_POPULAR)

    def _listing_movies(self, section: ListingSection) -> list[Movie | None] | None:
        if self._api_key_missing(f"{section.name.lower()} listing"):
            return None
        return [self.get_movie_info(movie_id) for movie_id in self._listing_ids(section)]

    def box_office(self) -> list[Movie | None] | None:
        return self._listing_movies(ListingSection.BOX_OFFICE)

    def most_popular(self) -> list[Movie | None] | None:
        return self._listing_movies(ListingSection.MOST_POPULAR)

    # People

    def search_people(self, query: str) -> list[Person] | None:
        """Search people by name; results are reduced persons."""
        return self._search(
            PERSON_SEARCH_PATH,
            query,
            "Person.search",
            lambda item: hydrate_person(item, Flavor.REDUCED),
        )

    def deep_search_people(self, query: str) -> list[Person | None] | None:
        """
        Search people by name and fetch the full person for every result.

        Issues one `Person.getInfo` request per search result.
        """

        ids = self._search(PERSON_SEARCH_PATH, query, "Person.search", self._result_id)
        if ids is None:
            return None
        return [self.get_person_info(person_id) for person_id in ids]

    def get_person_info(self, tmdb_id: int) -> Person | None:
        payload = self._lookup(PERSON_GETINFO_PATH, tmdb_id, "Person.getInfo")
        if payload is None:
            return None
        return hydrate_person(payload, Flavor.FULL)
