"""
Map TMDb 2.1 JSON payloads onto `Person`, `Movie` and `MovieImages`.

Every entity comes in two flavors. Search endpoints return the reduced one;
`*.getInfo` returns the full one, which adds the fields grouped under
"full flavor only" on the entity classes.

Field policy:

- Core fields (and the full-only collections) are required. A missing or
  unusable value raises `MalformedPayloadError`; hydration stops and the error
  carries the partially populated entity as `partial`.
- runtime, budget, revenue, trailer and homepage are optional. When they cannot
  be read the entity keeps the default and the field name is appended to
  `defaulted_fields`.
- Dates that do not parse and URLs that are not absolute are stored as `None`
  and also reported in `defaulted_fields`; they never abort hydration.

Automated tests for this module should use captured payloads, never the live
service.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar
from urllib.parse import urlparse

from moviedb.integrations.tmdb.errors import MalformedPayloadError
from moviedb.integrations.tmdb.payloads import json_dumps_compact, parse_service_date, unwrap_payload
from moviedb.models.images import ImageRegistry, MovieImages
from moviedb.models.movies import CastEntry, Genre, Movie
from moviedb.models.people import FilmographyEntry, Person

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Flavor(str, Enum):
    REDUCED = "reduced"
    FULL = "full"


# Required field extractors


def _require_present(obj: Mapping[str, Any], key: str, *, partial: Any) -> Any:
    if key not in obj:
        raise MalformedPayloadError(f"TMDb payload is missing required field `{key}`.", field=key, partial=partial)
    return obj[key]


def _require_str(obj: Mapping[str, Any], key: str, *, partial: Any) -> str | None:
    value = _require_present(obj, key, partial=partial)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise MalformedPayloadError(
        f"TMDb field `{key}` is not a string: {type(value).__name__}.", field=key, partial=partial
    )


def _coerce_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    # NaN and infinities have no integer value
    return number if math.isfinite(number) else None


def _require_int(obj: Mapping[str, Any], key: str, *, partial: Any) -> int:
    value = _require_present(obj, key, partial=partial)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _coerce_number(value)
    if number is None:
        raise MalformedPayloadError(f"TMDb field `{key}` is not a number: {value!r}.", field=key, partial=partial)
    return int(number)


def _require_float(obj: Mapping[str, Any], key: str, *, partial: Any) -> float:
    value = _require_present(obj, key, partial=partial)
    number = _coerce_number(value)
    if number is None:
        raise MalformedPayloadError(f"TMDb field `{key}` is not a number: {value!r}.", field=key, partial=partial)
    return number


def _require_list(obj: Mapping[str, Any], key: str, *, partial: Any) -> list[Any]:
    value = _require_present(obj, key, partial=partial)
    if not isinstance(value, list):
        raise MalformedPayloadError(f"TMDb field `{key}` is not an array.", field=key, partial=partial)
    return value


def _require_object(value: Any, key: str, *, partial: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedPayloadError(f"TMDb field `{key}` is not an object.", field=key, partial=partial)
    return value


# Optional field extractors: `None` means "could not be read".


def _optional_int(obj: Mapping[str, Any], key: str) -> int | None:
    value = obj.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _coerce_number(value)
    return int(number) if number is not None else None


def _parse_url(value: Any, *, field: str) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    candidate = value.strip()
    parsed = urlparse(candidate)
    if not parsed.scheme or not parsed.netloc:
        logger.warning("Ignoring malformed URL in `%s`: %r", field, value)
        return None
    return candidate


def _optional_url(obj: Mapping[str, Any], key: str) -> str | None:
    return _parse_url(obj.get(key), field=key)


def _mark_defaulted(entity: Movie | Person, field: str) -> None:
    if field not in entity.defaulted_fields:
        entity.defaulted_fields.append(field)


def _add_unique(values: list[T], value: T) -> None:
    if value not in values:
        values.append(value)


def _set_url(entity: Movie | Person, obj: Mapping[str, Any], key: str, attr: str, *, required: bool) -> None:
    raw = _require_str(obj, key, partial=entity) if required else obj.get(key)
    url = _parse_url(raw, field=key)
    setattr(entity, attr, url)
    if url is None:
        _mark_defaulted(entity, attr)


def _set_date(entity: Movie | Person, obj: Mapping[str, Any], key: str, attr: str) -> None:
    raw = _require_str(obj, key, partial=entity)
    try:
        setattr(entity, attr, parse_service_date(raw, field=key))
    except MalformedPayloadError as exc:
        logger.warning("Leaving `%s` unset for TMDb id %s: %s", attr, entity.tmdb_id, exc)
        setattr(entity, attr, None)
        _mark_defaulted(entity, attr)


def _merge_images(
    registry: ImageRegistry,
    obj: Mapping[str, Any],
    key: str,
    *,
    partial: Any,
) -> None:
    for entry in _require_list(obj, key, partial=partial):
        wrapper = _require_object(entry, key, partial=partial)
        image = _require_object(_require_present(wrapper, "image", partial=partial), "image", partial=partial)
        image_id = _require_str(image, "id", partial=partial)
        url = _parse_url(_require_str(image, "url", partial=partial), field=f"{key}.url")
        size = _require_str(image, "size", partial=partial)
        registry.merge(str(image_id), size or "", url)


# Person


def hydrate_person(payload: Any, flavor: Flavor, *, into: Person | None = None) -> Person:
    """
    Populate a `Person` from a `Person.search` entry or a `Person.getInfo` payload.

    `payload` may be the object itself or a one-element array wrapping it.
    Passing `into` extends an existing person instead of creating a new one.
    `defaulted_fields` always describes the latest payload.
    """

    data = unwrap_payload(payload)
    person = into if into is not None else Person()
    person.reduced = flavor is Flavor.REDUCED
    person.defaulted_fields.clear()
    person.json_origin = json_dumps_compact(data)

    person.popularity = _require_int(data, "popularity", partial=person)
    person.name = _require_str(data, "name", partial=person)
    _set_url(person, data, "url", "url", required=True)
    person.tmdb_id = _require_int(data, "id", partial=person)
    _merge_images(person.profiles, data, "profile", partial=person)
    logger.debug("Hydrated core fields for Person %s (%s)", person.tmdb_id, flavor.value)

    if flavor is Flavor.REDUCED:
        return person

    person.biography = _require_str(data, "biography", partial=person)
    person.birthplace = _require_str(data, "birthplace", partial=person)
    person.known_movies = _require_int(data, "known_movies", partial=person)
    _set_date(person, data, "birthday", "birthday")

    for alias in _require_list(data, "known_as", partial=person):
        alias_obj = _require_object(alias, "known_as", partial=person)
        name = _require_str(alias_obj, "name", partial=person)
        if name:
            _add_unique(person.aka, name)

    for film in _require_list(data, "filmography", partial=person):
        film_obj = _require_object(film, "filmography", partial=person)
        entry = FilmographyEntry(
            name=_require_str(film_obj, "name", partial=person),
            character=_require_str(film_obj, "character", partial=person),
            url=_parse_url(_require_str(film_obj, "url", partial=person), field="filmography.url"),
            movie_id=_require_int(film_obj, "id", partial=person),
            job=_require_str(film_obj, "job", partial=person),
            department=_require_str(film_obj, "department", partial=person),
            json_origin=json_dumps_compact(film_obj),
        )
        _add_unique(person.filmography, entry)

    return person


# Movie


def hydrate_movie(payload: Any, flavor: Flavor, *, into: Movie | None = None) -> Movie:
    """
    Populate a `Movie` from a `Movie.search` entry or a `Movie.getInfo` payload.

    `payload` may be the object itself or a one-element array wrapping it.
    Passing `into` extends an existing movie instead of creating a new one.
    `defaulted_fields` always describes the latest payload.
    """

    data = unwrap_payload(payload)
    movie = into if into is not None else Movie()
    movie.reduced = flavor is Flavor.REDUCED
    movie.defaulted_fields.clear()
    movie.json_origin = json_dumps_compact(data)

    movie.rating = _require_float(data, "rating", partial=movie)
    movie.alternative_name = _require_str(data, "alternative_name", partial=movie)
    movie.name = _require_str(data, "name", partial=movie)
    movie.overview = _require_str(data, "overview", partial=movie)
    movie.tmdb_id = _require_int(data, "id", partial=movie)
    _set_url(movie, data, "url", "url", required=True)
    _merge_images(movie.images.posters, data, "posters", partial=movie)
    _merge_images(movie.images.backdrops, data, "backdrops", partial=movie)
    movie.imdb_id = _require_str(data, "imdb_id", partial=movie)
    _set_date(movie, data, "released", "released")
    logger.debug("Hydrated core fields for Movie %s (%s)", movie.tmdb_id, flavor.value)

    if flavor is Flavor.REDUCED:
        return movie

    for genre in _require_list(data, "genres", partial=movie):
        genre_obj = _require_object(genre, "genres", partial=movie)
        name = _require_str(genre_obj, "name", partial=movie)
        if name:
            _add_unique(movie.genres, Genre(name=name, url=_optional_url(genre_obj, "url")))

    movie.tagline = _require_str(data, "tagline", partial=movie)
    movie.certification = _require_str(data, "certification", partial=movie)
    _set_url(movie, data, "trailer", "trailer", required=False)
    _set_optional_int(movie, data, "runtime")
    _set_url(movie, data, "homepage", "homepage", required=False)

    for member in _require_list(data, "cast", partial=movie):
        member_obj = _require_object(member, "cast", partial=movie)
        entry = CastEntry(
            name=_require_str(member_obj, "name", partial=movie),
            thumb=_parse_url(_require_str(member_obj, "profile", partial=movie), field="cast.profile"),
            character=_require_str(member_obj, "character", partial=movie),
            url=_parse_url(_require_str(member_obj, "url", partial=movie), field="cast.url"),
            job=_require_str(member_obj, "job", partial=movie),
            person_id=_require_int(member_obj, "id", partial=movie),
            department=_require_str(member_obj, "department", partial=movie),
            json_origin=json_dumps_compact(member_obj),
        )
        _add_unique(movie.cast, entry)

    _set_optional_int(movie, data, "budget")
    _set_optional_int(movie, data, "revenue")

    if movie.defaulted_fields:
        logger.info("Movie %s hydrated with defaults for: %s", movie.tmdb_id, ", ".join(movie.defaulted_fields))
    return movie


def _set_optional_int(movie: Movie, data: Mapping[str, Any], key: str) -> None:
    value = _optional_int(data, key)
    if value is None:
        logger.warning("Could not read `%s` for Movie %s; keeping default.", key, movie.tmdb_id)
        _mark_defaulted(movie, key)
        return
    setattr(movie, key, value)


def hydrate_movie_images(payload: Any, *, into: MovieImages | None = None) -> MovieImages:
    """Populate `MovieImages` from the `posters`/`backdrops` sections of a `Movie.getImages` payload."""
    data = unwrap_payload(payload)
    images = into if into is not None else MovieImages()
    _merge_images(images.posters, data, "posters", partial=images)
    _merge_images(images.backdrops, data, "backdrops", partial=images)
    return images
