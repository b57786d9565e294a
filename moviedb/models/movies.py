from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date

from moviedb.models.images import MovieImages


@dataclass(frozen=True)
class Genre:
    name: str
    url: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class CastEntry:
    """A cast or crew member listed on a full movie payload."""

    name: str
    character: str
    job: str
    person_id: int
    department: str
    url: str | None = None
    thumb: str | None = None
    json_origin: str = field(default="", compare=False, repr=False)

    def json_origin_pretty(self, indent: int = 2) -> str | None:
        if not self.json_origin:
            return None
        return json.dumps(json.loads(self.json_origin), indent=indent, ensure_ascii=False)


@dataclass
class Movie:
    """
    A movie as returned by `Movie.search` (reduced) or `Movie.getInfo` (full).

    Fields below the `reduced` marker are only populated for full movies.
    `defaulted_fields` lists the optional fields that could not be read from the
    payload and kept their default value.
    """

    tmdb_id: int = 0
    name: str | None = None
    alternative_name: str | None = None
    overview: str | None = None
    url: str | None = None
    rating: float = 0.0
    imdb_id: str | None = None
    released: date | None = None
    images: MovieImages = field(default_factory=MovieImages)
    reduced: bool = True
    json_origin: str = field(default="", repr=False)
    defaulted_fields: list[str] = field(default_factory=list)

    # full flavor only
    tagline: str | None = None
    certification: str | None = None
    runtime: int = 0
    budget: int = 0
    revenue: int = 0
    homepage: str | None = None
    trailer: str | None = None
    genres: list[Genre] = field(default_factory=list)
    cast: list[CastEntry] = field(default_factory=list)

    @property
    def posters(self):
        return self.images.posters

    @property
    def backdrops(self):
        return self.images.backdrops

    def json_origin_pretty(self, indent: int = 2) -> str | None:
        if not self.json_origin:
            return None
        return json.dumps(json.loads(self.json_origin), indent=indent, ensure_ascii=False)
