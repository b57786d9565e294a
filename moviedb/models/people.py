from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date

from moviedb.models.images import ImageRegistry, PersonProfile


@dataclass(frozen=True)
class FilmographyEntry:
    """One credit in a person's filmography (`Person.getInfo` payload)."""

    name: str
    character: str
    url: str | None
    movie_id: int
    job: str
    department: str
    json_origin: str = field(default="", compare=False, repr=False)

    def json_origin_pretty(self, indent: int = 2) -> str | None:
        if not self.json_origin:
            return None
        return json.dumps(json.loads(self.json_origin), indent=indent, ensure_ascii=False)


@dataclass
class Person:
    """
    A person as returned by `Person.search` (reduced) or `Person.getInfo` (full).

    Fields below the `reduced` marker are only populated for full persons.
    """

    tmdb_id: int = 0
    name: str | None = None
    url: str | None = None
    popularity: int = 0
    profiles: ImageRegistry[PersonProfile] = field(default_factory=lambda: ImageRegistry(PersonProfile))
    reduced: bool = True
    json_origin: str = field(default="", repr=False)
    defaulted_fields: list[str] = field(default_factory=list)

    # full flavor only
    biography: str | None = None
    birthplace: str | None = None
    known_movies: int = 0
    birthday: date | None = None
    aka: list[str] = field(default_factory=list)
    filmography: list[FilmographyEntry] = field(default_factory=list)

    @property
    def profile(self) -> PersonProfile | None:
        return self.profiles.first()

    def json_origin_pretty(self, indent: int = 2) -> str | None:
        if not self.json_origin:
            return None
        return json.dumps(json.loads(self.json_origin), indent=indent, ensure_ascii=False)
