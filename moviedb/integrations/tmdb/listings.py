"""
Box office / most popular movie ids scraped from the TMDb homepage.

The homepage renders both lists in one document; the most-popular block starts
at the first element carrying the `first most-popular` classes. Everything
before the marker is the box office list, everything after it the most popular
list. This relies on the page markup and is not stable across redesigns.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from moviedb.integrations.tmdb.errors import MalformedPayloadError

logger = logging.getLogger(__name__)

LISTING_MARKER = "first most-popular"
_MOVIE_ID_RE = re.compile(r"/movie/(\d+)")


class ListingSection(int, Enum):
    BOX_OFFICE = 0
    MOST_POPULAR = 1


def _dedupe_preserve_order(values: list[int]) -> list[int]:
    seen: set[int] = set()
    out: list[int] = []
    for v in values:
        if v in seen:
            continue
        out.append(v)
        seen.add(v)
    return out


def extract_ids(html: str, section: ListingSection) -> list[int]:
    """Return the movie ids linked from one listing section, in first-seen order."""
    parts = (html or "").split(LISTING_MARKER)
    if int(section) >= len(parts):
        raise MalformedPayloadError(
            f"Homepage HTML has no {LISTING_MARKER!r} marker; cannot read the {section.name.lower()} list.",
            body_snippet=(html or "")[:200],
        )

    ids: list[int] = []
    for match in _MOVIE_ID_RE.finditer(parts[int(section)]):
        try:
            ids.append(int(match.group(1)))
        except ValueError:
            continue

    deduped = _dedupe_preserve_order(ids)
    logger.debug("Extracted %d movie ids from the %s section", len(deduped), section.name.lower())
    return deduped
