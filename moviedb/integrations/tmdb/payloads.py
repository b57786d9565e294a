"""
Boundary helpers for raw TMDb 2.1 response bodies.

The service answers with either a JSON object or a one-element array wrapping
it, signals "no results" with a fixed literal body, and encodes dates as
`YYYY-MM-DD` strings that are not always valid. These helpers normalize all of
that before the hydrator sees a payload.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from moviedb.integrations.tmdb.errors import MalformedPayloadError

NOTHING_FOUND_BODY = '["Nothing found."]'
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def read_body(raw: bytes | str) -> str:
    """Decode a response body and join its lines without line terminators."""
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    return _LINE_BREAK_RE.sub("", text)


def is_nothing_found(body: str) -> bool:
    # Exact comparison only: `[]` is a regular (empty) result body.
    return body == NOTHING_FOUND_BODY


def load_json(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise MalformedPayloadError(
            f"TMDb returned non-JSON response: {exc}",
            body_snippet=body[:400],
        ) from exc


def unwrap_payload(value: Any) -> Mapping[str, Any]:
    """Return the entity object from an object payload or a one-element array payload."""
    if isinstance(value, Mapping):
        return value
    if isinstance(value, list):
        if not value:
            raise MalformedPayloadError("TMDb returned an empty array where an entity was expected.")
        first = value[0]
        if isinstance(first, Mapping):
            return first
        raise MalformedPayloadError(
            f"TMDb returned an array whose first element is not an object: {type(first).__name__}."
        )
    raise MalformedPayloadError(f"TMDb returned unexpected JSON shape ({type(value).__name__}).")


def parse_service_date(value: str | None, *, field: str = "date") -> date | None:
    """
    Parse a `YYYY-MM-DD` service date by splitting on the first two `-`.

    Empty input means "no date set". Anything that does not yield a real
    calendar date raises `MalformedPayloadError` for `field`.
    """

    if value is None or value == "":
        return None

    first = value.find("-")
    second = value.find("-", first + 1) if first >= 0 else -1
    if first < 0 or second < 0:
        raise MalformedPayloadError(f"Date {value!r} is missing a '-' separator.", field=field)

    year_text = value[:first]
    month_text = value[first + 1 : second]
    day_text = value[second + 1 :]
    try:
        year, month, day = int(year_text), int(month_text), int(day_text)
    except ValueError as exc:
        raise MalformedPayloadError(f"Date {value!r} has a non-numeric component.", field=field) from exc

    try:
        return date(year, month, day)
    except ValueError as exc:
        raise MalformedPayloadError(f"Date {value!r} is not a valid calendar date: {exc}", field=field) from exc


def json_dumps_compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
