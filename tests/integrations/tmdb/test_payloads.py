from __future__ import annotations

from datetime import date

import pytest

from moviedb.integrations.tmdb.errors import MalformedPayloadError
from moviedb.integrations.tmdb.payloads import (
    is_nothing_found,
    load_json,
    parse_service_date,
    read_body,
    unwrap_payload,
)


def test_parse_service_date_splits_on_dashes() -> None:
    parsed = parse_service_date("1994-09-23")
    assert parsed == date(1994, 9, 23)
    assert parsed.year == 1994
    # zero-based month index 8
    assert parsed.month - 1 == 8
    assert parsed.day == 23


def test_parse_service_date_empty_means_unset() -> None:
    assert parse_service_date("") is None
    assert parse_service_date(None) is None


@pytest.mark.parametrize("value", ["1994-13-99", "19x4-01-01", "1994-09", "1994"])
def test_parse_service_date_rejects_malformed_values(value: str) -> None:
    with pytest.raises(MalformedPayloadError) as excinfo:
        parse_service_date(value, field="released")
    assert excinfo.value.field == "released"


def test_nothing_found_sentinel_is_matched_verbatim() -> None:
    assert is_nothing_found('["Nothing found."]') is True
    assert is_nothing_found("[]") is False
    assert is_nothing_found('[ "Nothing found." ]') is False
    assert is_nothing_found('["Nothing found"]') is False


def test_read_body_joins_lines() -> None:
    assert read_body(b'["Nothing found."]\n') == '["Nothing found."]'
    assert read_body(b"[\r\n  {\"id\": 1}\r\n]") == '[  {"id": 1}]'
    assert read_body("<a>\n<b>") == "<a><b>"


def test_read_body_keeps_unicode_separators_inside_strings() -> None:
    raw = '[{"overview":"a\u2028b\x85c"}]\r\n'.encode("utf-8")

    body = read_body(raw)

    assert load_json(body)[0]["overview"] == "a\u2028b\x85c"


def test_unwrap_payload_accepts_object_or_wrapping_array() -> None:
    obj = {"id": 1}
    assert unwrap_payload(obj) is obj
    assert unwrap_payload([obj, {"id": 2}]) is obj


@pytest.mark.parametrize("value", [[], ["Nothing found."], "text", 42, None])
def test_unwrap_payload_rejects_other_shapes(value: object) -> None:
    with pytest.raises(MalformedPayloadError):
        unwrap_payload(value)


def test_load_json_wraps_decode_errors() -> None:
    assert load_json("[]") == []
    with pytest.raises(MalformedPayloadError) as excinfo:
        load_json("<html>oops</html>")
    assert excinfo.value.body_snippet == "<html>oops</html>"
