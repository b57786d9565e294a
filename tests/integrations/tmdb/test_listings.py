from __future__ import annotations

from pathlib import Path

import pytest

from moviedb.integrations.tmdb.errors import MalformedPayloadError
from moviedb.integrations.tmdb.listings import ListingSection, extract_ids


def _read_fixture(name: str) -> str:
    base = Path(__file__).resolve().parents[2] / "fixtures" / "tmdb"
    return (base / name).read_text(encoding="utf-8")


def test_extract_ids_reads_box_office_before_marker() -> None:
    html = _read_fixture("homepage_sample.html")
    assert extract_ids(html, ListingSection.BOX_OFFICE) == [27205, 10193, 23483]


def test_extract_ids_reads_most_popular_after_marker() -> None:
    html = _read_fixture("homepage_sample.html")
    assert extract_ids(html, ListingSection.MOST_POPULAR) == [550, 13]


def test_extract_ids_preserves_first_seen_order() -> None:
    html = (
        '<a href="/movie/123">x</a><a href="/movie/456">y</a><a href="/movie/123">x</a>'
        '<li class="first most-popular"><a href="/movie/789">z</a><a href="/movie/12">w</a>'
    )
    assert extract_ids(html, ListingSection.BOX_OFFICE) == [123, 456]
    assert extract_ids(html, ListingSection.MOST_POPULAR) == [789, 12]


def test_extract_ids_without_marker() -> None:
    html = '<a href="/movie/1">a</a><a href="/movie/2">b</a>'
    assert extract_ids(html, ListingSection.BOX_OFFICE) == [1, 2]
    with pytest.raises(MalformedPayloadError):
        extract_ids(html, ListingSection.MOST_POPULAR)


def test_extract_ids_empty_sections() -> None:
    assert extract_ids("first most-popular", ListingSection.BOX_OFFICE) == []
    assert extract_ids("first most-popular", ListingSection.MOST_POPULAR) == []
