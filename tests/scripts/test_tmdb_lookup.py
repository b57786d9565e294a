from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from moviedb.integrations.tmdb.errors import TmdbTransportError
from moviedb.models.movies import Movie
from moviedb.models.people import Person
from scripts import tmdb_lookup


def test_search_movies_prints_one_line_per_result(capsys: pytest.CaptureFixture[str]) -> None:
    client = MagicMock()
    client.search_movies.return_value = [Movie(tmdb_id=348, name="Alien", rating=7.9)]

    exit_code = tmdb_lookup.main(["search-movies", "Alien"], client=client)

    assert exit_code == 0
    client.search_movies.assert_called_once_with("Alien")
    client.deep_search_movies.assert_not_called()
    out = capsys.readouterr().out
    assert "348 | Alien (????) | rating=7.9 | reduced" in out


def test_deep_search_people_uses_deep_variant(capsys: pytest.CaptureFixture[str]) -> None:
    client = MagicMock()
    client.deep_search_people.return_value = [Person(tmdb_id=287, name="Brad Pitt", reduced=False), None]

    exit_code = tmdb_lookup.main(["search-people", "Brad Pitt", "--deep"], client=client)

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("287 | Brad Pitt | popularity=0 | full")
    assert lines[1] == "(not found)"


def test_missing_api_key_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    client = MagicMock()
    client.search_people.return_value = None

    assert tmdb_lookup.main(["search-people", "Pitt"], client=client) == 2
    assert "TMDB_API_KEY" in capsys.readouterr().err


def test_client_errors_are_reported(capsys: pytest.CaptureFixture[str]) -> None:
    client = MagicMock()
    client.most_popular_ids.side_effect = TmdbTransportError("down")

    assert tmdb_lookup.main(["most-popular", "--ids-only"], client=client) == 1
    assert "ERROR: down" in capsys.readouterr().err


def test_box_office_ids_only(capsys: pytest.CaptureFixture[str]) -> None:
    client = MagicMock()
    client.box_office_ids.return_value = [27205, 10193]

    assert tmdb_lookup.main(["box-office", "--ids-only"], client=client) == 0
    assert capsys.readouterr().out.splitlines() == ["27205", "10193"]
