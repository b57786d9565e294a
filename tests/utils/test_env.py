from __future__ import annotations

import os
from pathlib import Path

import pytest

from moviedb.utils.env import load_env


def test_load_env_reads_explicit_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "tmdb.env"
    env_file.write_text("TMDB_API_KEY=from-file\nTMDB_LANGUAGE=fr\n", encoding="utf-8")
    for name in ("TMDB_API_KEY", "TMDB_LANGUAGE"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)

    loaded = load_env(env_file=env_file)

    assert loaded == env_file
    assert os.environ["TMDB_API_KEY"] == "from-file"
    assert os.environ["TMDB_LANGUAGE"] == "fr"


def test_load_env_does_not_override_by_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("TMDB_API_KEY=from-file\n", encoding="utf-8")
    monkeypatch.setenv("TMDB_API_KEY", "from-shell")

    load_env(env_file=env_file)
    assert os.environ["TMDB_API_KEY"] == "from-shell"

    load_env(env_file=env_file, override=True)
    assert os.environ["TMDB_API_KEY"] == "from-file"


def test_load_env_missing_explicit_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOVIEDB_ENV_FILE", str(tmp_path / "missing.env"))
    assert load_env() is None


def test_load_env_prefers_env_file_variable(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "pinned.env"
    env_file.write_text("TMDB_LANGUAGE=it\n", encoding="utf-8")
    monkeypatch.setenv("MOVIEDB_ENV_FILE", str(env_file))
    monkeypatch.setenv("TMDB_LANGUAGE", "placeholder")
    monkeypatch.delenv("TMDB_LANGUAGE")

    assert load_env() == env_file
    assert os.environ["TMDB_LANGUAGE"] == "it"
