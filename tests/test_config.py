from __future__ import annotations

import pytest

from moviedb.config import TMDB_API_BASE_URL, TMDB_DEFAULT_LANGUAGE, TmdbSettings


def test_settings_from_env_reads_tmdb_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "  secret  ")
    monkeypatch.setenv("TMDB_LANGUAGE", "de")
    monkeypatch.setenv("TMDB_TIMEOUT_SECONDS", "5")
    monkeypatch.delenv("TMDB_BASE_URL", raising=False)

    settings = TmdbSettings.from_env(load_dotenv_file=False)

    assert settings.api_key == "secret"
    assert settings.has_api_key is True
    assert settings.language == "de"
    assert settings.timeout_seconds == 5.0
    assert settings.base_url == TMDB_API_BASE_URL


def test_settings_from_env_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TMDB_API_KEY", "TMDB_LANGUAGE", "TMDB_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = TmdbSettings.from_env(load_dotenv_file=False)

    assert settings.api_key is None
    assert settings.has_api_key is False
    assert settings.language == TMDB_DEFAULT_LANGUAGE


def test_settings_rejects_non_numeric_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ValueError):
        TmdbSettings.from_env(load_dotenv_file=False)
