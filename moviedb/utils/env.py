from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_FILE_VARIABLE = "MOVIEDB_ENV_FILE"


def _candidate_env_files(env_file: str | Path | None) -> list[Path]:
    explicit = env_file or os.getenv(ENV_FILE_VARIABLE)
    if explicit:
        return [Path(explicit).expanduser()]

    candidates = [Path(__file__).resolve().parents[2] / ".env"]
    discovered = find_dotenv(usecwd=True)
    if discovered:
        candidates.append(Path(discovered))
    return candidates


def load_env(*, env_file: str | Path | None = None, override: bool = False) -> Path | None:
    """
    Load TMDb settings from a `.env` file into the process environment.

    `env_file` (or `$MOVIEDB_ENV_FILE`) pins the file; otherwise the repo-root
    `.env` wins over the nearest one found walking up from the cwd. Returns the
    loaded path, or `None` when no file exists.
    """

    for path in _candidate_env_files(env_file):
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None
