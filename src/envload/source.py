"""Read .env files into a flat key/value mapping."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import dotenv_values

from envload.errors import EnvSourceError


def read_env_source(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read ``path`` with python-dotenv.

    Quoting, comments, ``export`` prefixes and ``${VAR}`` interpolation are
    handled by dotenv. Keys declared without a value are dropped.
    """
    env_path = Path(path)
    if not env_path.is_file():
        raise EnvSourceError(str(path), "no such file")

    try:
        values = dotenv_values(env_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvSourceError(str(path), str(exc)) from exc

    return {key: value for key, value in values.items() if value is not None}
