"""Read a .env file and populate a record from it."""

from __future__ import annotations

import logging
import os

from envload.engine.resolver import populate
from envload.errors import EnvSourceError
from envload.source import read_env_source

logger = logging.getLogger(__name__)


def load_and_parse(
    path: str | os.PathLike[str],
    target: object,
    *,
    fail_on_missing_file: bool = False,
) -> None:
    """Load ``path`` and populate ``target`` from it.

    An unreadable env file is logged and treated as empty, so every field
    falls back to its default. Set ``fail_on_missing_file`` to raise the
    EnvSourceError instead.
    """
    try:
        env_map = read_env_source(path)
    except EnvSourceError as exc:
        if fail_on_missing_file:
            raise
        logger.warning("Could not read env file [%s: %s]. Using defaults only.", path, exc.reason)
        env_map = {}
    else:
        logger.info("Read %d keys from %s", len(env_map), path)

    populate(env_map, target)
