"""Command-line check that loads a .env file into a record class and prints it.

Usage: envload-check --target=myapp.settings:Settings [--env-file=.env]
"""

from __future__ import annotations

import argparse
import dataclasses
import importlib
import json
import logging
import sys

from envload.engine.target import is_pydantic_record
from envload.errors import EnvLoadError
from envload.loader import load_and_parse
from envload.models.config import LoaderConfig

logger = logging.getLogger(__name__)

EXIT_LOAD_ERROR = 1
EXIT_BAD_TARGET = 2


def _import_target(spec: str) -> type:
    """Resolve ``package.module:ClassName`` to the class object."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"target must look like 'module:Class', got '{spec}'")
    module = importlib.import_module(module_name)
    return getattr(module, attr)


def _dump(record: object) -> dict:
    if is_pydantic_record(record):
        return record.model_dump()
    return dataclasses.asdict(record)


def run_check(target_spec: str, env_file: str, fail_on_missing_file: bool) -> int:
    """Populate a fresh instance of the target class and print its fields as JSON."""
    try:
        record = _import_target(target_spec)()
    except (ImportError, AttributeError, ValueError, TypeError) as exc:
        logger.error("Cannot build target %s: %s", target_spec, exc)
        return EXIT_BAD_TARGET

    try:
        load_and_parse(env_file, record, fail_on_missing_file=fail_on_missing_file)
    except EnvLoadError as exc:
        logger.error("Loading %s into %s failed: %s", env_file, target_spec, exc)
        return EXIT_LOAD_ERROR

    print(json.dumps(_dump(record), indent=2, sort_keys=True, default=str))
    return 0


def main(argv: list[str] | None = None) -> int:
    cfg = LoaderConfig.from_env()

    parser = argparse.ArgumentParser(description="Load a .env file into a record class")
    parser.add_argument("--target", required=True, help="Record class as module:Class")
    parser.add_argument("--env-file", default=cfg.env_file, help="Path of the .env file")
    parser.add_argument("--log-level", default=cfg.log_level, help="Logging level")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=cfg.fail_on_missing_file,
        help="Fail when the env file cannot be read",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return run_check(args.target, args.env_file, args.strict)


if __name__ == "__main__":
    sys.exit(main())
