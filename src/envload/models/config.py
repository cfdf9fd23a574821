"""Configuration models."""

from __future__ import annotations

import os
from typing import ClassVar, Mapping

from pydantic import BaseModel, Field


class LoaderConfig(BaseModel):
    """Loader settings taken from ENVLOAD_-prefixed process variables.

    These only steer the command-line tool and callers that want the same
    conventions; the engine itself reads no settings.
    """

    ENV_PREFIX: ClassVar[str] = "ENVLOAD_"

    env_file: str = Field(
        default=".env",
        description="Path of the .env file to read.",
    )
    log_level: str = Field(default="INFO")
    fail_on_missing_file: bool = Field(
        default=False,
        description="Raise instead of falling back to defaults when the env file is unreadable.",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoaderConfig:
        """Build from ``ENVLOAD_<FIELD>`` variables; unset ones keep their defaults."""
        environ = os.environ if environ is None else environ
        overrides = {
            name: environ[key]
            for name in cls.model_fields
            if (key := f"{cls.ENV_PREFIX}{name.upper()}") in environ
        }
        return cls(**overrides)
