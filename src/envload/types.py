"""Annotation markers for declaring env-backed fields.

Sized numeric types are plain ``int`` / ``float`` carrying a width marker::

    @dataclass
    class Settings:
        port: Annotated[UInt16, Env("PORT", default="8080")] = 0
        timeout: Duration = env_field("TIMEOUT", default="30s", field_default=0)
        tags: list[str] = env_field("TAGS", default_factory=list)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Annotated, Any


@dataclass(frozen=True)
class IntSpec:
    bits: int = 64
    signed: bool = True


@dataclass(frozen=True)
class FloatSpec:
    bits: int = 64


@dataclass(frozen=True)
class DurationSpec:
    """Integer nanoseconds parsed from literals like ``1h30m``."""


@dataclass(frozen=True)
class Env:
    """Env metadata for a field: source key, fallback literal, required flag."""

    key: str
    default: str | None = None
    required: bool = False


Int = Annotated[int, IntSpec(64)]
Int8 = Annotated[int, IntSpec(8)]
Int16 = Annotated[int, IntSpec(16)]
Int32 = Annotated[int, IntSpec(32)]
Int64 = Annotated[int, IntSpec(64)]

UInt = Annotated[int, IntSpec(64, signed=False)]
UInt8 = Annotated[int, IntSpec(8, signed=False)]
UInt16 = Annotated[int, IntSpec(16, signed=False)]
UInt32 = Annotated[int, IntSpec(32, signed=False)]
UInt64 = Annotated[int, IntSpec(64, signed=False)]

Float32 = Annotated[float, FloatSpec(32)]
Float64 = Annotated[float, FloatSpec(64)]

Duration = Annotated[int, DurationSpec()]


def env_field(
    key: str,
    *,
    default: str | None = None,
    required: bool = False,
    **kwargs: Any,
) -> Any:
    """Dataclass field carrying env metadata.

    ``default`` is the env fallback literal, not the Python default. The
    Python default goes in ``field_default`` (or ``default_factory``); without
    one the dataclass constructor requires the field.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata.update({"env": key, "default": default, "required": required})
    if "field_default" in kwargs:
        kwargs["default"] = kwargs.pop("field_default")
    return dataclasses.field(metadata=metadata, **kwargs)
