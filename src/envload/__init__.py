"""Load .env values into dataclass or pydantic records with typed parsing."""

from __future__ import annotations

from envload.engine.resolver import populate
from envload.engine.scalars import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
)
from envload.engine.target import validate_target
from envload.errors import (
    ConversionError,
    EnvLoadError,
    EnvSourceError,
    InvalidBoolError,
    InvalidDurationError,
    InvalidFloatError,
    InvalidIntError,
    InvalidMapFormatError,
    InvalidMapValueError,
    InvalidSliceElementError,
    InvalidTargetError,
    InvalidUintError,
    MissingRequiredFieldError,
    ParseError,
    TargetNotPointerError,
    TargetNotStructError,
)
from envload.loader import load_and_parse
from envload.source import read_env_source
from envload.types import (
    Duration,
    Env,
    Float32,
    Float64,
    Int,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    env_field,
)

__all__ = [
    "ConversionError",
    "Duration",
    "Env",
    "EnvLoadError",
    "EnvSourceError",
    "Float32",
    "Float64",
    "HOUR",
    "Int",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidBoolError",
    "InvalidDurationError",
    "InvalidFloatError",
    "InvalidIntError",
    "InvalidMapFormatError",
    "InvalidMapValueError",
    "InvalidSliceElementError",
    "InvalidTargetError",
    "InvalidUintError",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "MissingRequiredFieldError",
    "NANOSECOND",
    "ParseError",
    "SECOND",
    "TargetNotPointerError",
    "TargetNotStructError",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "env_field",
    "load_and_parse",
    "populate",
    "read_env_source",
    "validate_target",
]
