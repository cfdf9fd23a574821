"""Type converters: raw env strings → typed field values."""

from __future__ import annotations

from typing import Any, Callable

from envload.engine.scalars import (
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_uint,
)
from envload.errors import (
    ConversionError,
    InvalidBoolError,
    InvalidDurationError,
    InvalidFloatError,
    InvalidIntError,
    InvalidMapFormatError,
    InvalidMapValueError,
    InvalidSliceElementError,
    InvalidUintError,
    ParseError,
)
from envload.models.fields import FieldDescriptor, SemanticKind, SemanticType

# Returned by convert() for field types the engine does not handle.
SKIP = object()

_SCALAR_PARSERS: dict[SemanticKind, Callable[[str, SemanticType], Any]] = {
    SemanticKind.STRING: lambda literal, _: literal,
    SemanticKind.INT: lambda literal, st: parse_int(literal, st.bits),
    SemanticKind.UINT: lambda literal, st: parse_uint(literal, st.bits),
    SemanticKind.FLOAT: lambda literal, st: parse_float(literal, st.bits),
    SemanticKind.BOOL: lambda literal, _: parse_bool(literal),
    SemanticKind.DURATION: lambda literal, _: parse_duration(literal),
}

_SCALAR_ERRORS: dict[SemanticKind, type[ConversionError]] = {
    SemanticKind.INT: InvalidIntError,
    SemanticKind.UINT: InvalidUintError,
    SemanticKind.FLOAT: InvalidFloatError,
    SemanticKind.BOOL: InvalidBoolError,
    SemanticKind.DURATION: InvalidDurationError,
}


def parse_scalar(semantic_type: SemanticType, literal: str) -> Any:
    """Parse one literal as a scalar semantic type; raises ParseError."""
    return _SCALAR_PARSERS[semantic_type.kind](literal, semantic_type)


def split_list(raw: str) -> list[str]:
    """Comma-split, strip each part, drop parts that are empty after stripping."""
    return [part for part in (p.strip() for p in raw.split(",")) if part]


def _convert_scalar(descriptor: FieldDescriptor, raw: str) -> Any:
    semantic_type = descriptor.semantic_type
    try:
        return parse_scalar(semantic_type, raw)
    except ParseError as exc:
        raise _SCALAR_ERRORS[semantic_type.kind](descriptor.name, raw, exc) from exc


def _convert_slice(descriptor: FieldDescriptor, raw: str) -> list[Any]:
    """``"8080, 9090,,3000"`` → ``[8080, 9090, 3000]``.

    Indexes in errors count retained parts only.
    """
    elem = descriptor.semantic_type.elem
    result: list[Any] = []
    for index, part in enumerate(split_list(raw)):
        try:
            result.append(parse_scalar(elem, part))
        except ParseError as exc:
            raise InvalidSliceElementError(
                descriptor.name, index, part, exc, kind=elem.kind.value,
            ) from exc
    return result


def _convert_map(descriptor: FieldDescriptor, raw: str) -> dict[str, Any]:
    """``"api:8080,db:5432"`` → ``{"api": 8080, "db": 5432}``.

    Each pair splits on its first ``:``. Later duplicate keys overwrite
    earlier ones.
    """
    elem = descriptor.semantic_type.elem
    result: dict[str, Any] = {}
    for pair in raw.split(","):
        key, sep, value = pair.strip().partition(":")
        if not sep:
            raise InvalidMapFormatError(descriptor.name, pair)
        key, value = key.strip(), value.strip()
        try:
            result[key] = parse_scalar(elem, value)
        except ParseError as exc:
            raise InvalidMapValueError(descriptor.name, key, value, exc) from exc
    return result


def convert(descriptor: FieldDescriptor, raw: str) -> Any:
    """Convert ``raw`` to the descriptor's type, or return SKIP if unsupported."""
    kind = descriptor.semantic_type.kind
    if kind is SemanticKind.SLICE:
        return _convert_slice(descriptor, raw)
    if kind is SemanticKind.MAP:
        return _convert_map(descriptor, raw)
    if descriptor.semantic_type.is_scalar:
        return _convert_scalar(descriptor, raw)
    return SKIP
