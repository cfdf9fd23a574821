"""Build FieldDescriptors from a record's annotations and field metadata."""

from __future__ import annotations

import dataclasses
import inspect
import typing
from typing import Any, Annotated, Iterable, Mapping, get_args, get_origin

from envload.engine.target import is_frozen, is_pydantic_record
from envload.models.fields import (
    UNSUPPORTED,
    FieldDescriptor,
    SemanticKind,
    SemanticType,
)
from envload.types import DurationSpec, Env, FloatSpec, IntSpec


def _unwrap(annotation: Any) -> tuple[Any, list[Any]]:
    """Split ``Annotated[T, *extras]`` into ``(T, extras)``."""
    if get_origin(annotation) is Annotated:
        base, *extras = get_args(annotation)
        return base, extras
    return annotation, []


def _scalar_type(base: Any, markers: list[Any]) -> SemanticType:
    spec = next(
        (m for m in markers if isinstance(m, (IntSpec, FloatSpec, DurationSpec))),
        None,
    )
    # bool is an int subclass, so it has to be checked first.
    if base is bool:
        return SemanticType(SemanticKind.BOOL)
    if base is str:
        return SemanticType(SemanticKind.STRING)
    if base is int:
        if isinstance(spec, DurationSpec):
            return SemanticType(SemanticKind.DURATION, bits=64)
        if isinstance(spec, IntSpec):
            kind = SemanticKind.INT if spec.signed else SemanticKind.UINT
            return SemanticType(kind, bits=spec.bits)
        return SemanticType(SemanticKind.INT, bits=64)
    if base is float:
        bits = spec.bits if isinstance(spec, FloatSpec) else 64
        return SemanticType(SemanticKind.FLOAT, bits=bits)
    return UNSUPPORTED


def resolve_semantic_type(annotation: Any, extras: Iterable[Any] = ()) -> SemanticType:
    """Map a type annotation onto the converter that handles it.

    ``list[T]`` and ``dict[str, T]`` are supported for scalar T only;
    everything else (nested records, ``X | None``, non-str keys) resolves
    to UNSUPPORTED and is skipped by the engine.
    """
    base, markers = _unwrap(annotation)
    markers = [*extras, *markers]
    origin = get_origin(base)

    if origin is list:
        args = get_args(base)
        elem = resolve_semantic_type(args[0]) if args else UNSUPPORTED
        if not elem.is_scalar:
            return UNSUPPORTED
        return SemanticType(SemanticKind.SLICE, elem=elem)

    if origin is dict:
        args = get_args(base)
        if len(args) != 2 or _unwrap(args[0])[0] is not str:
            return UNSUPPORTED
        elem = resolve_semantic_type(args[1])
        if not elem.is_scalar:
            return UNSUPPORTED
        return SemanticType(SemanticKind.MAP, elem=elem)

    return _scalar_type(base, markers)


def _env_marker(markers: Iterable[Any]) -> Env | None:
    return next((m for m in markers if isinstance(m, Env)), None)


def _literal(value: Any) -> str | None:
    return None if value is None else str(value)


def _descriptor(
    name: str,
    annotation: Any,
    extras: list[Any],
    metadata: Mapping[str, Any],
    writable: bool,
) -> FieldDescriptor:
    _, markers = _unwrap(annotation)
    env = _env_marker([*extras, *markers])
    if env is not None:
        env_key, default, required = env.key, env.default, env.required
    else:
        env_key = metadata.get("env") or ""
        default = metadata.get("default")
        required = metadata.get("required") in (True, "true")

    return FieldDescriptor(
        name=name,
        semantic_type=resolve_semantic_type(annotation, extras),
        env_key=env_key,
        default=_literal(default),
        required=bool(required),
        writable=writable and not name.startswith("_"),
    )


# Raised by get_type_hints for annotations that cannot be evaluated at runtime.
_HINT_ERRORS = (NameError, AttributeError, TypeError, SyntaxError)


def _field_hint(cls: type, name: str, annotation: Any) -> Any:
    """Evaluate one field annotation in the module that declared it.

    Returns None when the annotation cannot be evaluated, which resolves to
    UNSUPPORTED.
    """
    if not isinstance(annotation, str):
        return annotation
    owner = next(
        (base for base in cls.__mro__ if name in inspect.get_annotations(base)),
        cls,
    )
    holder = type(owner.__name__, (), {
        "__annotations__": {name: annotation},
        "__module__": owner.__module__,
    })
    try:
        return typing.get_type_hints(holder, include_extras=True)[name]
    except _HINT_ERRORS:
        return None


def _field_hints(cls: type) -> dict[str, Any]:
    """Evaluated annotations of a dataclass, by field name.

    Names imported only under ``TYPE_CHECKING`` make get_type_hints fail for
    the whole class; in that case each field is evaluated on its own.
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except _HINT_ERRORS:
        return {f.name: _field_hint(cls, f.name, f.type) for f in dataclasses.fields(cls)}


def describe_fields(target: object) -> list[FieldDescriptor]:
    """Descriptors for every field of ``target`` in declaration order.

    ``target`` must already have passed validate_target.
    """
    frozen = is_frozen(target)

    if is_pydantic_record(target):
        return [
            _descriptor(
                name,
                info.annotation,
                list(info.metadata),
                {},
                writable=not (frozen or info.frozen),
            )
            for name, info in type(target).model_fields.items()
        ]

    hints = _field_hints(type(target))
    return [
        _descriptor(
            f.name,
            hints.get(f.name, f.type),
            [],
            f.metadata,
            writable=not frozen,
        )
        for f in dataclasses.fields(target)
    ]
