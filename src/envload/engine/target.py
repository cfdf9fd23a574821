"""Destination checks: is the target a mutable record instance?"""

from __future__ import annotations

import dataclasses

from pydantic import BaseModel

from envload.errors import TargetNotPointerError, TargetNotStructError

# Values that can never be mutated in place.
_IMMUTABLE_TYPES = (type(None), bool, int, float, complex, str, bytes, tuple, frozenset)


def is_pydantic_record(target: object) -> bool:
    return isinstance(target, BaseModel)


def is_dataclass_record(target: object) -> bool:
    return dataclasses.is_dataclass(target) and not isinstance(target, type)


def validate_target(target: object) -> None:
    """Raise unless ``target`` is a dataclass or pydantic model instance.

    Passing the record class itself, or an immutable value, is a
    TargetNotPointerError; any other non-record object is a
    TargetNotStructError.
    """
    if isinstance(target, type) or isinstance(target, _IMMUTABLE_TYPES):
        raise TargetNotPointerError(target)
    if not (is_dataclass_record(target) or is_pydantic_record(target)):
        raise TargetNotStructError(target)


def is_frozen(target: object) -> bool:
    if is_pydantic_record(target):
        return bool(type(target).model_config.get("frozen", False))
    params = getattr(type(target), "__dataclass_params__", None)
    return bool(params and params.frozen)
