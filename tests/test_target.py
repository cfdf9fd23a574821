"""Tests for destination validation."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from envload.engine.target import is_frozen, validate_target
from envload.errors import InvalidTargetError, TargetNotPointerError, TargetNotStructError


@dataclass
class _Record:
    field: str = ""


@dataclass(frozen=True)
class _FrozenRecord:
    field: str = ""


class _Model(BaseModel):
    field: str = ""


class _PlainObject:
    field = ""


class TestValidateTarget:
    def test_dataclass_instance(self) -> None:
        validate_target(_Record())

    def test_pydantic_instance(self) -> None:
        validate_target(_Model())

    def test_frozen_instance_is_still_a_record(self) -> None:
        validate_target(_FrozenRecord())

    @pytest.mark.parametrize("target", [_Record, _Model, None, "string", 42, 1.5, True, ("a",), b"x"])
    def test_not_pointer(self, target: object) -> None:
        with pytest.raises(TargetNotPointerError):
            validate_target(target)

    @pytest.mark.parametrize("target", [{"field": ""}, ["field"], _PlainObject(), object()])
    def test_not_struct(self, target: object) -> None:
        with pytest.raises(TargetNotStructError):
            validate_target(target)

    def test_errors_share_base(self) -> None:
        assert issubclass(TargetNotPointerError, InvalidTargetError)
        assert issubclass(TargetNotStructError, InvalidTargetError)
        assert issubclass(InvalidTargetError, TypeError)


class TestIsFrozen:
    def test_mutable(self) -> None:
        assert is_frozen(_Record()) is False
        assert is_frozen(_Model()) is False

    def test_frozen_dataclass(self) -> None:
        assert is_frozen(_FrozenRecord()) is True
