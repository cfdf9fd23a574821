"""Tests for field discovery and semantic type resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Annotated, Optional

import pytest
from pydantic import BaseModel, ConfigDict, Field

from envload.engine.introspect import describe_fields, resolve_semantic_type
from envload.models.fields import UNSUPPORTED, SemanticKind, SemanticType
from envload.types import (
    Duration,
    Env,
    Float32,
    Int8,
    Int16,
    UInt,
    UInt32,
    env_field,
)

if TYPE_CHECKING:
    from decimal import Decimal


@dataclass
class _TaggedRecord:
    name: str = env_field("APP_NAME", default="svc", field_default="")
    port: Annotated[UInt32, Env("PORT", default="8080", required=True)] = 0
    raw_meta: int = field(default=0, metadata={"env": "RAW", "required": "true"})
    untagged: str = ""
    _private: str = env_field("PRIVATE", field_default="")


@dataclass
class _CheckingOnlyImport:
    price: Decimal | None = None
    amount: Annotated[Decimal, Env("AMOUNT")] = None
    name: str = env_field("NAME", field_default="")
    retries: Int8 = env_field("RETRIES", field_default=0)


@dataclass(frozen=True)
class _FrozenRecord:
    name: str = env_field("NAME", field_default="")


class _Settings(BaseModel):
    host: Annotated[str, Env("HOST", default="localhost")] = ""
    retries: Annotated[Int8, Env("RETRIES")] = 0
    locked: Annotated[str, Env("LOCKED")] = Field(default="", frozen=True)
    plain: int = 0


class _FrozenSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: Annotated[str, Env("HOST")] = ""


# ---------------------------------------------------------------------------
# resolve_semantic_type
# ---------------------------------------------------------------------------


class TestResolveSemanticType:
    @pytest.mark.parametrize("annotation,expected", [
        (str, SemanticType(SemanticKind.STRING)),
        (bool, SemanticType(SemanticKind.BOOL)),
        (int, SemanticType(SemanticKind.INT, bits=64)),
        (Int8, SemanticType(SemanticKind.INT, bits=8)),
        (Int16, SemanticType(SemanticKind.INT, bits=16)),
        (UInt, SemanticType(SemanticKind.UINT, bits=64)),
        (UInt32, SemanticType(SemanticKind.UINT, bits=32)),
        (float, SemanticType(SemanticKind.FLOAT, bits=64)),
        (Float32, SemanticType(SemanticKind.FLOAT, bits=32)),
        (Duration, SemanticType(SemanticKind.DURATION, bits=64)),
    ])
    def test_scalars(self, annotation: object, expected: SemanticType) -> None:
        assert resolve_semantic_type(annotation) == expected

    def test_list_of_sized_ints(self) -> None:
        assert resolve_semantic_type(list[Int8]) == SemanticType(
            SemanticKind.SLICE, elem=SemanticType(SemanticKind.INT, bits=8),
        )

    def test_dict_with_str_keys(self) -> None:
        assert resolve_semantic_type(dict[str, bool]) == SemanticType(
            SemanticKind.MAP, elem=SemanticType(SemanticKind.BOOL),
        )

    def test_annotated_outer_markers(self) -> None:
        annotation = Annotated[list[str], Env("TAGS")]
        assert resolve_semantic_type(annotation).kind is SemanticKind.SLICE

    @pytest.mark.parametrize("annotation", [
        dict[int, str],
        dict[str, list[str]],
        list[list[int]],
        list[dict[str, str]],
        Optional[str],
        str | None,
        list,
        dict,
        bytes,
        complex,
        tuple[int, int],
    ])
    def test_unsupported(self, annotation: object) -> None:
        assert resolve_semantic_type(annotation) == UNSUPPORTED


# ---------------------------------------------------------------------------
# describe_fields
# ---------------------------------------------------------------------------


class TestDescribeDataclass:
    def test_declaration_order(self) -> None:
        names = [d.name for d in describe_fields(_TaggedRecord())]
        assert names == ["name", "port", "raw_meta", "untagged", "_private"]

    def test_env_field_metadata(self) -> None:
        desc = describe_fields(_TaggedRecord())[0]
        assert desc.env_key == "APP_NAME"
        assert desc.default == "svc"
        assert desc.required is False

    def test_annotated_env_marker(self) -> None:
        desc = describe_fields(_TaggedRecord())[1]
        assert desc.env_key == "PORT"
        assert desc.default == "8080"
        assert desc.required is True
        assert desc.semantic_type == SemanticType(SemanticKind.UINT, bits=32)

    def test_raw_metadata_required_string(self) -> None:
        desc = describe_fields(_TaggedRecord())[2]
        assert desc.env_key == "RAW"
        assert desc.required is True
        assert desc.default is None

    def test_untagged_field_has_no_key(self) -> None:
        desc = describe_fields(_TaggedRecord())[3]
        assert desc.env_key == ""

    def test_private_field_not_writable(self) -> None:
        desc = describe_fields(_TaggedRecord())[4]
        assert desc.writable is False

    def test_frozen_dataclass_not_writable(self) -> None:
        assert [d.writable for d in describe_fields(_FrozenRecord())] == [False]


class TestUnresolvableAnnotations:
    def test_other_fields_still_resolved(self) -> None:
        descs = {d.name: d for d in describe_fields(_CheckingOnlyImport())}
        assert descs["name"].semantic_type == SemanticType(SemanticKind.STRING)
        assert descs["retries"].semantic_type == SemanticType(SemanticKind.INT, bits=8)
        assert descs["retries"].env_key == "RETRIES"

    def test_unresolvable_fields_unsupported(self) -> None:
        descs = {d.name: d for d in describe_fields(_CheckingOnlyImport())}
        assert descs["price"].semantic_type == UNSUPPORTED
        assert descs["amount"].semantic_type == UNSUPPORTED


class TestDescribePydantic:
    def test_fields(self) -> None:
        descs = {d.name: d for d in describe_fields(_Settings())}
        assert descs["host"].env_key == "HOST"
        assert descs["host"].default == "localhost"
        assert descs["retries"].semantic_type == SemanticType(SemanticKind.INT, bits=8)
        assert descs["plain"].env_key == ""

    def test_frozen_field(self) -> None:
        descs = {d.name: d for d in describe_fields(_Settings())}
        assert descs["locked"].writable is False
        assert descs["host"].writable is True

    def test_frozen_model(self) -> None:
        assert [d.writable for d in describe_fields(_FrozenSettings())] == [False]
