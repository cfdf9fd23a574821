"""Static metadata describing one record field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SemanticKind(str, Enum):
    STRING = "string"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    DURATION = "duration"
    SLICE = "slice"
    MAP = "map"
    UNSUPPORTED = "unsupported"


SCALAR_KINDS = frozenset({
    SemanticKind.STRING,
    SemanticKind.INT,
    SemanticKind.UINT,
    SemanticKind.FLOAT,
    SemanticKind.BOOL,
    SemanticKind.DURATION,
})


@dataclass(frozen=True)
class SemanticType:
    """Logical type of a field, used to pick a converter."""

    kind: SemanticKind
    bits: int = 0  # width for INT / UINT / FLOAT, 0 otherwise
    elem: SemanticType | None = None  # element type for SLICE / MAP values

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS


UNSUPPORTED = SemanticType(SemanticKind.UNSUPPORTED)


@dataclass(frozen=True)
class FieldDescriptor:
    """A record field plus its env metadata.

    A descriptor without ``env_key`` is never populated, and neither is one
    whose field is not writable.
    """

    name: str
    semantic_type: SemanticType
    env_key: str = ""
    default: str | None = None
    required: bool = False
    writable: bool = True

    @property
    def default_literal(self) -> str:
        return self.default or ""
