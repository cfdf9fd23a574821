"""Exception hierarchy raised while loading env values into a record.

Every failure is raised, never swallowed: ``populate`` stops at the first
error and fields written before it keep their new values.
"""

from __future__ import annotations

SYNTAX = "invalid syntax"
RANGE = "value out of range"


class ParseError(ValueError):
    """A literal could not be parsed into a scalar value."""

    def __init__(self, func: str, literal: str, reason: str) -> None:
        self.func = func
        self.literal = literal
        self.reason = reason
        super().__init__(f'{func}: parsing "{literal}": {reason}')


class EnvLoadError(Exception):
    """Base class for all envload failures."""


# ---------------------------------------------------------------------------
# Target validation
# ---------------------------------------------------------------------------

class InvalidTargetError(EnvLoadError, TypeError):
    """The destination is not a mutable record instance."""


class TargetNotPointerError(InvalidTargetError):
    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            f"target must be a mutable record instance, got {type(target).__name__}"
        )


class TargetNotStructError(InvalidTargetError):
    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            "target must be a dataclass or pydantic model instance, "
            f"got {type(target).__name__}"
        )


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------

class MissingRequiredFieldError(EnvLoadError):
    def __init__(self, field_name: str, env_key: str) -> None:
        self.field_name = field_name
        self.env_key = env_key
        super().__init__(f"missing required field: field={field_name} env={env_key}")


class ConversionError(EnvLoadError, ValueError):
    """A raw string could not be converted into the field's type."""

    kind = "value"

    def __init__(self, field_name: str, raw: str, cause: Exception) -> None:
        self.field_name = field_name
        self.raw = raw
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"invalid {self.kind} for field '{self.field_name}': {self.cause}"


class InvalidIntError(ConversionError):
    kind = "int"


class InvalidUintError(ConversionError):
    kind = "uint"


class InvalidFloatError(ConversionError):
    kind = "float"


class InvalidBoolError(ConversionError):
    kind = "bool"


class InvalidDurationError(ConversionError):
    kind = "duration"


class InvalidSliceElementError(ConversionError):
    def __init__(
        self, field_name: str, index: int, raw: str, cause: Exception, kind: str = "value",
    ) -> None:
        self.index = index
        self.kind = kind
        super().__init__(field_name, raw, cause)

    def _describe(self) -> str:
        return (
            f"invalid {self.kind} in slice for field '{self.field_name}' "
            f"at index {self.index}: {self.cause}"
        )


class InvalidMapValueError(ConversionError):
    def __init__(self, field_name: str, key: str, raw: str, cause: Exception) -> None:
        self.key = key
        super().__init__(field_name, raw, cause)

    def _describe(self) -> str:
        return (
            f"invalid map value for field '{self.field_name}' "
            f"key '{self.key}': {self.cause}"
        )


class InvalidMapFormatError(EnvLoadError, ValueError):
    def __init__(self, field_name: str, pair: str) -> None:
        self.field_name = field_name
        self.pair = pair
        super().__init__(f"invalid map format for field '{field_name}': '{pair}'")


# ---------------------------------------------------------------------------
# Environment source
# ---------------------------------------------------------------------------

class EnvSourceError(EnvLoadError):
    """The env file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not read env file {path}: {reason}")
