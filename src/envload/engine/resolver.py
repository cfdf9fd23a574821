"""Field resolution engine: populate a record from a flat env mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from envload.engine.convert import SKIP, convert
from envload.engine.introspect import describe_fields
from envload.engine.target import validate_target
from envload.errors import MissingRequiredFieldError
from envload.models.fields import FieldDescriptor

logger = logging.getLogger(__name__)


@dataclass
class FieldResolver:
    """Per-field resolution state: the field, its record and its raw string."""

    target: object
    descriptor: FieldDescriptor
    raw_value: str = ""

    @property
    def active(self) -> bool:
        return bool(self.descriptor.env_key) and self.descriptor.writable

    def resolve_value(self, source: Mapping[str, str]) -> None:
        """Pick the raw string: mapping value (even ""), else default, else ""."""
        self.raw_value = ""
        descriptor = self.descriptor
        if not self.active:
            logger.debug("Field %s skipped: no env key or not writable", descriptor.name)
            return

        if descriptor.env_key in source:
            logger.debug("Field %s read from %s", descriptor.name, descriptor.env_key)
            self.raw_value = source[descriptor.env_key]
        else:
            logger.debug("Field %s falls back to its default", descriptor.name)
            self.raw_value = descriptor.default_literal

    def check_required(self) -> None:
        if self.active and self.raw_value == "" and self.descriptor.required:
            raise MissingRequiredFieldError(self.descriptor.name, self.descriptor.env_key)

    def set_value(self) -> bool:
        """Convert and assign the raw value. Returns False if nothing was written."""
        if self.raw_value == "":
            return False
        value = convert(self.descriptor, self.raw_value)
        if value is SKIP:
            logger.debug(
                "Field %s has unsupported type %s, left untouched",
                self.descriptor.name, self.descriptor.semantic_type.kind.value,
            )
            return False
        setattr(self.target, self.descriptor.name, value)
        return True


def populate(source: Mapping[str, str] | None, target: object) -> None:
    """Assign typed values from ``source`` onto the fields of ``target``.

    Fields are processed in declaration order and the first error aborts the
    call. Fields written before the failing one keep their new values.
    """
    validate_target(target)
    source = source or {}

    written = 0
    descriptors = describe_fields(target)
    for descriptor in descriptors:
        resolver = FieldResolver(target, descriptor)
        resolver.resolve_value(source)
        resolver.check_required()
        if resolver.set_value():
            written += 1

    logger.debug(
        "Populated %d of %d fields on %s", written, len(descriptors), type(target).__name__,
    )
