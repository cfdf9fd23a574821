"""Strict scalar parsers for env literals.

Python's own ``int()`` / ``float()`` accept surrounding whitespace and digit
underscores, so every literal is matched against an explicit grammar first.
Failures raise ParseError with either a syntax or a range reason.
"""

from __future__ import annotations

import math
import re
import struct

from envload.errors import RANGE, SYNTAX, ParseError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_DURATION_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # Greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_INT64_LIMIT = 1 << 63
# Fraction digits kept per number; the rest are far below one nanosecond.
_MAX_FRACTION_DIGITS = 32

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)
_DURATION_NUMBER_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?")

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def int_bounds(bits: int, signed: bool = True) -> tuple[int, int]:
    """Inclusive (min, max) of an integer of the given width."""
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def _exceeds(digits: str, limit: int) -> bool:
    """Compare a digit run against ``limit`` without converting it.

    ``int()`` refuses strings past the interpreter's digit limit, so the
    range check happens on the text.
    """
    digits = digits.lstrip("0") or "0"
    bound = str(limit)
    if len(digits) != len(bound):
        return len(digits) > len(bound)
    return digits > bound


def parse_int(literal: str, bits: int = 64) -> int:
    if not _SIGNED_RE.fullmatch(literal):
        raise ParseError("parse_int", literal, SYNTAX)
    low, high = int_bounds(bits)
    negative = literal[0] == "-"
    if _exceeds(literal.lstrip("+-"), -low if negative else high):
        raise ParseError("parse_int", literal, RANGE)
    return int(literal)


def parse_uint(literal: str, bits: int = 64) -> int:
    if not _UNSIGNED_RE.fullmatch(literal):
        raise ParseError("parse_uint", literal, SYNTAX)
    if _exceeds(literal, int_bounds(bits, signed=False)[1]):
        raise ParseError("parse_uint", literal, RANGE)
    return int(literal)


def parse_float(literal: str, bits: int = 64) -> float:
    """Parse a decimal, hex (``0x1p-2``) or special (``inf``/``nan``) float.

    Finite literals that do not fit the width raise a range error. 32-bit
    results are rounded to single precision.
    """
    if _SPECIAL_FLOAT_RE.fullmatch(literal):
        return float(literal)

    try:
        if _DECIMAL_FLOAT_RE.fullmatch(literal):
            value = float(literal)
        elif _HEX_FLOAT_RE.fullmatch(literal):
            value = float.fromhex(literal)
        else:
            raise ParseError("parse_float", literal, SYNTAX)
    except OverflowError:
        raise ParseError("parse_float", literal, RANGE) from None

    if math.isinf(value):
        raise ParseError("parse_float", literal, RANGE)

    if bits == 32:
        try:
            (value,) = struct.unpack("f", struct.pack("f", value))
        except OverflowError:
            raise ParseError("parse_float", literal, RANGE) from None
    return value


def parse_bool(literal: str) -> bool:
    if literal in _TRUE_LITERALS:
        return True
    if literal in _FALSE_LITERALS:
        return False
    raise ParseError("parse_bool", literal, SYNTAX)


def parse_duration(literal: str) -> int:
    """Parse ``1h30m``, ``-1.5s``, ``300ms`` ... into integer nanoseconds.

    A duration is an optionally signed run of decimal numbers, each with an
    optional fraction and a mandatory unit suffix. The bare literal ``0``
    needs no unit. Fractions finer than a nanosecond are truncated.
    """
    s = literal
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ParseError("parse_duration", literal, "invalid duration")

    total = 0
    while s:
        if s[0] not in "0123456789.":
            raise ParseError("parse_duration", literal, "invalid duration")

        match = _DURATION_NUMBER_RE.match(s)
        whole, frac = match.group(1), match.group(2)
        if not whole and not frac:
            raise ParseError("parse_duration", literal, "invalid duration")
        s = s[match.end():]

        end = 0
        while end < len(s) and s[end] not in "0123456789.":
            end += 1
        if end == 0:
            raise ParseError("parse_duration", literal, "missing unit")
        unit_name, s = s[:end], s[end:]
        unit = _DURATION_UNITS.get(unit_name)
        if unit is None:
            raise ParseError("parse_duration", literal, f'unknown unit "{unit_name}"')

        whole = whole.lstrip("0")
        if _exceeds(whole, _INT64_LIMIT // unit):
            raise ParseError("parse_duration", literal, "invalid duration")
        value = int(whole or "0") * unit
        if frac:
            frac = frac[:_MAX_FRACTION_DIGITS]
            value += int(frac) * unit // 10 ** len(frac)

        total += value
        if total > _INT64_LIMIT:
            raise ParseError("parse_duration", literal, "invalid duration")

    if negative:
        return -total
    if total > _INT64_LIMIT - 1:
        raise ParseError("parse_duration", literal, "invalid duration")
    return total
