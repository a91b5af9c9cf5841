"""Conversions between integers and their JSON string form."""

from __future__ import annotations

import re

from tendermint.errors import Error, ErrorKind

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1
_U64_MAX = (1 << 64) - 1

_DIGITS = re.compile(r"[0-9]+")


def _parse_int(value: object, signed: bool, lo: int, hi: int) -> int:
    if not isinstance(value, str):
        raise Error(
            ErrorKind.PARSE,
            f"invalid type: expected a string, got {type(value).__name__}",
        )
    if not value:
        raise Error(ErrorKind.PARSE, "cannot parse integer from empty string")
    negative = False
    digits = value
    if digits[0] == "+":
        digits = digits[1:]
    elif digits[0] == "-" and signed:
        negative = True
        digits = digits[1:]
    if not _DIGITS.fullmatch(digits):
        raise Error(ErrorKind.PARSE, "invalid digit found in string")
    number = -int(digits) if negative else int(digits)
    if number > hi:
        raise Error(ErrorKind.PARSE, "number too large to fit in target type")
    if number < lo:
        raise Error(ErrorKind.PARSE, "number too small to fit in target type")
    return number


def parse_i64(value: object) -> int:
    """Parse a signed 64-bit integer from a decimal string."""
    return _parse_int(value, True, _I64_MIN, _I64_MAX)


def serialize_i64(value: int) -> str:
    """Serialize a signed 64-bit integer as a decimal string."""
    return str(int(value))


def parse_u64(value: object) -> int:
    """Parse an unsigned 64-bit integer from a decimal string."""
    return _parse_int(value, False, 0, _U64_MAX)


def serialize_u64(value: int) -> str:
    """Serialize an unsigned 64-bit integer as a decimal string."""
    return str(int(value))


def parse_duration(value: object) -> int:
    """Parse a duration given as a nanosecond count string; returns nanoseconds."""
    return parse_u64(value)


def serialize_duration(nanos: int) -> str:
    """Serialize a duration in nanoseconds as a decimal string."""
    return str(int(nanos))