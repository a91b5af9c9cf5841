"""Timeout durations written as ``<n>s`` or ``<n>ms``."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import timedelta

from tendermint.errors import Error, ErrorKind
from tendermint.serializers import parse_u64

_NANOS_PER_SEC = 1_000_000_000
_NANOS_PER_MILLI = 1_000_000


@dataclass(frozen=True, order=True)
class Timeout:
    """A timeout duration, held in nanoseconds."""

    nanos: int

    @classmethod
    def parse(cls, s: str) -> Timeout:
        """Parse a string ending in ``s`` or ``ms``."""
        if len(s) < 2 or not s.endswith("s"):
            raise Error(ErrorKind.PARSE, "invalid units")
        unit_char = s[-2]
        if unit_char == "m":
            units, scale = "ms", _NANOS_PER_MILLI
        elif "0" <= unit_char <= "9":
            units, scale = "s", _NANOS_PER_SEC
        else:
            raise Error(ErrorKind.PARSE, "invalid units")
        value = parse_u64(s[: len(s) - len(units)])
        return cls(value * scale)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Timeout:
        """Create a timeout from a non-negative timedelta."""
        return cls((delta // timedelta(microseconds=1)) * 1000)

    def to_timedelta(self) -> timedelta:
        """Return the timeout as a timedelta (microsecond precision)."""
        return timedelta(microseconds=self.nanos // 1000)

    def as_secs(self) -> int:
        """Whole seconds in this timeout."""
        return self.nanos // _NANOS_PER_SEC

    def as_millis(self) -> int:
        """Whole milliseconds in this timeout."""
        return self.nanos // _NANOS_PER_MILLI

    def __str__(self) -> str:
        return f"{self.as_millis()}ms"

    def to_json(self) -> str:
        """Serialize as a millisecond string."""
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> Timeout:
        """Deserialize from a string ending in ``s`` or ``ms``."""
        if not isinstance(value, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        try:
            return cls.parse(value)
        except Error:
            raise Error(
                ErrorKind.PARSE, f"invalid timeout value: {json.dumps(value)}"
            ) from None