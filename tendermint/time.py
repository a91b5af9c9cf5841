"""Timestamps used by Tendermint blockchains."""

from __future__ import annotations

import re
import time as _time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from tendermint.errors import Error, ErrorKind

_NANOS_PER_SEC = 1_000_000_000
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt ]([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))"
)


@dataclass(frozen=True, order=True)
class Time:
    """A UTC timestamp with nanosecond precision, held as nanoseconds since the epoch."""

    nanos: int

    @classmethod
    def now(cls) -> Time:
        """The current wall clock time."""
        return cls(_time.time_ns())

    @classmethod
    def unix_epoch(cls) -> Time:
        """1970-01-01 00:00:00 UTC."""
        return cls(0)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Time:
        """Create from a datetime; naive values are taken as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls((dt - _EPOCH) // timedelta(microseconds=1) * 1000)

    @classmethod
    def parse_from_rfc3339(cls, s: str) -> Time:
        """Parse an RFC 3339 date and time, converting it to UTC."""
        match = _RFC3339.fullmatch(s)
        if match is None:
            raise Error(ErrorKind.PARSE, "input contains invalid characters")
        year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
        fraction, zulu, sign, off_h, off_m = match.groups()[6:]
        try:
            local = datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
        except ValueError:
            raise Error(ErrorKind.PARSE, "input is out of range") from None
        offset_secs = 0
        if zulu is None:
            hours, minutes = int(off_h), int(off_m)
            if hours > 23 or minutes > 59:
                raise Error(ErrorKind.PARSE, "input is out of range")
            offset_secs = (hours * 3600 + minutes * 60) * (-1 if sign == "-" else 1)
        secs = (local - _EPOCH) // timedelta(seconds=1) - offset_secs
        frac = int((fraction or "")[:9].ljust(9, "0"))
        return cls(secs * _NANOS_PER_SEC + frac)

    def duration_since(self, other: Time) -> int:
        """Nanoseconds elapsed since ``other``; raises if ``other`` is later."""
        diff = self.nanos - other.nanos
        if diff < 0:
            raise Error(ErrorKind.OUT_OF_RANGE)
        return diff

    def to_rfc3339(self) -> str:
        """RFC 3339 string with nine subsecond digits and a ``Z`` suffix."""
        secs, frac = divmod(self.nanos, _NANOS_PER_SEC)
        dt = _EPOCH + timedelta(seconds=secs)
        return (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{frac:09d}Z"
        )

    def to_datetime(self) -> datetime:
        """Return a UTC datetime, truncated to microseconds."""
        return _EPOCH + timedelta(microseconds=self.nanos // 1000)

    def __str__(self) -> str:
        return self.to_rfc3339()