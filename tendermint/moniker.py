"""Validator display names and Tendermint version strings."""

from __future__ import annotations

from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise Error(ErrorKind.PARSE, "invalid type: expected a string")
    return value


@dataclass(frozen=True, order=True)
class Moniker:
    """A validator's display name."""

    name: str

    @classmethod
    def parse(cls, s: str) -> Moniker:
        """Create a moniker from a string."""
        return cls(s)

    def __str__(self) -> str:
        return self.name

    def to_json(self) -> str:
        """Serialize as a plain string."""
        return self.name

    @classmethod
    def from_json(cls, value: object) -> Moniker:
        """Deserialize from a plain string."""
        return cls(_require_str(value))


@dataclass(frozen=True)
class Version:
    """A Tendermint version string."""

    value: str

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        """Serialize as a plain string."""
        return self.value

    @classmethod
    def from_json(cls, value: object) -> Version:
        """Deserialize from a plain string."""
        return cls(_require_str(value))