"""Voting power and vote types."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind
from tendermint.serializers import parse_u64, serialize_u64


@dataclass(frozen=True, order=True)
class Power:
    """Voting power."""

    value: int = 0

    def is_zero(self) -> bool:
        """Whether the voting power is zero."""
        return self.value == 0

    def __int__(self) -> int:
        return self.value

    def to_json(self) -> str:
        """Serialize as a decimal string."""
        return serialize_u64(self.value)

    @classmethod
    def from_json(cls, value: object) -> Power:
        """Deserialize from a decimal string."""
        return cls(parse_u64(value))


class VoteType(enum.IntEnum):
    """Types of votes."""

    PREVOTE = 1
    PRECOMMIT = 2

    @classmethod
    def from_u8(cls, byte: int) -> VoteType | None:
        """The vote type for a byte, or None if it is unknown."""
        try:
            return cls(byte)
        except ValueError:
            return None

    def to_u8(self) -> int:
        """The byte value of this vote type."""
        return int(self)

    def to_json(self) -> int:
        """Serialize as an integer."""
        return int(self)

    @classmethod
    def from_json(cls, value: object) -> VoteType:
        """Deserialize from an integer byte."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise Error(ErrorKind.PARSE, f"invalid type: expected u8, got {value!r}")
        vote_type = cls.from_u8(value)
        if vote_type is None:
            raise Error(ErrorKind.PARSE, f"invalid vote type: {value}")
        return vote_type