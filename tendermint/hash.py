"""Hash digests and their hexadecimal form."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind

SHA256_HASH_SIZE = 32

_UPPER_HEX = frozenset("0123456789ABCDEF")


class Algorithm(enum.Enum):
    """Hash algorithms."""

    SHA256 = "sha256"


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class Hash:
    """A SHA-256 digest, or the null (empty) hash when ``digest`` is None."""

    digest: bytes | None = None

    def __post_init__(self) -> None:
        if self.digest is not None and len(self.digest) != SHA256_HASH_SIZE:
            raise Error(ErrorKind.PARSE, "invalid SHA-256 digest length")

    @classmethod
    def new(cls, alg: Algorithm, data: bytes) -> Hash:
        """Create a hash of the given algorithm from raw digest bytes."""
        if alg is not Algorithm.SHA256:
            raise Error(ErrorKind.PARSE, f"unsupported algorithm: {alg!r}")
        if len(data) != SHA256_HASH_SIZE:
            raise Error(ErrorKind.PARSE)
        return cls(bytes(data))

    @classmethod
    def null(cls) -> Hash:
        """Return the null hash."""
        return cls(None)

    @classmethod
    def from_hex_upper(cls, alg: Algorithm, s: str) -> Hash:
        """Decode a hash from upper-case hexadecimal."""
        if alg is not Algorithm.SHA256:
            raise Error(ErrorKind.PARSE, f"unsupported algorithm: {alg!r}")
        if len(s) != SHA256_HASH_SIZE * 2:
            raise Error(ErrorKind.PARSE, "invalid hex length")
        if not set(s) <= _UPPER_HEX:
            raise Error(ErrorKind.PARSE, "invalid upper-case hex")
        return cls(bytes.fromhex(s))

    @classmethod
    def parse(cls, s: str) -> Hash:
        """Parse a SHA-256 hash from upper-case hexadecimal."""
        return cls.from_hex_upper(Algorithm.SHA256, s)

    def algorithm(self) -> Algorithm | None:
        """Return the digest algorithm, or None for the null hash."""
        return None if self.digest is None else Algorithm.SHA256

    def as_bytes(self) -> bytes | None:
        """Return the digest bytes, or None for the null hash."""
        return self.digest

    def _sort_key(self) -> tuple[bool, bytes]:
        return (self.digest is None, self.digest or b"")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hash):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return "" if self.digest is None else self.digest.hex().upper()

    def __repr__(self) -> str:
        if self.digest is None:
            return "Hash.null()"
        return f"Hash.sha256({self})"

    def to_json(self) -> str:
        """Serialize as upper-case hex (empty for the null hash)."""
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> Hash:
        """Deserialize from upper-case hex; an empty string is the null hash."""
        if not isinstance(value, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        if not value:
            return cls.null()
        return cls.parse(value)