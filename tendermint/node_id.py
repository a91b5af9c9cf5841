"""Tendermint node IDs."""

from __future__ import annotations

import functools
import hashlib
import hmac
import json

from tendermint.errors import Error, ErrorKind

LENGTH = 20

_ED25519_KEY_SIZE = 32
_UPPER_HEX = frozenset("0123456789ABCDEF")
_LOWER_HEX = frozenset("0123456789abcdef")


@functools.total_ordering
class NodeId:
    """A node ID: the first 20 bytes of the SHA-256 of the node's Ed25519 key."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != LENGTH:
            raise Error(ErrorKind.LENGTH, f"node ID must be {LENGTH} bytes")
        self._data = data

    @classmethod
    def from_ed25519(cls, public_key: bytes) -> NodeId:
        """Derive a node ID from raw Ed25519 public key bytes."""
        key = bytes(public_key)
        if len(key) != _ED25519_KEY_SIZE:
            raise Error(ErrorKind.INVALID_KEY, "expected a 32-byte Ed25519 key")
        return cls(hashlib.sha256(key).digest()[:LENGTH])

    @classmethod
    def parse(cls, s: str) -> NodeId:
        """Decode a node ID from upper- or lower-case hexadecimal."""
        if len(s) % 2 or not (set(s) <= _UPPER_HEX or set(s) <= _LOWER_HEX):
            raise Error(ErrorKind.PARSE)
        data = bytes.fromhex(s)
        if len(data) != LENGTH:
            raise Error(ErrorKind.PARSE)
        return cls(data)

    def as_bytes(self) -> bytes:
        """The raw ID bytes."""
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self._data.hex().upper()

    def __repr__(self) -> str:
        return f"NodeId({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeId):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NodeId):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def to_json(self) -> str:
        """Serialize as upper-case hex."""
        return str(self)

    @classmethod
    def from_json(cls, value: object) -> NodeId:
        """Deserialize from a hex string."""
        if not isinstance(value, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        try:
            return cls.parse(value)
        except Error:
            raise Error(
                ErrorKind.PARSE,
                f"expected {LENGTH * 2}-character hex string, got {json.dumps(value)}",
            ) from None