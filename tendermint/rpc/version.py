"""JSONRPC protocol versions."""

from __future__ import annotations

from dataclasses import dataclass

from tendermint.rpc.errors import RpcError

SUPPORTED_VERSION = "2.0"


@dataclass(frozen=True, order=True)
class RpcVersion:
    """A JSONRPC version string."""

    value: str

    @classmethod
    def current(cls) -> RpcVersion:
        """The supported JSONRPC version."""
        return cls(SUPPORTED_VERSION)

    @classmethod
    def parse(cls, s: str) -> RpcVersion:
        """Create a version from a string."""
        return cls(s)

    def is_supported(self) -> bool:
        """Whether this version is supported."""
        return self.value == SUPPORTED_VERSION

    def ensure_supported(self) -> None:
        """Raise a server error unless this version is supported."""
        if not self.is_supported():
            raise RpcError.server_error(
                f"server RPC version unsupported: '{self.value}' "
                f"(only '{SUPPORTED_VERSION}' supported)"
            )

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        """Serialize as a plain string."""
        return self.value

    @classmethod
    def from_json(cls, value: object) -> RpcVersion:
        """Deserialize from a plain string."""
        if not isinstance(value, str):
            raise RpcError.parse_error("invalid type: expected a version string")
        return cls(value)