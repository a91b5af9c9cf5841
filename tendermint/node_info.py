"""Node information used in RPC responses."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind
from tendermint.net import TCP_PREFIX, TcpAddress, UnixAddress, parse_address
from tendermint.serializers import parse_u64, serialize_u64


def _object(value: object) -> dict:
    if not isinstance(value, dict):
        raise Error(ErrorKind.PARSE, "invalid type: expected an object")
    return value


def _field(obj: dict, name: str) -> object:
    try:
        return obj[name]
    except KeyError:
        raise Error(ErrorKind.PARSE, f"missing field `{name}`") from None


@dataclass(frozen=True)
class ProtocolVersionInfo:
    """Protocol version information."""

    p2p: int
    block: int
    app: int

    @classmethod
    def from_json(cls, value: object) -> ProtocolVersionInfo:
        """Deserialize from an object of decimal strings."""
        obj = _object(value)
        return cls(
            p2p=parse_u64(_field(obj, "p2p")),
            block=parse_u64(_field(obj, "block")),
            app=parse_u64(_field(obj, "app")),
        )

    def to_json(self) -> dict:
        """Serialize as an object of decimal strings."""
        return {
            "p2p": serialize_u64(self.p2p),
            "block": serialize_u64(self.block),
            "app": serialize_u64(self.app),
        }


@dataclass(frozen=True)
class ListenAddress:
    """A listen address as reported by a node."""

    value: str

    def to_net_address(self) -> TcpAddress | UnixAddress | None:
        """Convert to a network address, or None if it does not parse."""
        text = self.value if self.value.startswith(TCP_PREFIX) else TCP_PREFIX + self.value
        try:
            return parse_address(text)
        except Error:
            return None

    def __str__(self) -> str:
        return self.value


class TxIndexStatus(enum.Enum):
    """Transaction index status."""

    ON = "on"
    OFF = "off"

    def __bool__(self) -> bool:
        return self is TxIndexStatus.ON


@dataclass(frozen=True)
class OtherInfo:
    """Other node status information."""

    tx_index: TxIndexStatus
    rpc_address: TcpAddress | UnixAddress

    @classmethod
    def from_json(cls, value: object) -> OtherInfo:
        """Deserialize from an object."""
        obj = _object(value)
        tx_index_raw = _field(obj, "tx_index")
        try:
            tx_index = TxIndexStatus(tx_index_raw)
        except ValueError:
            raise Error(
                ErrorKind.PARSE, f"unknown variant `{tx_index_raw}`, expected `on` or `off`"
            ) from None
        rpc_raw = _field(obj, "rpc_address")
        if not isinstance(rpc_raw, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        return cls(tx_index=tx_index, rpc_address=parse_address(rpc_raw))

    def to_json(self) -> dict:
        """Serialize as an object."""
        return {"tx_index": self.tx_index.value, "rpc_address": str(self.rpc_address)}