"""Remote addresses (``tcp://`` or ``unix://``)."""

from __future__ import annotations

import json
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind
from tendermint.node_id import NodeId

TCP_PREFIX = "tcp://"
UNIX_PREFIX = "unix://"

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class TcpAddress:
    """A TCP address with an optional remote peer ID."""

    host: str
    port: int
    peer_id: NodeId | None = None

    def __str__(self) -> str:
        return f"{TCP_PREFIX}{self.host}:{self.port}"


@dataclass(frozen=True)
class UnixAddress:
    """A UNIX domain socket path."""

    path: str

    def __str__(self) -> str:
        return f"{UNIX_PREFIX}{self.path}"


def parse_address(addr: str) -> TcpAddress | UnixAddress:
    """Parse an address; one without a URI prefix is taken as TCP."""
    if addr.startswith(TCP_PREFIX):
        return _parse_tcp_addr(addr[len(TCP_PREFIX):])
    if addr.startswith(UNIX_PREFIX):
        return UnixAddress(addr[len(UNIX_PREFIX):])
    if "://" in addr:
        raise Error(ErrorKind.PARSE, f"invalid address prefix: {json.dumps(addr)}")
    return _parse_tcp_addr(addr)


def _parse_port(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    port = int(digits)
    return port if port <= _U16_MAX else None


def _parse_tcp_addr(addr: str) -> TcpAddress:
    authority_parts = addr.split("@")
    if len(authority_parts) == 1:
        peer_id, authority = None, authority_parts[0]
    elif len(authority_parts) == 2:
        peer_id, authority = NodeId.parse(authority_parts[0]), authority_parts[1]
    else:
        raise Error(
            ErrorKind.PARSE, f"invalid {TCP_PREFIX} address (bad authority): {addr}"
        )

    host_and_port = authority.split(":")
    if len(host_and_port) != 2:
        raise Error(
            ErrorKind.PARSE, f"invalid {TCP_PREFIX} address (missing port): {addr}"
        )
    host, port_text = host_and_port
    port = _parse_port(port_text)
    if port is None:
        raise Error(ErrorKind.PARSE, f"invalid {TCP_PREFIX} address (bad port): {addr}")
    return TcpAddress(host=host, port=port, peer_id=peer_id)