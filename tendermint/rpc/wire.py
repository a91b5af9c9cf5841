"""JSONRPC request and response envelopes, and the simplest endpoint bodies."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind
from tendermint.hash import Algorithm, Hash
from tendermint.rpc.errors import RpcError
from tendermint.rpc.method import Method, new_request_id
from tendermint.rpc.version import RpcVersion
from tendermint.serializers import parse_u64, serialize_u64


def request_to_json(method: Method, params: object = None) -> str:
    """Wrap request parameters in a JSONRPC envelope, as pretty-printed JSON."""
    envelope = {
        "jsonrpc": RpcVersion.current().to_json(),
        "id": new_request_id(),
        "method": method.value,
        "params": params,
    }
    return json.dumps(envelope, indent=2)


def parse_response(body: bytes | str) -> object:
    """Unwrap a JSONRPC response, returning its ``result`` or raising its error."""
    try:
        envelope = json.loads(body)
    except ValueError as exc:
        raise RpcError.parse_error(exc) from None
    if not isinstance(envelope, dict):
        raise RpcError.parse_error("invalid type: expected an object")
    for name in ("jsonrpc", "id"):
        if name not in envelope:
            raise RpcError.parse_error(f"missing field `{name}`")
    version = RpcVersion.from_json(envelope["jsonrpc"])
    if not isinstance(envelope["id"], str):
        raise RpcError.parse_error("invalid type: expected a string id")
    raw_error = envelope.get("error")
    error = None if raw_error is None else RpcError.from_json(raw_error)
    result = envelope.get("result")

    version.ensure_supported()
    if error is not None:
        raise error
    if result is not None:
        return result
    raise RpcError.server_error(
        "server returned malformatted JSON (no 'result' or 'error')"
    )


def parse_app_hash(value: object) -> Hash:
    """Parse a Base64-encoded SHA-256 app hash."""
    if not isinstance(value, str):
        raise Error(ErrorKind.PARSE, "invalid type: expected a string")
    try:
        raw = base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise Error(ErrorKind.PARSE, str(exc)) from None
    return Hash.new(Algorithm.SHA256, raw)


def serialize_app_hash(hash_: Hash) -> str:
    """Serialize an app hash as Base64 (empty for the null hash)."""
    data = hash_.as_bytes()
    if data is None:
        return ""
    return base64.b64encode(data).decode("ascii")


@dataclass(frozen=True)
class AbciInfo:
    """Information about the ABCI application."""

    data: str
    version: str | None
    last_block_height: int
    last_block_app_hash: Hash

    @classmethod
    def from_json(cls, value: object) -> AbciInfo:
        """Deserialize from the ``response`` object of ``/abci_info``."""
        if not isinstance(value, dict):
            raise Error(ErrorKind.PARSE, "invalid type: expected an object")
        for name in ("data", "last_block_height", "last_block_app_hash"):
            if name not in value:
                raise Error(ErrorKind.PARSE, f"missing field `{name}`")
        data = value["data"]
        if not isinstance(data, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string for `data`")
        version = value.get("version")
        if version is not None and not isinstance(version, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string for `version`")
        return cls(
            data=data,
            version=version,
            last_block_height=parse_u64(value["last_block_height"]),
            last_block_app_hash=parse_app_hash(value["last_block_app_hash"]),
        )

    def to_json(self) -> dict:
        """Serialize as the ``response`` object of ``/abci_info``."""
        return {
            "data": self.data,
            "version": self.version,
            "last_block_height": serialize_u64(self.last_block_height),
            "last_block_app_hash": serialize_app_hash(self.last_block_app_hash),
        }