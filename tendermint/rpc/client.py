"""JSONRPC-over-HTTP client for a Tendermint node."""

from __future__ import annotations

import http.client
import urllib.error
import urllib.request

from tendermint.errors import Error, ErrorKind
from tendermint.net import TcpAddress, UnixAddress, parse_address
from tendermint.rpc.errors import RpcError
from tendermint.rpc.method import Method
from tendermint.rpc.wire import AbciInfo, parse_response, request_to_json

_USER_AGENT = "tendermint RPC client"


class Client:
    """A Tendermint RPC client; construction checks the node's health."""

    def __init__(self, address: TcpAddress | UnixAddress | str) -> None:
        if isinstance(address, str):
            address = parse_address(address)
        self.address = address
        self.health()

    def perform(self, method: Method, params: object = None) -> object:
        """Send a request and return the ``result`` of the response."""
        body = request_to_json(method, params).encode("utf-8")
        address = self.address
        if not isinstance(address, TcpAddress):
            raise RpcError.invalid_params(f"invalid RPC address: {address!r}")

        request = urllib.request.Request(
            f"http://{address.host}:{address.port}/",
            data=body,
            method="POST",
            headers={
                "Connection": "close",
                "Content-Type": "application/json",
                "User-Agent": _USER_AGENT,
            },
        )
        try:
            with urllib.request.urlopen(request) as response:
                response_body = response.read()
        except urllib.error.HTTPError as exc:
            try:
                response_body = exc.read()
            except (OSError, http.client.HTTPException) as read_exc:
                raise RpcError.server_error(read_exc) from None
            finally:
                exc.close()
        except (OSError, http.client.HTTPException) as exc:
            raise RpcError.server_error(exc) from None
        return parse_response(response_body)

    def health(self) -> None:
        """``/health``: raise unless the node reports itself healthy."""
        result = self.perform(Method.HEALTH)
        if not isinstance(result, dict):
            raise RpcError.parse_error("invalid type: expected an object")

    def abci_info(self) -> AbciInfo:
        """``/abci_info``: information about the ABCI application."""
        result = self.perform(Method.ABCI_INFO)
        try:
            if not isinstance(result, dict) or "response" not in result:
                raise Error(ErrorKind.PARSE, "missing field `response`")
            return AbciInfo.from_json(result["response"])
        except Error as exc:
            raise RpcError.parse_error(exc) from None