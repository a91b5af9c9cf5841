"""JSONRPC request methods and request identifiers."""

from __future__ import annotations

import enum
import uuid

from tendermint.rpc.errors import RpcError


class Method(enum.Enum):
    """JSONRPC request methods, serialized as the ``method`` field."""

    ABCI_INFO = "abci_info"
    ABCI_QUERY = "abci_query"
    BLOCK = "block"
    BLOCK_RESULTS = "block_results"
    BLOCKCHAIN = "blockchain"
    BROADCAST_TX_ASYNC = "broadcast_tx_async"
    BROADCAST_TX_SYNC = "broadcast_tx_sync"
    BROADCAST_TX_COMMIT = "broadcast_tx_commit"
    COMMIT = "commit"
    GENESIS = "genesis"
    HEALTH = "health"
    NET_INFO = "net_info"
    STATUS = "status"
    VALIDATORS = "validators"

    @classmethod
    def parse(cls, s: str) -> Method:
        """Look up a method by name; raises a method-not-found error."""
        try:
            return cls(s)
        except ValueError:
            raise RpcError.method_not_found(s) from None

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        """Serialize as the method name."""
        return self.value


def new_request_id() -> str:
    """A random (version 4) UUID string used as a JSONRPC request ID."""
    return str(uuid.uuid4())