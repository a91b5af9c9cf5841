# tendermint

Core types for working with Tendermint blockchain networks. The package is
plain Python and has no third-party dependencies.

## What is included

- `tendermint.errors`: `Error`, which holds an `ErrorKind` and an optional
  message. Malformed input to the core types raises it.
- `tendermint.hash`: `Hash`, a SHA-256 digest or the null hash. It is read from
  and written as upper-case hexadecimal, and the empty string stands for null.
- `tendermint.merkle`: `simple_hash_from_byte_vectors` gives simple Merkle
  roots with RFC 6962 leaf and inner hashing. `leaf_hash`, `inner_hash` and
  `get_split_point` are also available.
- `tendermint.time`: `Time`, a UTC timestamp with nanosecond precision. It reads
  and writes RFC 3339.
- `tendermint.timeout`: `Timeout`, for durations written as `"10s"` or
  `"100ms"`. It is always written back in milliseconds.
- `tendermint.serializers`: 64-bit integers and nanosecond durations as JSON
  decimal strings.
- `tendermint.moniker`: the `Moniker` and `Version` string wrappers.
- `tendermint.node_id`: `NodeId`, 20-byte node IDs. They are read from upper-
  or lower-case hex, or derived from an Ed25519 key.
- `tendermint.net`: `parse_address` reads `tcp://id@host:port`, `host:port` and
  `unix://path` into a `TcpAddress` or a `UnixAddress`.
- `tendermint.node_info`: `ProtocolVersionInfo`, `ListenAddress`,
  `TxIndexStatus` and `OtherInfo`.
- `tendermint.public_key`: `PublicKey`, for Ed25519 and secp256k1 keys. It
  handles raw, Amino, hex, Bech32 and JSON encodings. The module also has
  `TendermintKey`, `KeyAlgorithm` and `bech32_encode`.
- `tendermint.signature`: `Signature`, 64-byte Ed25519 signatures written as
  Base64.
- `tendermint.evidence`: `Evidence`, `EvidenceData` and `EvidenceParams`.
- `tendermint.vote`: `Power` and `VoteType`.
- `tendermint.validator`: `ValidatorInfo`, `ValidatorUpdate`,
  `ProposerPriority` and `ValidatorSet`, whose `hash()` gives the Merkle root
  of the set. When a secp256k1 key has no address given, working out its
  address needs RIPEMD-160 from `hashlib`.
- `tendermint.rpc`, made up of the following:
  - `errors`: `RpcError` and `Code`.
  - `method`: `Method` and `new_request_id`.
  - `version`: `RpcVersion`.
  - `wire`: `request_to_json`, `parse_response`, `AbciInfo` and the app hash
    helpers.
  - `client`: a small HTTP `Client`.

## Installation

```
pip install .
```

## Examples

```python
from tendermint.merkle import simple_hash_from_byte_vectors
from tendermint.timeout import Timeout
from tendermint.net import parse_address

root = simple_hash_from_byte_vectors([b"L123456"])
print(root.hex())

print(Timeout.parse("123ms").as_millis())   # 123

addr = parse_address("tcp://abd636b766dcefb5322d8ca40011ec2cb35efbc2@35.192.61.41:26656")
print(addr.host, addr.port)                 # 35.192.61.41 26656
```

Encode a public key:

```python
from tendermint.public_key import PublicKey

key = PublicKey.from_raw_ed25519(bytes.fromhex(
    "4A25C6640A1F72B9C975338294EF51B6D1C33158BB6ECBA69FBC3FB5A33C9DCE"))
print(key.to_bech32("cosmosvalconspub"))
print(key.to_json())
```

Query a running node:

```python
from tendermint.rpc.client import Client
from tendermint.rpc.method import Method

client = Client("tcp://127.0.0.1:26657")    # checks /health first
print(client.abci_info().data)
print(client.perform(Method.STATUS))        # the raw "result" object
```

A failed RPC call raises `tendermint.rpc.errors.RpcError`. The error carries a
`Code`, a message and optional data. Network failures are reported as server
errors.

## What this package does not do

- The `Client` has typed methods only for `health()` and `abci_info()`. For
  every other `Method`, `perform` sends the request and returns the decoded
  `result` as plain JSON data. There are no typed models for blocks, commits,
  status, genesis, net info or broadcast responses.
- Only TCP addresses can be queried, over plain HTTP.
- There is no parsing of node configuration or key files.
- There is no signing or signature verification. Keys and signatures are
  checked for length and format only.

## Tests

```
pip install .[test]
pytest
```