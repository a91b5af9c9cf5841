"""Public keys used in Tendermint networks."""

from __future__ import annotations

import base64
import binascii
import enum
import functools
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind

_BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)

_ED25519_SIZE = 32
_SECP256K1_COMPRESSED_SIZE = 33
_SECP256K1_UNCOMPRESSED_SIZE = 65

_ED25519_AMINO_PREFIX = bytes([0x16, 0x24, 0xDE, 0x64, 0x20])
_SECP256K1_AMINO_PREFIX = bytes([0xEB, 0x5A, 0xE9, 0x87, 0x21])

_ED25519_JSON_TYPE = "tendermint/PubKeyEd25519"
_SECP256K1_JSON_TYPE = "tendermint/PubKeySecp256k1"


def _bech32_polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_BECH32_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _to_five_bit(data: bytes) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    for byte in data:
        acc = (acc << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append((acc >> bits) & 0x1F)
    if bits:
        out.append((acc << (5 - bits)) & 0x1F)
    return out


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode bytes as Bech32 with the given human-readable prefix."""
    words = _to_five_bit(bytes(data))
    expanded = [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]
    polymod = _bech32_polymod(expanded + words + [0] * 6) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_BECH32_CHARSET[w] for w in words + checksum)


class KeyAlgorithm(enum.Enum):
    """Public key algorithms."""

    ED25519 = "ed25519"
    SECP256K1 = "secp256k1"

    @classmethod
    def parse(cls, s: str) -> KeyAlgorithm:
        """Parse an algorithm from its string label."""
        for member in cls:
            if member.value == s:
                return member
        raise Error(ErrorKind.PARSE)

    def __str__(self) -> str:
        return self.value


_ALGORITHM_ORDER = {KeyAlgorithm.ED25519: 0, KeyAlgorithm.SECP256K1: 1}


def _valid_secp256k1(data: bytes) -> bool:
    if len(data) == _SECP256K1_COMPRESSED_SIZE:
        return data[0] in (0x02, 0x03)
    if len(data) == _SECP256K1_UNCOMPRESSED_SIZE:
        return data[0] == 0x04
    return False


@functools.total_ordering
@dataclass(frozen=True)
class PublicKey:
    """An Ed25519 or secp256k1 public key."""

    algorithm: KeyAlgorithm
    key: bytes

    @classmethod
    def from_raw_ed25519(cls, data: bytes) -> PublicKey | None:
        """Create from raw Ed25519 key bytes, or None if they are invalid."""
        data = bytes(data)
        if len(data) != _ED25519_SIZE:
            return None
        return cls(KeyAlgorithm.ED25519, data)

    @classmethod
    def from_raw_secp256k1(cls, data: bytes) -> PublicKey | None:
        """Create from raw secp256k1 key bytes, or None if they are invalid."""
        data = bytes(data)
        if not _valid_secp256k1(data):
            return None
        return cls(KeyAlgorithm.SECP256K1, data)

    def ed25519(self) -> bytes | None:
        """The Ed25519 key bytes, or None for other key types."""
        return self.key if self.algorithm is KeyAlgorithm.ED25519 else None

    def as_bytes(self) -> bytes:
        """The raw key bytes."""
        return self.key

    def to_amino_bytes(self) -> bytes:
        """The key with its Amino prefix."""
        if self.algorithm is KeyAlgorithm.ED25519:
            return _ED25519_AMINO_PREFIX + self.key
        return _SECP256K1_AMINO_PREFIX + self.key

    def to_bech32(self, hrp: str) -> str:
        """The Amino bytes as Bech32 with the given prefix."""
        return bech32_encode(hrp, self.to_amino_bytes())

    def to_hex(self) -> str:
        """The Amino bytes as upper-case hex."""
        return self.to_amino_bytes().hex().upper()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return (_ALGORITHM_ORDER[self.algorithm], self.key) < (
            _ALGORITHM_ORDER[other.algorithm],
            other.key,
        )

    def to_json(self) -> dict:
        """Serialize as a ``{"type", "value"}`` object with Base64 key bytes."""
        json_type = (
            _ED25519_JSON_TYPE
            if self.algorithm is KeyAlgorithm.ED25519
            else _SECP256K1_JSON_TYPE
        )
        return {"type": json_type, "value": base64.b64encode(self.key).decode("ascii")}

    @classmethod
    def from_json(cls, value: object) -> PublicKey:
        """Deserialize from a ``{"type", "value"}`` object."""
        if not isinstance(value, dict):
            raise Error(ErrorKind.PARSE, "invalid type: expected an object")
        json_type = value.get("type")
        if json_type not in (_ED25519_JSON_TYPE, _SECP256K1_JSON_TYPE):
            raise Error(ErrorKind.PARSE, f"unknown variant `{json_type}`")
        encoded = value.get("value")
        if not isinstance(encoded, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        try:
            raw = base64.b64decode(encoded, validate=True)
        except binascii.Error as exc:
            raise Error(ErrorKind.PARSE, str(exc)) from None
        if json_type == _ED25519_JSON_TYPE:
            key = cls.from_raw_ed25519(raw)
            label = "ed25519"
        else:
            key = cls.from_raw_secp256k1(raw)
            label = "secp256k1"
        if key is None:
            raise Error(ErrorKind.PARSE, f"invalid {label} key")
        return key


class KeyRole(enum.Enum):
    """Roles a public key plays in Tendermint networks."""

    ACCOUNT = "account"
    CONSENSUS = "consensus"


@dataclass(frozen=True)
class TendermintKey:
    """A public key together with its role."""

    role: KeyRole
    public_key: PublicKey

    @classmethod
    def new_account_key(cls, public_key: PublicKey) -> TendermintKey:
        """Create an account key; any key type is allowed."""
        return cls(KeyRole.ACCOUNT, public_key)

    @classmethod
    def new_consensus_key(cls, public_key: PublicKey) -> TendermintKey:
        """Create a key from an Ed25519 consensus key; other types are rejected."""
        if public_key.algorithm is not KeyAlgorithm.ED25519:
            raise Error(ErrorKind.INVALID_KEY, "only ed25519 consensus keys are supported")
        return cls(KeyRole.ACCOUNT, public_key)

    def to_bech32(self, hrp: str) -> str:
        """The underlying key as Bech32."""
        return self.public_key.to_bech32(hrp)

    def to_hex(self) -> str:
        """The underlying key's Amino bytes as upper-case hex."""
        return self.public_key.to_hex()