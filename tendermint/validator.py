"""Tendermint validators and validator sets."""

from __future__ import annotations

import base64
import binascii
import hashlib
from collections.abc import Iterable
from dataclasses import dataclass, field

from tendermint import merkle
from tendermint.errors import Error, ErrorKind
from tendermint.public_key import KeyAlgorithm, PublicKey
from tendermint.serializers import parse_i64, serialize_i64
from tendermint.vote import Power

_ADDRESS_LENGTH = 20
_ED25519_AMINO_NAME_PREFIX = bytes([0x16, 0x24, 0xDE, 0x64])


def _varint(value: int) -> bytes:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def _address_of(pub_key: PublicKey) -> bytes:
    digest = hashlib.sha256(pub_key.as_bytes()).digest()
    if pub_key.algorithm is KeyAlgorithm.ED25519:
        return digest[:_ADDRESS_LENGTH]
    try:
        ripemd = hashlib.new("ripemd160")
    except ValueError:
        raise Error(ErrorKind.CRYPTO, "RIPEMD-160 is not available") from None
    ripemd.update(digest)
    return ripemd.digest()


@dataclass(frozen=True, order=True)
class ProposerPriority:
    """Proposer priority."""

    value: int

    def __int__(self) -> int:
        return self.value

    def to_json(self) -> str:
        """Serialize as a decimal string."""
        return serialize_i64(self.value)

    @classmethod
    def from_json(cls, value: object) -> ProposerPriority:
        """Deserialize from a decimal string."""
        return cls(parse_i64(value))


@dataclass
class ValidatorInfo:
    """Validator information; the address is derived from the key when omitted."""

    pub_key: PublicKey
    voting_power: Power
    address: bytes | None = field(default=None)
    proposer_priority: ProposerPriority | None = None

    def __post_init__(self) -> None:
        if self.address is None:
            self.address = _address_of(self.pub_key)

    def hash_bytes(self) -> bytes:
        """Amino encoding of the key and voting power: a Merkle leaf."""
        raw = self.pub_key.as_bytes()
        key_field = _ED25519_AMINO_NAME_PREFIX + _varint(len(raw)) + raw
        encoded = b"\x0a" + _varint(len(key_field)) + key_field
        power = self.voting_power.value
        if power:
            encoded += b"\x10" + _varint(power)
        return encoded


class ValidatorSet:
    """A set of validators, kept sorted by address."""

    def __init__(self, validators: Iterable[ValidatorInfo]) -> None:
        self.validators = sorted(validators, key=lambda v: v.address)

    def __iter__(self):
        return iter(self.validators)

    def __len__(self) -> int:
        return len(self.validators)

    def hash(self) -> bytes:
        """The Merkle root of the validator set."""
        return merkle.simple_hash_from_byte_vectors(
            [validator.hash_bytes() for validator in self.validators]
        )


@dataclass(frozen=True)
class ValidatorUpdate:
    """An update to the validator set."""

    pub_key: PublicKey
    power: Power

    @classmethod
    def from_json(cls, value: object) -> ValidatorUpdate:
        """Deserialize from ``{"pub_key": {"type", "data"}, "power"}``."""
        if not isinstance(value, dict):
            raise Error(ErrorKind.PARSE, "invalid type: expected an object")
        for name in ("pub_key", "power"):
            if name not in value:
                raise Error(ErrorKind.PARSE, f"missing field `{name}`")
        return cls(_parse_update_key(value["pub_key"]), Power.from_json(value["power"]))


def _parse_update_key(value: object) -> PublicKey:
    if not isinstance(value, dict):
        raise Error(ErrorKind.PARSE, "invalid type: expected an object")
    key_type = value.get("type")
    if key_type != "ed25519":
        raise Error(ErrorKind.PARSE, f"unknown variant `{key_type}`, expected `ed25519`")
    data = value.get("data")
    if not isinstance(data, str):
        raise Error(ErrorKind.PARSE, "invalid type: expected a string")
    try:
        raw = base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise Error(ErrorKind.PARSE, str(exc)) from None
    key = PublicKey.from_raw_ed25519(raw)
    if key is None:
        raise Error(ErrorKind.PARSE, "error parsing Ed25519 key")
    return key