"""Cryptographic (digital) signatures."""

from __future__ import annotations

import base64
import binascii
import enum
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind

ED25519_SIGNATURE_SIZE = 64


class SignatureAlgorithm(enum.Enum):
    """Digital signature algorithms."""

    ECDSA_SECP256K1 = "ecdsa-secp256k1"
    ED25519 = "ed25519"


@dataclass(frozen=True)
class Signature:
    """An Ed25519 block signature."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != ED25519_SIGNATURE_SIZE:
            raise Error(
                ErrorKind.LENGTH,
                f"Ed25519 signatures must be {ED25519_SIGNATURE_SIZE} bytes",
            )

    def algorithm(self) -> SignatureAlgorithm:
        """The algorithm used to create this signature."""
        return SignatureAlgorithm.ED25519

    def __bytes__(self) -> bytes:
        return self.data

    def to_json(self) -> str:
        """Serialize the signature bytes as Base64."""
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def from_json(cls, value: object) -> Signature:
        """Deserialize from a Base64 string."""
        if not isinstance(value, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        try:
            raw = base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise Error(ErrorKind.PARSE, str(exc)) from None
        try:
            return cls(raw)
        except Error as exc:
            raise Error(ErrorKind.PARSE, exc.msg) from None