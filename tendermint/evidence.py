"""Evidence of malfeasance by validators (signing conflicting votes)."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from tendermint.errors import Error, ErrorKind
from tendermint.serializers import parse_u64, serialize_u64


def _object(value: object) -> dict:
    if not isinstance(value, dict):
        raise Error(ErrorKind.PARSE, "invalid type: expected an object")
    return value


@dataclass(frozen=True)
class Evidence:
    """Raw evidence, held as its Amino-encoded bytes."""

    data: bytes

    def to_amino_bytes(self) -> bytes:
        """The evidence as an Amino message bytestring."""
        return bytes(self.data)

    def to_json(self) -> str:
        """Serialize as Base64."""
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def from_json(cls, value: object) -> Evidence:
        """Deserialize from a Base64 string."""
        if not isinstance(value, str):
            raise Error(ErrorKind.PARSE, "invalid type: expected a string")
        try:
            return cls(base64.b64decode(value, validate=True))
        except binascii.Error as exc:
            raise Error(ErrorKind.PARSE, str(exc)) from None


@dataclass
class EvidenceData:
    """A collection of evidence; ``None`` means the field was absent."""

    evidence: list[Evidence] | None = None

    @classmethod
    def of(cls, items: Iterable[Evidence]) -> EvidenceData:
        """Create a collection holding the given evidence."""
        return cls(list(items))

    def __iter__(self) -> Iterator[Evidence]:
        return iter(self.evidence or ())

    def __len__(self) -> int:
        return len(self.evidence or ())

    def to_list(self) -> list[Evidence]:
        """A new list of the evidence."""
        return list(self)

    def to_json(self) -> dict:
        """Serialize as an object with an ``evidence`` list (or null)."""
        if self.evidence is None:
            return {"evidence": None}
        return {"evidence": [item.to_json() for item in self.evidence]}

    @classmethod
    def from_json(cls, value: object) -> EvidenceData:
        """Deserialize from an object; a missing or null list is kept as None."""
        raw = _object(value).get("evidence")
        if raw is None:
            return cls(None)
        if not isinstance(raw, list):
            raise Error(ErrorKind.PARSE, "invalid type: expected a sequence")
        return cls([Evidence.from_json(item) for item in raw])


@dataclass(frozen=True)
class EvidenceParams:
    """Evidence collection parameters."""

    max_age: int

    def to_json(self) -> dict:
        """Serialize with ``max_age`` as a decimal string."""
        return {"max_age": serialize_u64(self.max_age)}

    @classmethod
    def from_json(cls, value: object) -> EvidenceParams:
        """Deserialize from an object with a decimal-string ``max_age``."""
        obj = _object(value)
        if "max_age" not in obj:
            raise Error(ErrorKind.PARSE, "missing field `max_age`")
        return cls(parse_u64(obj["max_age"]))