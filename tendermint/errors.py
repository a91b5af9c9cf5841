"""Error kinds and the error type raised throughout the package."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Kinds of errors, each carrying its display text."""

    CRYPTO = "cryptographic error"
    INVALID_KEY = "invalid key"
    IO = "I/O error"
    LENGTH = "length error"
    PARSE = "parse error"
    PROTOCOL = "protocol error"
    OUT_OF_RANGE = "value out of range"
    SIGNATURE_INVALID = "bad signature"

    def __str__(self) -> str:
        return self.value


class Error(Exception):
    """An error of a given kind with an optional message."""

    def __init__(self, kind: ErrorKind, msg: str | None = None) -> None:
        super().__init__(kind, msg)
        self.kind = kind
        self.msg = msg

    def __str__(self) -> str:
        if self.msg is not None:
            return f"{self.kind}: {self.msg}"
        return str(self.kind)

    def __repr__(self) -> str:
        return f"Error(kind={self.kind!r}, msg={self.msg!r})"