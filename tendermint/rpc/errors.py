"""JSONRPC error codes and the error type raised by the RPC client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1

_CODE_NAMES = {
    -32700: "Parse error. Invalid JSON",
    -32600: "Invalid Request",
    -32601: "Method not found",
    -32602: "Invalid params",
    -32603: "Internal error",
    -32000: "Server error",
}


@dataclass(frozen=True)
class Code:
    """A JSONRPC error code; any 32-bit integer is allowed."""

    code: int

    PARSE_ERROR: ClassVar[Code]
    INVALID_REQUEST: ClassVar[Code]
    METHOD_NOT_FOUND: ClassVar[Code]
    INVALID_PARAMS: ClassVar[Code]
    INTERNAL_ERROR: ClassVar[Code]
    SERVER_ERROR: ClassVar[Code]

    @classmethod
    def from_value(cls, value: int) -> Code:
        """The code for an integer value."""
        return cls(int(value))

    def value(self) -> int:
        """The integer value of this code."""
        return self.code

    def __str__(self) -> str:
        name = _CODE_NAMES.get(self.code)
        if name is None:
            return f"Error (code: {self.code})"
        return name


Code.PARSE_ERROR = Code(-32700)
Code.INVALID_REQUEST = Code(-32600)
Code.METHOD_NOT_FOUND = Code(-32601)
Code.INVALID_PARAMS = Code(-32602)
Code.INTERNAL_ERROR = Code(-32603)
Code.SERVER_ERROR = Code(-32000)


class RpcError(Exception):
    """A JSONRPC error with a code, a message and optional data."""

    def __init__(self, code: Code, data: str | None = None) -> None:
        super().__init__(code, data)
        self.code = code
        self.message = str(code)
        self.data = data

    @classmethod
    def invalid_params(cls, data: str) -> RpcError:
        """An invalid-parameters error."""
        return cls(Code.INVALID_PARAMS, str(data))

    @classmethod
    def method_not_found(cls, name: str) -> RpcError:
        """A method-not-found error."""
        return cls(Code.METHOD_NOT_FOUND, str(name))

    @classmethod
    def parse_error(cls, error: object) -> RpcError:
        """A parse error describing ``error``."""
        return cls(Code.PARSE_ERROR, str(error))

    @classmethod
    def server_error(cls, data: object) -> RpcError:
        """A server error describing ``data``."""
        return cls(Code.SERVER_ERROR, str(data))

    def __str__(self) -> str:
        if self.data is not None:
            return f"{self.message}: {self.data} (code: {self.code.value()})"
        return f"{self.message} (code: {self.code.value()})"

    def __repr__(self) -> str:
        return f"RpcError(code={self.code!r}, message={self.message!r}, data={self.data!r})"

    def to_json(self) -> dict:
        """Serialize as a JSONRPC error object."""
        return {"code": self.code.value(), "message": self.message, "data": self.data}

    @classmethod
    def from_json(cls, value: object) -> RpcError:
        """Deserialize from a JSONRPC error object; raises a parse error if malformed."""
        if not isinstance(value, dict):
            raise cls.parse_error("invalid type: expected an object")
        for name in ("code", "message"):
            if name not in value:
                raise cls.parse_error(f"missing field `{name}`")
        raw_code = value["code"]
        if (
            isinstance(raw_code, bool)
            or not isinstance(raw_code, int)
            or not _I32_MIN <= raw_code <= _I32_MAX
        ):
            raise cls.parse_error(f"invalid error code: {raw_code!r}")
        message = value["message"]
        if not isinstance(message, str):
            raise cls.parse_error("invalid type: expected a string message")
        data = value.get("data")
        if data is not None and not isinstance(data, str):
            raise cls.parse_error("invalid type: expected a string for data")
        error = cls(Code.from_value(raw_code), data)
        error.message = message
        return error