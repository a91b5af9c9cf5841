import pytest

from tendermint.rpc.errors import Code, RpcError

HEIGHT_MSG = "min height 321 can't be greater than max height 123"


@pytest.mark.parametrize(
    "value,code,name",
    [
        (-32700, Code.PARSE_ERROR, "Parse error. Invalid JSON"),
        (-32600, Code.INVALID_REQUEST, "Invalid Request"),
        (-32601, Code.METHOD_NOT_FOUND, "Method not found"),
        (-32602, Code.INVALID_PARAMS, "Invalid params"),
        (-32603, Code.INTERNAL_ERROR, "Internal error"),
        (-32000, Code.SERVER_ERROR, "Server error"),
    ],
)
def test_known_codes(value, code, name):
    assert Code.from_value(value) == code
    assert code.value() == value
    assert str(code) == name


def test_other_code_round_trip():
    code = Code.from_value(42)
    assert code.value() == 42
    assert code not in (Code.PARSE_ERROR, Code.SERVER_ERROR)
    assert str(code) == "Error (code: 42)"


def test_invalid_params():
    err = RpcError.invalid_params("bad")
    assert err.code == Code.INVALID_PARAMS
    assert err.message == "Invalid params"
    assert err.data == "bad"


def test_method_not_found():
    err = RpcError.method_not_found("bogus")
    assert err.code == Code.METHOD_NOT_FOUND
    assert err.data == "bogus"


def test_parse_and_server_errors_use_display():
    assert RpcError.parse_error(ValueError("boom")).data == "boom"
    err = RpcError.server_error("down")
    assert err.code == Code.SERVER_ERROR
    assert err.data == "down"


def test_display_with_data():
    err = RpcError(Code.INTERNAL_ERROR, HEIGHT_MSG)
    assert str(err) == f"Internal error: {HEIGHT_MSG} (code: -32603)"


def test_display_without_data():
    assert str(RpcError(Code.SERVER_ERROR)) == "Server error (code: -32000)"


def test_from_json_fixture():
    err = RpcError.from_json(
        {"code": -32603, "message": "Internal error", "data": HEIGHT_MSG}
    )
    assert err.code == Code.INTERNAL_ERROR
    assert err.message == "Internal error"
    assert err.data == HEIGHT_MSG


def test_json_round_trip():
    err = RpcError(Code.from_value(-5), "detail")
    back = RpcError.from_json(err.to_json())
    assert (back.code, back.message, back.data) == (err.code, err.message, err.data)


def test_from_json_missing_data_is_none():
    err = RpcError.from_json({"code": -32601, "message": "Method not found"})
    assert err.data is None
    assert err.code == Code.METHOD_NOT_FOUND


@pytest.mark.parametrize(
    "value",
    [
        {"code": "x", "message": "m"},
        {"message": "m"},
        {"code": 1},
        {"code": 1, "message": 2},
        {"code": 1, "message": "m", "data": 3},
        [1, 2],
        {"code": True, "message": "m"},
    ],
)
def test_from_json_malformed(value):
    with pytest.raises(RpcError) as info:
        RpcError.from_json(value)
    assert info.value.code == Code.PARSE_ERROR