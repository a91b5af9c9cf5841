import pytest

from tendermint.rpc.errors import Code, RpcError
from tendermint.rpc.version import RpcVersion


def test_current_is_supported():
    version = RpcVersion.current()
    assert version.value == "2.0"
    assert version.is_supported()
    assert str(version) == "2.0"


def test_other_version_unsupported():
    version = RpcVersion.parse("1.0")
    assert not version.is_supported()
    with pytest.raises(RpcError) as info:
        version.ensure_supported()
    assert info.value.code == Code.SERVER_ERROR
    assert "'1.0'" in info.value.data
    assert "'2.0'" in info.value.data


def test_json_round_trip():
    version = RpcVersion("3.1")
    assert RpcVersion.from_json(version.to_json()) == version


def test_from_json_rejects_non_string():
    with pytest.raises(RpcError) as info:
        RpcVersion.from_json(2.0)
    assert info.value.code == Code.PARSE_ERROR