import pytest

from tendermint.errors import Error, ErrorKind
from tendermint.hash import SHA256_HASH_SIZE, Algorithm, Hash

HEX = "AB" * SHA256_HASH_SIZE


def test_parse_round_trip():
    h = Hash.parse(HEX)
    assert str(h) == HEX
    assert h.as_bytes() == bytes.fromhex(HEX)
    assert h.algorithm() is Algorithm.SHA256


def test_new_from_bytes():
    data = bytes(range(SHA256_HASH_SIZE))
    h = Hash.new(Algorithm.SHA256, data)
    assert h.as_bytes() == data
    assert Hash.parse(str(h)) == h


def test_new_wrong_length():
    with pytest.raises(Error) as info:
        Hash.new(Algorithm.SHA256, b"\x00" * 31)
    assert info.value.kind is ErrorKind.PARSE


def test_lower_case_rejected():
    with pytest.raises(Error) as info:
        Hash.parse(HEX.lower())
    assert info.value.kind is ErrorKind.PARSE


def test_wrong_hex_length_rejected():
    with pytest.raises(Error):
        Hash.parse(HEX[:-2])


def test_null_hash():
    h = Hash.null()
    assert h.as_bytes() is None
    assert h.algorithm() is None
    assert str(h) == ""
    assert h.to_json() == ""


def test_json_round_trip():
    h = Hash.parse(HEX)
    assert Hash.from_json(h.to_json()) == h
    assert Hash.from_json("") == Hash.null()


def test_from_json_rejects_non_string():
    with pytest.raises(Error) as info:
        Hash.from_json(12)
    assert info.value.kind is ErrorKind.PARSE


def test_sha256_orders_before_null():
    assert Hash.parse(HEX) < Hash.null()
    assert Hash.parse("00" * 32) < Hash.parse(HEX)


def test_hashable():
    assert len({Hash.parse(HEX), Hash.parse(HEX), Hash.null()}) == 2