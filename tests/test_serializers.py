import pytest

from tendermint.errors import Error, ErrorKind
from tendermint.serializers import (
    parse_duration,
    parse_i64,
    parse_u64,
    serialize_duration,
    serialize_i64,
    serialize_u64,
)


@pytest.mark.parametrize("n", [0, 1, 42, 2**64 - 1])
def test_u64_round_trip(n):
    assert parse_u64(serialize_u64(n)) == n


@pytest.mark.parametrize("n", [-(2**63), -5, 0, 2**63 - 1])
def test_i64_round_trip(n):
    assert parse_i64(serialize_i64(n)) == n


def test_u64_accepts_plus_sign():
    assert parse_u64("+7") == 7


def test_u64_rejects_negative():
    with pytest.raises(Error) as info:
        parse_u64("-1")
    assert info.value.kind is ErrorKind.PARSE
    assert info.value.msg == "invalid digit found in string"


def test_u64_overflow():
    with pytest.raises(Error) as info:
        parse_u64(str(2**64))
    assert info.value.msg == "number too large to fit in target type"


def test_i64_underflow():
    with pytest.raises(Error) as info:
        parse_i64(str(-(2**63) - 1))
    assert info.value.msg == "number too small to fit in target type"


@pytest.mark.parametrize("bad", ["", " 1", "1_000", "1.0", "abc", "-"])
def test_invalid_strings(bad):
    with pytest.raises(Error) as info:
        parse_i64(bad)
    assert info.value.kind is ErrorKind.PARSE


def test_non_string_rejected():
    with pytest.raises(Error) as info:
        parse_u64(5)
    assert info.value.kind is ErrorKind.PARSE


def test_duration_round_trip():
    assert parse_duration(serialize_duration(1500)) == 1500
    assert serialize_duration(parse_duration("1500")) == "1500"