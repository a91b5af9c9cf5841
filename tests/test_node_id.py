import pytest

from tendermint.errors import Error, ErrorKind
from tendermint.node_id import NodeId

UPPER = "8112E5C5AB6A48ADCC0E875D58A4264A2639F6A8"


def test_parse_upper_round_trip():
    node_id = NodeId.parse(UPPER)
    assert str(node_id) == UPPER
    assert len(node_id.as_bytes()) == 20


def test_parse_lower_equals_upper():
    assert NodeId.parse(UPPER.lower()) == NodeId.parse(UPPER)


def test_parse_mixed_case_rejected():
    mixed = UPPER[:10].lower() + UPPER[10:]
    with pytest.raises(Error) as info:
        NodeId.parse(mixed)
    assert info.value.kind is ErrorKind.PARSE


@pytest.mark.parametrize("text", ["", "ABCD", UPPER + "00", "ZZ" * 20, UPPER[:-1]])
def test_parse_invalid(text):
    with pytest.raises(Error) as info:
        NodeId.parse(text)
    assert info.value.kind is ErrorKind.PARSE


def test_new_requires_twenty_bytes():
    with pytest.raises(Error) as info:
        NodeId(b"\x00" * 19)
    assert info.value.kind is ErrorKind.LENGTH


def test_from_ed25519_is_deterministic():
    key = bytes(range(32))
    first = NodeId.from_ed25519(key)
    assert first == NodeId.from_ed25519(key)
    assert len(first.as_bytes()) == 20
    assert NodeId.parse(str(first)) == first


def test_from_ed25519_distinguishes_keys():
    assert NodeId.from_ed25519(bytes(32)) != NodeId.from_ed25519(b"\x01" * 32)


def test_from_ed25519_rejects_bad_length():
    with pytest.raises(Error) as info:
        NodeId.from_ed25519(b"\x01" * 31)
    assert info.value.kind is ErrorKind.INVALID_KEY


def test_json_round_trip():
    node_id = NodeId.parse(UPPER)
    assert NodeId.from_json(node_id.to_json()) == node_id


def test_from_json_error_message():
    with pytest.raises(Error) as info:
        NodeId.from_json("nothex")
    assert "expected 40-character hex string" in str(info.value)


def test_hash_and_ordering_consistent():
    a = NodeId(b"\x00" * 20)
    b = NodeId(b"\x01" * 20)
    assert a < b
    assert len({a, NodeId(b"\x00" * 20), b}) == 2