import pytest

from tendermint.merkle import (
    HASH_SIZE,
    get_split_point,
    inner_hash,
    leaf_hash,
    simple_hash_from_byte_vectors,
)


@pytest.mark.parametrize(
    "length, expected",
    [
        (2, 1),
        (3, 2),
        (4, 2),
        (5, 4),
        (10, 8),
        (20, 16),
        (100, 64),
        (255, 128),
        (256, 128),
        (257, 256),
    ],
)
def test_get_split_point(length, expected):
    assert get_split_point(length) == expected


@pytest.mark.parametrize("length", [0, 1])
def test_get_split_point_too_small(length):
    with pytest.raises(ValueError):
        get_split_point(length)


def test_rfc6962_empty_leaf():
    expected = bytes.fromhex(
        "6e340b9cffb37a989ca544e6bb780a2c78901d3fb33738768511a30617afa01d"
    )
    assert simple_hash_from_byte_vectors([b""]) == expected


def test_rfc6962_leaf():
    expected = bytes.fromhex(
        "395aa064aa4c29f7010acfe3f25db9485bbd4b91897b6ad7ad547639252b4d56"
    )
    assert simple_hash_from_byte_vectors([b"L123456"]) == expected


def test_rfc6962_node():
    expected = bytes.fromhex(
        "aa217fe888e47007fa15edab33c2b492a722cb106c64667fc2b044444de66bbb"
    )
    assert inner_hash(b"N123", b"N456") == expected


def test_empty_tree_is_zero():
    assert simple_hash_from_byte_vectors([]) == bytes(HASH_SIZE)


def test_two_leaves_combine():
    root = simple_hash_from_byte_vectors([b"a", b"b"])
    assert root == inner_hash(leaf_hash(b"a"), leaf_hash(b"b"))


def test_three_leaves_split_two_one():
    root = simple_hash_from_byte_vectors([b"a", b"b", b"c"])
    left = inner_hash(leaf_hash(b"a"), leaf_hash(b"b"))
    assert root == inner_hash(left, leaf_hash(b"c"))
    assert len(root) == HASH_SIZE