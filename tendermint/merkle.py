"""Simple Merkle tree used in Tendermint networks."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

HASH_SIZE = 32


def simple_hash_from_byte_vectors(byte_vecs: Sequence[bytes]) -> bytes:
    """Compute the Merkle root of the given leaves, in order."""
    leaves = list(byte_vecs)
    return _root(leaves)


def _root(leaves: list[bytes]) -> bytes:
    if not leaves:
        return bytes(HASH_SIZE)
    if len(leaves) == 1:
        return leaf_hash(leaves[0])
    k = get_split_point(len(leaves))
    return inner_hash(_root(leaves[:k]), _root(leaves[k:]))


def get_split_point(length: int) -> int:
    """Return the largest power of two strictly less than ``length``."""
    if length < 1:
        raise ValueError("tree is empty!")
    if length == 1:
        raise ValueError("tree has only one element!")
    return (1 << (length - 1).bit_length()) // 2


def leaf_hash(data: bytes) -> bytes:
    """SHA-256 of 0x00 followed by the leaf."""
    return hashlib.sha256(b"\x00" + bytes(data)).digest()


def inner_hash(left: bytes, right: bytes) -> bytes:
    """SHA-256 of 0x01 followed by both children."""
    return hashlib.sha256(b"\x01" + bytes(left) + bytes(right)).digest()