"""Core types for Tendermint blockchain networks: hashes, Merkle roots, keys, addresses, timestamps and validators."""

__version__ = "0.10.0"