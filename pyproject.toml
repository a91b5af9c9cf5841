[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tendermint"
version = "0.10.0"
description = "Core types for Tendermint blockchain networks: hashes, keys, addresses, Merkle roots and a JSON-RPC client"
requires-python = ">=3.10"
dependencies = []
keywords = ["tendermint", "blockchain", "consensus", "json-rpc", "merkle", "bech32"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tendermint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
