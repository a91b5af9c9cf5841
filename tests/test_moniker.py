import pytest

from tendermint.errors import Error, ErrorKind
from tendermint.moniker import Moniker, Version


def test_moniker_display():
    assert str(Moniker.parse("technodrome")) == "technodrome"


def test_moniker_json_round_trip():
    m = Moniker("node-a")
    assert Moniker.from_json(m.to_json()) == m


def test_moniker_ordering():
    names = [Moniker("b"), Moniker("a"), Moniker("c")]
    assert [str(m) for m in sorted(names)] == ["a", "b", "c"]


def test_moniker_rejects_non_string():
    with pytest.raises(Error) as info:
        Moniker.from_json(5)
    assert info.value.kind is ErrorKind.PARSE


def test_version_display_and_equality():
    v = Version("0.31.5")
    assert str(v) == "0.31.5"
    assert v == Version.from_json("0.31.5")
    assert v.to_json() == "0.31.5"


def test_version_rejects_non_string():
    with pytest.raises(Error):
        Version.from_json(None)