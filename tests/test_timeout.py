from datetime import timedelta

import pytest

from tendermint.errors import Error, ErrorKind
from tendermint.timeout import Timeout


def test_parse_seconds():
    assert Timeout.parse("123s").as_secs() == 123


def test_parse_milliseconds():
    assert Timeout.parse("123ms").as_millis() == 123


def test_reject_no_units():
    with pytest.raises(Error) as info:
        Timeout.parse("123")
    assert info.value.kind is ErrorKind.PARSE


@pytest.mark.parametrize("bad", ["s", "ks", "12xs", "ms", "1.5s", "-1s"])
def test_reject_malformed(bad):
    with pytest.raises(Error) as info:
        Timeout.parse(bad)
    assert info.value.kind is ErrorKind.PARSE


def test_display_in_milliseconds():
    assert str(Timeout.parse("10s")) == "10000ms"


def test_seconds_and_millis_agree():
    assert Timeout.parse("3s") == Timeout.parse("3000ms")


def test_json_round_trip():
    t = Timeout.parse("500ms")
    assert Timeout.from_json(t.to_json()) == t


def test_from_json_error_message():
    with pytest.raises(Error) as info:
        Timeout.from_json("oops")
    assert info.value.kind is ErrorKind.PARSE
    assert info.value.msg == 'invalid timeout value: "oops"'


def test_timedelta_round_trip():
    t = Timeout.parse("2s")
    assert t.to_timedelta() == timedelta(seconds=2)
    assert Timeout.from_timedelta(t.to_timedelta()) == t