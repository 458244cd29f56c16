from datetime import datetime, timedelta, timezone

import pytest

from regcode.utils import to_rfc3339, parse_rfc3339, b64e, b64d, hexe, hexd


def test_to_rfc3339_rejects_naive():
    with pytest.raises(ValueError):
        to_rfc3339(datetime(2030, 1, 1))


def test_to_rfc3339_normalizes_offset():
    plus8 = timezone(timedelta(hours=8))
    assert to_rfc3339(datetime(2030, 1, 1, 8, 0, tzinfo=plus8)) == "2030-01-01T00:00:00+00:00"


@pytest.mark.parametrize("dt", [
    datetime(2030, 1, 1, tzinfo=timezone.utc),
    datetime(2026, 10, 19, 12, 30, 45, 123456, tzinfo=timezone.utc),
    datetime(1999, 12, 31, 23, 59, 59, 1, tzinfo=timezone(timedelta(hours=-5))),
])
def test_rfc3339_roundtrip(dt):
    text = to_rfc3339(dt)
    assert text.endswith("+00:00")
    parsed = parse_rfc3339(text)
    assert parsed == dt
    assert to_rfc3339(parsed) == text


def test_parse_rfc3339_requires_offset():
    with pytest.raises(ValueError):
        parse_rfc3339("2030-01-01T00:00:00")


def test_parse_rfc3339_normalizes_to_utc():
    got = parse_rfc3339("2030-01-01T08:00:00+08:00")
    assert got.utcoffset() == timedelta(0)
    assert got == datetime(2030, 1, 1, tzinfo=timezone.utc)


def test_strict_hex():
    assert hexd(hexe(b"\x00\xff")) == b"\x00\xff"
    with pytest.raises(ValueError):
        hexd("00 ff")


def test_strict_base64():
    assert b64d(b64e(b"abc")) == b"abc"
    with pytest.raises(ValueError):
        b64d("YWJj\n")
