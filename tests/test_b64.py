import base64

import pytest

from mdbkit.b64 import base64_encode


@pytest.mark.parametrize(
    "data, expected",
    [(b"Man", "TWFu"), (b"Ma", "TWE="), (b"M", "TQ==")],
)
def test_known_values(data, expected):
    assert base64_encode(data) == expected


@pytest.mark.parametrize("data", [b"", b"\x00\xff\x10", bytes(range(256)), b"hello world"])
def test_round_trip(data):
    encoded = base64_encode(data)
    assert base64.b64decode(encoded) == data
    assert len(encoded) % 4 == 0


def test_exact_buffer_fits():
    data = b"abcd"
    encoded = base64_encode(data)
    assert base64_encode(data, len(encoded) + 1) == encoded


def test_buffer_too_small():
    data = b"abcd"
    size = len(base64_encode(data))
    with pytest.raises(ValueError):
        base64_encode(data, size)


def test_empty_needs_room_for_terminator():
    with pytest.raises(ValueError):
        base64_encode(b"", 0)
    assert base64_encode(b"", 1) == ""