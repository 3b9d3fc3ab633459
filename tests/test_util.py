"""Test for srpclient.util."""
import binascii

import pytest

from srpclient import util


@pytest.mark.parametrize(
    "hex_in,expected",
    [
        ("", ""),
        ("0", ""),
        ("0000", ""),
        ("1", "01"),
        ("01", "01"),
        ("001", "01"),
        ("0001", "01"),
        ("abc", "0abc"),
        ("00abc", "0abc"),
        ("abcd", "abcd"),
        ("000abcd", "abcd"),
    ],
)
def test_trim_hex_zeroes(hex_in, expected):
    assert util.trim_hex_zeroes(hex_in) == expected


def test_hex_of_long():
    assert util.hex_of_long(0) == ""
    assert util.hex_of_long(1) == "01"
    assert util.hex_of_long(255) == "ff"
    assert util.hex_of_long(256) == "0100"
    assert util.hex_of_long(0xABCDEF) == "abcdef"

    with pytest.raises(ValueError):
        util.hex_of_long(-1)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x00",
        b"\x00\x00\x01",
        b"\x00\x0f\xff",
        b"\x01\x02\x03",
        b"\xff" * 33,
        bytes(range(256)),
    ],
)
def test_base64_bytes_round_trip(data):
    """Test bytes survive base64, leading zero bytes included."""
    assert util.base64_to_bytes(util.to_base64_str(data)) == data


@pytest.mark.parametrize(
    "data", [b"\x00\x00\x01", b"\x00\x0f\xff", b"\x0a\xbc", b"\xff\x00", b"\x00"]
)
def test_hex_of_base64_is_canonical(data):
    """Test decoded hex has an even length and at most one leading zero."""
    hex_str = util.hex_of_base64(util.to_base64_str(data))
    assert len(hex_str) % 2 == 0
    assert not hex_str.startswith("00")
    assert util.long_of_hex(hex_str) == util.bytes_to_long(data)


def test_base64_of_hex():
    assert util.base64_of_hex("") == ""
    assert util.base64_of_hex("00ff") == "AP8="
    assert util.base64_of_hex("4d616e") == "TWFu"

    with pytest.raises(ValueError):
        util.base64_of_hex("abc")


def test_base64_of_long():
    assert util.base64_of_long(0) == ""
    assert util.base64_of_long(0x4D616E) == "TWFu"
    assert util.long_of_base64("TWFu") == 0x4D616E
    assert util.long_of_base64("AAD/") == 0xFF
    assert util.hex_of_base64("AAD/") == "ff"


def test_base64_to_bytes_malformed():
    with pytest.raises(binascii.Error):
        util.base64_to_bytes("abc")
    with pytest.raises(binascii.Error):
        util.base64_to_bytes("!!TWFu**")
    with pytest.raises(binascii.Error):
        util.long_of_base64("TW Fu")


def test_long_to_bytes():
    assert util.long_to_bytes(0) == b""
    assert util.long_to_bytes(1) == b"\x01"
    assert util.long_to_bytes(256) == b"\x01\x00"
    assert util.bytes_to_long(b"\x00\x01\x00") == 256

    with pytest.raises(ValueError):
        util.long_to_bytes(-1)


def test_long_of_hex():
    assert util.long_of_hex("") == 0
    assert util.long_of_hex("0x1f") == 31
    assert util.long_of_hex("1F") == 31


def test_random_hex():
    """Test random_hex draws from the given source."""
    assert util.random_hex(3, lambda n: b"\x00\x01\xff"[:n]) == "0001ff"
    assert len(util.random_hex(32)) == 64
