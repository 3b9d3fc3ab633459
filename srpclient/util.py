"""Conversions between integers, hex, base64 and bytes.

Every integer that is hashed or sent over the wire goes through the canonical
hex form: an even number of lowercase digits with at most one leading zero.
Both peers must agree on it bit for bit, otherwise hashes never match.
"""
import base64
import os


def long_to_bytes(n):
    """
    Convert a non-negative ``int`` to big endian ``bytes``.

    Zero converts to ``b""``, matching its empty canonical hex form.

    :param n: Long Integer
    :type n: int

    :return: ``n`` in ``bytes`` format.
    :rtype: bytes
    """
    if n < 0:
        raise ValueError("Negative integers have no canonical encoding")
    return n.to_bytes((n.bit_length() + 7) // 8, byteorder="big")


def bytes_to_long(s):
    # Bytes should be interpreted from left to right, hence the byteorder
    return int.from_bytes(s, byteorder="big")


def to_base64_str(bytes_input) -> str:
    return base64.b64encode(bytes_input).decode("utf-8")


def base64_to_bytes(str_input) -> bytes:
    """Decode base64, rejecting characters outside the alphabet.

    :raises binascii.Error: If ``str_input`` is not valid base64.
    """
    return base64.b64decode(str_input.encode("utf-8"), validate=True)


def trim_hex_zeroes(hex_str):
    """Bring a hex string without ``0x`` prefix to its canonical form.

    Leading zeroes are stripped; if an odd number of digits remains a single
    zero is put back.

    :param hex_str: Hex digits, any length.
    :type hex_str: str

    :return: Hex string with an even length and at most one leading zero.
    :rtype: str
    """
    digits = hex_str.lstrip("0")
    return digits if len(digits) % 2 == 0 else "0" + digits


def hex_of_long(n) -> str:
    """Canonical hex of a non-negative integer. Zero gives ``""``."""
    if n < 0:
        raise ValueError("Negative integers have no canonical encoding")
    return trim_hex_zeroes(format(n, "x"))


def hex_of_bytes(data) -> str:
    """Hex of every byte, leading zero bytes included."""
    return bytes(data).hex()


def hex_of_base64(str_input) -> str:
    """Decode base64 into canonical hex."""
    return trim_hex_zeroes(hex_of_bytes(base64_to_bytes(str_input)))


def base64_of_hex(hex_str) -> str:
    """Encode an even-length hex string as base64.

    :raises ValueError: If ``hex_str`` has an odd length or non hex digits.
    """
    return to_base64_str(bytes.fromhex(hex_str))


def base64_of_long(n) -> str:
    return base64_of_hex(hex_of_long(n))


def long_of_base64(str_input) -> int:
    return bytes_to_long(base64_to_bytes(str_input))


def long_of_hex(hex_str) -> int:
    """Parse hex digits, with or without ``0x`` prefix. Empty gives 0."""
    return int(hex_str, 16) if hex_str else 0


def random_hex(num_bytes, randfunc=os.urandom) -> str:
    """Return ``num_bytes`` random bytes as hex.

    :param randfunc: Source of random bytes, ``os.urandom`` unless a test
        supplies something deterministic.
    :type randfunc: callable
    """
    return hex_of_bytes(randfunc(num_bytes))
