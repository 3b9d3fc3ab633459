"""SRP group parameters.

The modulus ``N``, the generator ``g`` and the multiplier ``k`` are agreed with
the server ahead of time. ``N`` and ``g`` are written as decimal strings and
``k`` as a hex string, which is how existing deployments hand them out.
"""
from typing import NamedTuple

from cryptography.hazmat.primitives import hashes

from .modmath import ONE, ZERO, SRPDomainError
from .srp_crypto import Digest
from .util import hex_of_long, long_of_hex

# RFC 5054, Appendix A, 2048-bit group.
RFC5054_2048_N_HEX = (
    "AC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050"
    "A37329CBB4A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50"
    "E8083969EDB767B0CF6095179A163AB3661A05FBD5FAAAE82918A9962F0B93B8"
    "55F97993EC975EEAA80D740ADBF4FF747359D041D5C33EA71D281E446B14773B"
    "CA97B43A23FB801676BD207A436C6481F1D2B9078717461A5B9D32E688F87748"
    "544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB3786160279004E57AE6"
    "AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DBFBB6"
    "94B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73"
)
RFC5054_2048 = {
    "N": str(int(RFC5054_2048_N_HEX, 16)),
    "g": "2",
}


class SRPContext(NamedTuple):
    """Immutable group parameters, shared by any number of sessions."""

    N: int
    g: int
    k: int
    hashfunc: hashes.HashAlgorithm


def _parse_decimal(name, value):
    try:
        return int(value, 10)
    except (TypeError, ValueError) as ex:
        raise ValueError(f"{name} must be a decimal string") from ex


def get_srp_context(N, g, k, hashfunc=None):
    """Build an :class:`SRPContext` from its wire representation.

    :param N: The modulus, as a decimal string.
    :type N: str

    :param g: The generator, as a decimal string.
    :type g: str

    :param k: The multiplier, as a hex string with or without ``0x``.
    :type k: str

    :param hashfunc: The protocol hash, SHA-256 when omitted.
    :type hashfunc: cryptography.hazmat.primitives.hashes.HashAlgorithm

    :raises SRPDomainError: If ``N <= 1`` or ``g <= 0``.
    """
    n_long = _parse_decimal("N", N)
    g_long = _parse_decimal("g", g)
    try:
        k_long = long_of_hex(k)
    except (TypeError, ValueError) as ex:
        raise ValueError("k must be a hex string") from ex

    if n_long <= ONE:
        raise SRPDomainError("N must be > 1")
    if g_long <= ZERO:
        raise SRPDomainError("g must be > 0")

    return SRPContext(n_long, g_long, k_long, hashfunc or Digest().algorithm)


def derive_k(N, g, hashfunc=None):
    """Return the conventional multiplier ``k = H(N | PAD(g))``.

    ``N`` and ``g`` are integers. ``g`` is left padded with zeroes to the byte
    length of ``N`` before hashing.
    """
    digest = Digest(hashfunc)
    n_bytes = bytes.fromhex(hex_of_long(N))
    g_bytes = bytes.fromhex(hex_of_long(g)).rjust(len(n_bytes), b"\x00")
    return int.from_bytes(digest.digest(n_bytes + g_bytes), byteorder="big")
