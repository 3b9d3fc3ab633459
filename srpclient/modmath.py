"""Modular arithmetic over arbitrary precision integers.

Everything here is synchronous and pure, so it is safe to call from any thread.
"""
from typing import NamedTuple

ZERO = 0
ONE = 1
TWO = 2


class SRPDomainError(ValueError):
    """Raised when an arithmetic precondition does not hold.

    This points at badly chosen group parameters or a programming error, never
    at data sent by the peer.
    """


class Egcd(NamedTuple):
    g: int
    x: int
    y: int


def to_zn(x, N):
    """Return the representative of ``x`` in ``[0, N)``.

    :param x: An integer, possibly negative.
    :type x: int

    :param N: The modulus.
    :type N: int

    :raises SRPDomainError: If ``N`` is not positive.
    """
    if N <= ZERO:
        raise SRPDomainError("N must be > 0")
    # Python's % already follows the sign of the divisor.
    return x % N


def egcd(a, b):
    """Iterative extended euclidean algorithm.

    :param a: A positive integer.
    :type a: int

    :param b: A positive integer.
    :type b: int

    :raises SRPDomainError: If ``a`` or ``b`` are not positive.

    :return: A triple ``(g, x, y)`` such that ``a*x + b*y == g == gcd(a, b)``.
    :rtype: Egcd
    """
    if a <= ZERO or b <= ZERO:
        raise SRPDomainError("a and b must be > 0")

    x, y, u, v = ZERO, ONE, ONE, ZERO
    while a != ZERO:
        q, r = divmod(b, a)
        m = x - u * q
        n = y - v * q
        b, a = a, r
        x, y = u, v
        u, v = m, n
    return Egcd(b, x, y)


def mod_inv(a, n):
    """Return the inverse of ``a`` modulo ``n``.

    :raises SRPDomainError: If ``n`` is not positive or ``a`` has no inverse
        modulo ``n``.
    """
    residue = to_zn(a, n)
    if residue == ZERO:
        raise SRPDomainError("0 does not have an inverse modulo n")
    result = egcd(residue, n)
    if result.g != ONE:
        raise SRPDomainError(f"no inverse exists, gcd is {result.g}")
    return to_zn(result.x, n)


def mod_pow(x, y, N):
    """Fast modular exponentiation ``x**y (mod N)``.

    Negative exponents are served by inverting the result for ``-y``, so they
    fail like :func:`mod_inv` when ``x`` is not invertible.

    :param x: The base.
    :type x: int

    :param y: The exponent, any sign.
    :type y: int

    :param N: The modulus.
    :type N: int

    :raises SRPDomainError: If ``N <= 1``.
    """
    if N <= ONE:
        raise SRPDomainError("N must be > 1")

    base = to_zn(x, N)
    if y < ZERO:
        return mod_inv(mod_pow(base, -y, N), N)

    result = ONE
    exp = y
    while exp > ZERO:
        if exp & ONE:
            result = (result * base) % N
        exp >>= 1
        base = (base * base) % N
    return result
