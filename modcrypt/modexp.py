"""Modular exponentiation: a Fermat-reduced loop and a binary square-and-multiply scheme."""

from __future__ import annotations


def _power(a: int, degree: int, p: int) -> int:
    """Return a**degree mod p, with 1 for a zero degree."""
    if degree <= 0:
        return 1
    return pow(a, degree, p)


def a_x_mod_p(a: int, x: int, p: int) -> int:
    """Return a**x mod p with the exponent first reduced modulo p - 1.

    The reduction relies on Fermat's little theorem, so the result equals the
    true power only when p is prime and does not divide a.
    """
    degree = x % (p - 1)
    return _power(a, degree, p)


def a_x_mod_p_log_variant(a: int, x: int, p: int) -> int:
    """Like :func:`a_x_mod_p`, except that a zero exponent yields a mod p."""
    degree = x % (p - 1)
    if x == 0:
        degree = 1
    return _power(a, degree, p)


def dec_to_bin(number: int) -> list[int]:
    """Return the binary digits of a non-negative number, least significant first."""
    if number < 0:
        raise ValueError("number must be non-negative")
    bits = []
    while number:
        number, bit = divmod(number, 2)
        bits.append(bit)
    return bits


def mod_pow(a: int, exponent: int, p: int) -> int:
    """Return a**exponent mod p by square-and-multiply; non-positive exponents give 1."""
    if p == 1:
        return 0
    a %= p
    if exponent <= 0:
        return 1
    return pow(a, exponent, p)


def a_x_mod_p_via_log(a: int, x: int, p: int) -> int:
    """Return a**x mod p from a table of a**(2**i) mod p and the bits of x."""
    if x < 0:
        raise ValueError("exponent must be non-negative")
    if x == 0:
        return 1 % p
    if p == 1:
        return 0
    powers_of_two = [mod_pow(a, 1 << i, p) for i in range(x.bit_length())]
    result = 1
    for bit, power in zip(dec_to_bin(x), powers_of_two):
        if bit:
            result = result * power % p
    return result