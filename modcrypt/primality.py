"""Primality checks and validation of a modulus for modular comparisons."""

from __future__ import annotations

import math

from modcrypt.modexp import a_x_mod_p

_FERMAT_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23)


class ModulusError(ValueError):
    """Raised when a modulus is unfit for the comparison."""


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def is_prime(p: int) -> bool:
    """Trial division by 2, 3 and numbers of the form 6i +/- 1.

    Multiples of 2 or 3 (including 2 and 3 themselves) and numbers up to 1
    are rejected.
    """
    if p <= 1 or p % 2 == 0 or p % 3 == 0:
        return False
    square_root = math.isqrt(p) + 1
    for i in range(1, (square_root + 1) // 6):
        for divider in (6 * i - 1, 6 * i + 1):
            if divider <= square_root and p % divider == 0:
                return False
    return True


def fermats_condition(p: int, k: int) -> bool:
    """Check p against up to k small bases (at most nine) in Fermat's test."""
    if p <= 1 or (p % 2 == 0 and p != 2):
        return False
    count = min(k, len(_FERMAT_BASES))
    for base in _FERMAT_BASES[:max(count, 0)]:
        if base >= p:
            continue
        if gcd(p, base) != 1:
            return False
        if a_x_mod_p(base, p - 1, p) != 1:
            return False
    return True


def validate_modulus(p: int, k: int) -> bool:
    """Return True if p is usable as a modulus, else raise ModulusError."""
    if not is_prime(p):
        raise ModulusError(
            "The modulus is not a prime number, try another one. "
            "The modulus must be > 0!"
        )
    if not fermats_condition(p, k):
        raise ModulusError(
            "The modulus does not satisfy Fermat's condition, try another one."
        )
    return True