"""ElGamal encryption of text, one character at a time."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable

from modcrypt.modexp import a_x_mod_p
from modcrypt.primality import gcd


def are_coprime(a: int, b: int) -> bool:
    """Return True if a and b share no factor other than 1."""
    return gcd(a, b) == 1


def key_check(p: int, g: int, x: int) -> bool:
    """Return True if the generator and the private key are both below p."""
    return g < p and x < p


def mul_mod(a: int, b: int, n: int) -> int:
    """Multiply a by b modulo n by repeated addition (exact when 0 <= a < n)."""
    total = 0
    for _ in range(b):
        total += a
        if total >= n:
            total -= n
    return total


def public_key(p: int, g: int, x: int) -> int:
    """Return y = g**x mod p."""
    return a_x_mod_p(g, x, p)


def encrypt(p: int, g: int, x: int, plaintext: str, rng=None) -> list[tuple[int, int]]:
    """Encrypt each character of plaintext into a pair (a, b)."""
    if p < 3:
        raise ValueError("modulus must be at least 3")
    rng = rng if rng is not None else random.SystemRandom()
    y = public_key(p, g, x)
    pairs = []
    for char in plaintext:
        k = rng.randrange(1, p - 1)
        a = a_x_mod_p(g, k, p)
        b = mul_mod(a_x_mod_p(y, k, p), ord(char), p)
        pairs.append((a, b))
    return pairs


def decrypt(p: int, x: int, ciphertext: Iterable[tuple[int, int]]) -> str:
    """Recover the text from pairs (a, b) with the private key x."""
    return "".join(
        chr(mul_mod(b, a_x_mod_p(a, p - 1 - x, p), p)) for a, b in ciphertext
    )


def format_ciphertext(pairs: Iterable[tuple[int, int]]) -> str:
    """Write pairs as space-separated numbers: 'a b a b ...'."""
    return " ".join(f"{a} {b}" for a, b in pairs)


def parse_ciphertext(text: str) -> list[tuple[int, int]]:
    """Read pairs from space-separated numbers; a trailing odd number is ignored."""
    numbers = [int(token) for token in text.split()]
    return list(zip(numbers[::2], numbers[1::2]))


def main(argv=None) -> int:
    """Generate (or take) a key, encrypt a word read from stdin and decrypt it back."""
    parser = argparse.ArgumentParser(
        prog="modcrypt-elgamal",
        description="Encrypt and decrypt a word with ElGamal.",
    )
    parser.add_argument("--p", type=int, help="modulus (random in 1..900 by default)")
    parser.add_argument("--g", type=int, help="generator (random in 1..300 by default)")
    parser.add_argument("--x", type=int, help="private key (random in 1..10 by default)")
    args = parser.parse_args(argv)

    rng = random.SystemRandom()
    p = args.p if args.p is not None else rng.randint(1, 900)
    g = args.g if args.g is not None else rng.randint(1, 300)
    x = args.x if args.x is not None else rng.randint(1, 10)

    if not key_check(p, g, x):
        return 0

    print("Enter a string: ", end="", flush=True)
    words = sys.stdin.readline().split()
    plaintext = words[0] if words else ""
    print()

    try:
        pairs = encrypt(p, g, x, plaintext, rng)
    except ValueError as err:
        print(f"Cannot encrypt: {err}", file=sys.stderr)
        return 1

    print(f"Public key (p, g, y) = ({p}, {g}, {public_key(p, g, x)})")
    print(f"Private key x = {x}")
    print(f"\nPlaintext: {plaintext}\n")
    print("Ciphertext: " + " ".join(f"({a}, {b})" for a, b in pairs))

    decrypted = decrypt(p, x, parse_ciphertext(format_ciphertext(pairs)))
    print(f"\nDecrypted text: {decrypted}")
    return 0


if __name__ == "__main__":
    sys.exit(main())