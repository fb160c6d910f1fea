"""Compare two modular powers a1**x1 and a2**x2 modulo a prime."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Iterator

from modcrypt.modexp import a_x_mod_p, a_x_mod_p_via_log
from modcrypt.primality import ModulusError, validate_modulus


class Method(enum.Enum):
    """How the modular powers are computed."""

    CLASSIC = "classic"
    LOGARITHM = "logarithm"


def compare_powers(a1, x1, a2, x2, p, method=Method.CLASSIC) -> bool:
    """Return True if a1**x1 and a2**x2 are congruent modulo p."""
    power = a_x_mod_p if Method(method) is Method.CLASSIC else a_x_mod_p_via_log
    return power(a1, x1, p) == power(a2, x2, p)


def format_comparison(a1, x1, a2, x2, p, equal) -> str:
    """Render the comparison as a single line."""
    sign = "=" if equal else "!="
    return f"{a1}^{x1} mod {p} {sign} {a2}^{x2} mod {p}"


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str, count: int) -> list[int]:
    print(prompt, end="", flush=True)
    values = []
    for _ in range(count):
        try:
            values.append(int(next(tokens)))
        except StopIteration:
            raise ValueError("unexpected end of input") from None
    return values


def main(argv=None) -> int:
    """Read two powers, a modulus and a check count, then print the comparison."""
    parser = argparse.ArgumentParser(
        prog="modcrypt-compare",
        description="Compare a1^x1 mod p with a2^x2 mod p.",
    )
    parser.add_argument(
        "--method",
        choices=[method.value for method in Method],
        default=Method.CLASSIC.value,
    )
    args = parser.parse_args(argv)
    method = Method(args.method)

    tokens = _stdin_tokens()
    try:
        a1, x1 = _ask(tokens, "Enter the first number and its exponent separated by a space: ", 2)
        a2, x2 = _ask(tokens, "Enter the second number and its exponent separated by a space: ", 2)
        (p,) = _ask(tokens, "Enter the modulus: ", 1)
        (k,) = _ask(tokens, "Enter the number of Fermat test rounds: ", 1)
    except ValueError as err:
        print(f"\nInvalid input: {err}", file=sys.stderr)
        return 1

    try:
        validate_modulus(p, k)
    except ModulusError as err:
        if method is Method.CLASSIC:
            print(f"\n{err}")
            return 0
        print(f"\n{err}", file=sys.stderr)
        return 1

    equal = compare_powers(a1, x1, a2, x2, p, method)
    print(format_comparison(a1, x1, a2, x2, p, equal))
    return 0


if __name__ == "__main__":
    sys.exit(main())