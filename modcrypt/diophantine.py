"""Solve the linear Diophantine equation a*x + b*y = c via continued fractions."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass


def _tdivmod(a: int, b: int) -> tuple[int, int]:
    """Quotient truncated toward zero, and the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def continued_fraction(a: int, b: int) -> list[int]:
    """Return the partial quotients of a / b."""
    coefficients = []
    while b != 0:
        quotient, remainder = _tdivmod(a, b)
        coefficients.append(quotient)
        a, b = b, remainder
    return coefficients


def euclid_gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _tdivmod(a, b)[1]
    return a


def compact_solution(a: int, a0: int, b: int, b0: int) -> tuple[int, int, int, int]:
    """Shift a particular solution towards small values.

    Returns (x_base, x_step, y_base, y_step) where x_base = a + a0*k and
    y_base = b - b0*k for k the smaller of the truncated quotients a/a0, b/b0.
    """
    k = min(_tdivmod(a, a0)[0], _tdivmod(b, b0)[0])
    return a + a0 * k, a0, b - b0 * k, b0


@dataclass(frozen=True)
class DiophantineSolution:
    """Solutions of a*x + b*y = c: x = x0 + step_x*t, y = y0 - step_y*t."""

    a: int
    b: int
    c: int
    gcd: int
    x0: int
    y0: int
    step_x: int
    step_y: int
    compact: tuple[int, int, int, int]

    def describe(self) -> str:
        """Human-readable description of the solution set."""
        x_base, x_step, y_base, y_step = self.compact
        return "\n".join(
            [
                f"One solution: a = {self.x0}, b = {self.y0}",
                f"General solution: a = {self.x0} + {self.step_x} * t, "
                f"b = {self.y0} - {self.step_y} * t, where t is an integer.",
                f"Compact general solution: a = {x_base} + {x_step} * k, "
                f"b = {y_base} + {y_step} * k, where k is an integer.",
            ]
        )


def solve_diophantine(a: int, b: int, c: int) -> DiophantineSolution | None:
    """Solve a*x + b*y = c; return None when there is no integer solution."""
    if a == 0 and b == 0:
        raise ValueError("a and b must not both be zero")
    x, x_prev = 0, 1
    y, y_prev = 1, 0
    for q in continued_fraction(a, b):
        x, x_prev = x_prev - q * x, x
        y, y_prev = y_prev - q * y, y
    divisor = euclid_gcd(a, b)
    if c % divisor != 0:
        return None
    factor = c // divisor
    x0, y0 = x_prev * factor, y_prev * factor
    step_x, step_y = b // divisor, a // divisor
    return DiophantineSolution(
        a=a,
        b=b,
        c=c,
        gcd=divisor,
        x0=x0,
        y0=y0,
        step_x=step_x,
        step_y=step_y,
        compact=compact_solution(x0, step_x, y0, step_y),
    )


def main(argv=None) -> int:
    """Solve a*x + b*y = c and print the solutions."""
    parser = argparse.ArgumentParser(
        prog="modcrypt-diophantine",
        description="Solve the equation a*x + b*y = c in integers.",
    )
    parser.add_argument("a", type=int, nargs="?", default=1256)
    parser.add_argument("b", type=int, nargs="?", default=847)
    parser.add_argument("c", type=int, nargs="?", default=119)
    args = parser.parse_args(argv)

    print(f"{args.a}a + {args.b}b = {args.c}")
    try:
        solution = solve_diophantine(args.a, args.b, args.c)
    except (ValueError, ZeroDivisionError) as err:
        print(f"Cannot solve: {err}", file=sys.stderr)
        return 1
    if solution is None:
        print("No solutions.")
    else:
        print(solution.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())