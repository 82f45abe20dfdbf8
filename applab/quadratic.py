"""Integer and Qn square roots, and quadratic roots in float and Qn form."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence
from typing import NamedTuple

from .fixedpoint import qn_divide, qn_multiply, to_fixed, to_float

_RANDOM_CHECKS = 1000
_CHECK_LIMIT = 1e-4


class Roots(NamedTuple):
    """The two roots of a quadratic, computed in floating point and in Qn."""

    floating: tuple[float, float]
    fixed: tuple[float, float]


def _int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    return ((value + 2**31) % 2**32) - 2**31


def i_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed ``n``.

    Uses a Newton iteration that starts above the root and stops as soon as
    the estimate no longer decreases. Raises ValueError for negative input.
    """
    if n < 0:
        raise ValueError(f"i_sqrt works for only non-negative inputs {n}")
    if n < 2:
        return n
    x0 = n >> 1
    x1 = (x0 + n // x0) >> 1
    while x1 < x0:
        x0 = x1
        x1 = (x0 + n // x0) >> 1
    return x0


def q_sqrt(n: int, q: int) -> int:
    """Return the Qn square root of the Qn value ``n`` with ``q`` fraction bits.

    The first estimate is ``n / 2``; the iteration stops once the estimate
    stops decreasing, so inputs below 4.0 return that first estimate.
    Raises ValueError for negative input.
    """
    if n < 0:
        raise ValueError(f"q_sqrt works for only non-negative inputs {n}")
    if n < 2:
        return n
    x0 = n >> 1
    x1 = _int32(x0 + _int32(qn_divide(n, x0, q))) >> 1
    while x1 < x0:
        x0 = x1
        x1 = _int32(x0 + _int32(qn_divide(n, x0, q))) >> 1
    return x0


def find_roots(a: float, b: float, c: float, qn: int) -> Roots:
    """Solve ``a*x^2 + b*x + c = 0`` in floating point and in Qn arithmetic.

    Raises ValueError when the discriminant is negative.
    """
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        raise ValueError("complex roots are not supported")
    root = math.sqrt(discriminant)
    floating = ((-b + root) / (2 * a), (-b - root) / (2 * a))

    qn_a = _int32(to_fixed(a, qn))
    qn_b = _int32(to_fixed(b, qn))
    qn_c = _int32(to_fixed(c, qn))
    four = _int32(to_fixed(4, qn))
    two = _int32(to_fixed(2, qn))

    qn_disc = _int32(
        qn_multiply(qn_b, qn_b, qn) - qn_multiply(four, qn_multiply(qn_a, qn_c, qn), qn)
    )
    qn_root = q_sqrt(qn_disc, qn)
    denominator = qn_multiply(two, qn_a, qn)
    plus = _int32(qn_divide(_int32(-qn_b + qn_root), denominator, qn))
    minus = _int32(qn_divide(_int32(-qn_b - qn_root), denominator, qn))
    return Roots(floating, (to_float(plus, qn), to_float(minus, qn)))


def _show_sqrt(value: float, q: int) -> None:
    print(
        f"value {value:f} float square root {math.sqrt(value):f}  "
        f"i_sqrt {i_sqrt(int(value))} ",
        end="",
    )
    print(f"q_sqrt {to_float(q_sqrt(to_fixed(value, q), q), q):f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise the square roots and solve x^2 + 10x + 23 both ways."""
    for q, value in ((0, 16.0), (16, 23425.0), (16, 0.0), (16, 0.5)):
        _show_sqrt(value, q)

    q = 16
    rng = random.Random(1)
    for _ in range(_RANDOM_CHECKS):
        value = rng.random() * 1000.0
        exact = math.sqrt(value)
        approx = to_float(q_sqrt(to_fixed(value, q), q), q)
        if exact and abs(approx - exact) / exact > _CHECK_LIMIT:
            print(f"Error: Value {value:f} float square root {exact:f}  ", end="")
            print(f"q_sqrt {approx:f}")
    print("automated testing complete")

    a, b, c, qn = 1.0, 10.0, 23.0, 12
    roots = find_roots(a, b, c, qn)
    print(
        f"The floating point roots of {a:f}x^2 + {b:f}x + {c:f} are "
        f"{roots.floating[0]:f} {roots.floating[1]:f}"
    )
    print(
        f"The Qn {qn} roots of {a:f}x^2 + {b:f}x + {c:f} are "
        f"{roots.fixed[0]:f} {roots.fixed[1]:f}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())