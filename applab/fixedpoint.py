"""Qn fixed-point conversions and arithmetic, with a conversion demo."""

from __future__ import annotations

import sys
from collections.abc import Sequence

QN = 23
INT_BITS = 32


def to_fixed(x: float, q: int = QN) -> int:
    """Convert ``x`` to Qn with ``q`` fractional bits, truncating toward zero."""
    return int(x * (1 << q))


def to_float(n: int, q: int = QN) -> float:
    """Convert the Qn value ``n`` back to a float."""
    return n / (1 << q)


def qn_multiply(a: int, b: int, q: int = QN) -> int:
    """Multiply two Qn values; the product is shifted right by ``q`` bits."""
    return (a * b) >> q


def qn_divide(a: int, b: int, q: int = QN) -> int:
    """Divide two Qn values, truncating the quotient toward zero."""
    numerator = a << q
    quotient = abs(numerator) // abs(b)
    return quotient if (numerator >= 0) == (b > 0) else -quotient


def binary_string(num: int, bits: int = 16) -> str:
    """Return the low ``bits`` bits of ``num`` as ``[0101...]``."""
    if bits < 1:
        raise ValueError("bits must be at least 1")
    digits = "".join("1" if num & (1 << i) else "0" for i in reversed(range(bits)))
    return f"[{digits}]"


def main(argv: Sequence[str] | None = None) -> int:
    """Show floating-point limits and a few Qn conversions."""
    epsilon = sys.float_info.epsilon
    print(f"Integers are {INT_BITS} bits long")

    print("\nProving floating point has limits by adding Epsilon")
    value = 10.0
    result = value + epsilon
    if value == result:
        print(
            f"Epsilon value '{epsilon:.15e}' didn't add to 10.0, "
            "proving floating point limits."
        )
    else:
        print(
            f"Epsilon value '{epsilon:.15e}' added to 10.0 successfully, "
            f"result: {result:.15e}"
        )

    print("\nConversion test")
    for number, q, digits in ((0.0, 0, 2), (12.25, 3, 2), (12.0625, 3, 4), (12.0625, 4, 4)):
        fixed = to_fixed(number, q)
        back = to_float(fixed, q)
        print(
            f"Started with {number:.{digits}f} converted to Qn{q} = {fixed} "
            f"decimal then back to {back:.{digits}f}"
        )
        print(f"Qn{q} {fixed} decimal in binary is {binary_string(fixed, 16)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())