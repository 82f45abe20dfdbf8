"""Qn arithmetic experiments: division, multiplication, a polynomial and timing."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import NamedTuple

from .fixedpoint import qn_divide, qn_multiply, to_fixed, to_float

LOOP_DELAY = 1 << 27
DEMO_Q = 18


class DivisionRow(NamedTuple):
    """One step of repeated halving in float, plain integer and Qn division."""

    fnum: float
    qnum1: int
    qnum2: int
    qnum1_float: float
    qnum2_float: float


class Multiplication(NamedTuple):
    """A float product next to the same product computed in Qn."""

    float_product: float
    qn_product: int
    converted_back: float


class PolynomialResults(NamedTuple):
    """x^3 - 0.0001x^2 - 676x + 0.0676 evaluated three ways."""

    floating: float
    fractional: float
    qn_value: int
    qn_float: float


class Performance(NamedTuple):
    """CPU seconds spent on float and Qn addition and multiplication loops."""

    float_add: float
    qn_add: float
    float_mul: float
    qn_mul: float

    @property
    def faster_addition(self) -> str:
        return "Floating-point" if self.float_add < self.qn_add else "Qn"

    @property
    def faster_multiplication(self) -> str:
        return "Floating-point" if self.float_mul < self.qn_mul else "Qn"


def _int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _halve(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def division_table(value: float, q: int = DEMO_Q) -> list[DivisionRow]:
    """Halve ``value`` repeatedly until its plain-integer Qn form reaches zero.

    The second Qn column divides by the raw integer 2 through the Qn divide,
    which scales instead of halving and wraps at 32 bits.
    """
    qnum1 = _int32(to_fixed(value, q))
    qnum2 = qnum1
    fnum = value
    rows: list[DivisionRow] = []
    while qnum1 != 0:
        fnum /= 2.0
        qnum1 = _halve(qnum1)
        qnum2 = _int32(qn_divide(qnum2, 2, q))
        rows.append(DivisionRow(fnum, qnum1, qnum2, to_float(qnum1, q), to_float(qnum2, q)))
    return rows


def multiplication_result(a: float, b: float, q: int = DEMO_Q) -> Multiplication:
    """Multiply ``a`` and ``b`` in float and in 32-bit Qn."""
    qa = _int32(to_fixed(a, q))
    qb = _int32(to_fixed(b, q))
    product = _int32(qn_multiply(qa, qb, q))
    return Multiplication(a * b, product, to_float(product, q))


def polynomial_results(x: float, q: int = DEMO_Q) -> PolynomialResults:
    """Evaluate the cubic in decimal floats, in fractions and in 32-bit Qn."""
    floating = ((x - 0.0001) * x - 676) * x + 0.0676
    fractional = ((x - 1.0 / 10000) * x - 676) * x + 169.0 / 2500

    qn_x = _int32(to_fixed(x, q))
    coeff2 = _int32(to_fixed(-0.0001, q))
    coeff0 = _int32(to_fixed(0.0676, q))
    square = qn_multiply(qn_x, qn_x, q)
    result = _int32(qn_multiply(qn_x, square, q))
    result = _int32(result + qn_multiply(square, coeff2, q))
    result = _int32(result - qn_multiply(_int32(to_fixed(676, q)), qn_x, q))
    result = _int32(result + coeff0)
    return PolynomialResults(floating, fractional, result, to_float(result, q))


def performance_comparison(loops: int = LOOP_DELAY) -> Performance:
    """Time ``loops`` float and Qn additions and multiplications."""
    if loops < 0:
        raise ValueError("loops must not be negative")
    fnum2 = -674.9325
    qnum2 = _int32(to_fixed(fnum2, DEMO_Q))

    fnum1 = 3.1415
    start = time.process_time()
    for _ in range(loops):
        fnum1 += fnum2
    float_add = time.process_time() - start

    qnum1 = _int32(to_fixed(3.1415, DEMO_Q))
    start = time.process_time()
    for _ in range(loops):
        qnum1 = _int32(qnum1 + qnum2)
    qn_add = time.process_time() - start

    fnum1 = 3.1415
    start = time.process_time()
    for _ in range(loops):
        fnum1 *= fnum2
    float_mul = time.process_time() - start

    qnum1 = _int32(to_fixed(3.1415, DEMO_Q))
    start = time.process_time()
    for _ in range(loops):
        qnum1 = _int32(qn_multiply(qnum1, qnum2, DEMO_Q))
    qn_mul = time.process_time() - start

    return Performance(float_add, qn_add, float_mul, qn_mul)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the division, multiplication, polynomial and timing experiments."""
    parser = argparse.ArgumentParser(prog="qn_demo")
    parser.add_argument("loops", nargs="?", type=int, default=LOOP_DELAY)
    options = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    print("Division test")
    print("fnum        qnum1 (dec)  qnum2 (dec)  qnum1 (float)  qnum2 (float)")
    for row in division_table(-0.0625, DEMO_Q):
        print(
            f"{row.fnum:<10f}  {row.qnum1:<12d}  {row.qnum2:<12d}  "
            f"{row.qnum1_float:<13f}  {row.qnum2_float:<13f}"
        )

    print("Multiplication test")
    mult = multiplication_result(64.125, 0.755, DEMO_Q)
    print(
        f"Product= {mult.float_product:f} float  qnx product= {mult.qn_product} dec, "
        f"converted back {mult.converted_back:f} float"
    )
    print()

    print("\nComplex calculations test")
    print()
    poly = polynomial_results(1.0, DEMO_Q)
    print("Floating-point test")
    print(f"Product= {poly.floating:f} float")
    print()
    print("Fractional test")
    print(f"Product= {poly.fractional:f} float")
    print()
    print("Qn test")
    print()
    print(f"Floating-point result: {poly.floating:f}")
    print(f"Qn product (decimal): {poly.qn_value}")
    print(f"Converted back to float: {poly.qn_float:f}")
    print()
    print(
        f"Product= {poly.floating:f} float qnx product= {poly.qn_value} dec, "
        f"converted back {poly.qn_float:f} float"
    )
    print()

    print("\nPerformance test")
    print()
    perf = performance_comparison(options.loops)
    print(f"Floating-point addition took {perf.float_add:.6f} seconds.")
    print(f"Qn addition took {perf.qn_add:.6f} seconds.")
    print(f"Faster operation for addition: {perf.faster_addition}")
    print()
    print(f"Floating-point multiplication took {perf.float_mul:.6f} seconds.")
    print(f"Qn multiplication took {perf.qn_mul:.6f} seconds.")
    print(f"Faster operation for multiplication: {perf.faster_multiplication}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())