"""Fibonacci numbers and a small demonstration command."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def main(argv: Sequence[str] | None = None) -> int:
    """Print a banner and the Fibonacci numbers for 0 to 5."""
    print("CMPE380 Makefile Example!")
    for i in range(6):
        print(f"MyFib({i}):{fib(i)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())