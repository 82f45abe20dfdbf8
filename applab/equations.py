"""Sample equations and their derivatives for exercising the root finders."""

from __future__ import annotations

import math


def func1(x: float) -> float:
    """The trigonometric test equation."""
    return 0.76 * x * math.sin(30.0 * x / 52.0) * math.tan(10.0 * x / 47.0) + (
        2.9 * math.cos(x + 2.5) * math.sin(0.39 * (1.5 + x))
    )


def func1_deriv(x: float) -> float:
    """First derivative of :func:`func1`."""
    s = math.sin(30.0 * x / 52.0)
    c = math.cos(30.0 * x / 52.0)
    t = math.tan(10.0 * x / 47.0)
    sec = math.cos(10.0 * x / 47.0)
    return (
        0.76 * s * t
        + (0.76 * 30.0 / 52.0) * x * c * t
        + (0.76 * 10.0 / 47.0) * x * s * (1.0 / (sec * sec))
        - 2.9 * math.sin(x + 2.5) * math.sin(0.39 * (x + 1.5))
        + 2.9 * 0.39 * math.cos(0.39 * (x + 1.5)) * math.cos(x + 2.5)
    )


def cubic(x: float) -> float:
    """The cubic 0.02x^3 - 0.75x^2 - 52.2x + 1909 in Horner form.

    Its roots are near 35.687256, 52.632141 and -50.809979.
    """
    return ((0.02 * x - 0.75) * x - 52.2) * x + 1909.0


def cubic_deriv(x: float) -> float:
    """First derivative of :func:`cubic`."""
    return (0.06 * x - 1.5) * x - 52.2