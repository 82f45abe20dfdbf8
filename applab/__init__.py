"""Qn fixed-point arithmetic, integer square roots, sample equations, word containers and CPU timers."""

__version__ = "0.1.0"