"""Arithmetic helpers that keep the numeric type of their inputs."""

import math


def add(a, b):
    """Return the sum of two numbers."""
    return a + b


def sqrt(a):
    """Return the square root of ``a``, or zero when ``a`` is negative.

    An integer argument gives an integer result, truncated toward zero.
    """
    if a < 0:
        return type(a)(0)
    root = math.sqrt(a)
    return int(root) if isinstance(a, int) else root