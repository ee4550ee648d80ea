"""Conversions between linear amplitude and decibels."""

import math


def linear_to_db(value: float) -> float:
    """Convert a linear gain to decibels; non-positive gains give -inf."""
    if value > 0:
        return 20.0 * math.log10(value)
    return -math.inf


def db_to_linear(value: float) -> float:
    """Convert decibels to a linear gain; -inf gives 0."""
    if value == -math.inf:
        return 0.0
    return 10.0 ** (value / 20.0)