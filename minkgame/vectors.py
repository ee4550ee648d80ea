"""Two-dimensional vectors for positions, sizes and directions."""

from __future__ import annotations

import math
import numbers
from typing import Iterator, Union

Scalar = Union[int, float]


def _format_component(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value)) if value != 0 or math.copysign(1.0, value) > 0 else "-0"
    return repr(value)


def _divide(numerator: float, denominator: float) -> float:
    """Divide like IEEE floats do, yielding inf or nan instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Vec2:
    """A mutable 2D vector with component-wise arithmetic."""

    __slots__ = ("x", "y")

    ZERO: Vec2
    ONE: Vec2
    UP: Vec2
    DOWN: Vec2
    LEFT: Vec2
    RIGHT: Vec2

    def __init__(self, x: Scalar, y: Scalar) -> None:
        self.x = float(x)
        self.y = float(y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Return a unit vector in the same direction, or zero if that is impossible."""
        length = self.length()
        if length > 0 and math.isfinite(length):
            result = Vec2(self.x / length, self.y / length)
            if math.isfinite(result.x) and math.isfinite(result.y):
                return result
        return Vec2(0.0, 0.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"[{_format_component(self.x)}, {_format_component(self.y)}]"

    __repr__ = __str__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, rhs: Vec2) -> Vec2:
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, rhs: Vec2) -> Vec2:
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self, rhs: Vec2 | Scalar) -> Vec2:
        if isinstance(rhs, Vec2):
            return Vec2(self.x * rhs.x, self.y * rhs.y)
        if isinstance(rhs, numbers.Real):
            return Vec2(self.x * rhs, self.y * rhs)
        return NotImplemented

    def __imul__(self, rhs: Vec2 | Scalar) -> Vec2:
        product = self.__mul__(rhs)
        if product is NotImplemented:
            return NotImplemented
        self.x, self.y = product.x, product.y
        return self

    def __truediv__(self, rhs: Vec2 | Scalar) -> Vec2:
        if isinstance(rhs, Vec2):
            return Vec2(_divide(self.x, rhs.x), _divide(self.y, rhs.y))
        if isinstance(rhs, numbers.Real):
            divisor = float(rhs)
            return Vec2(_divide(self.x, divisor), _divide(self.y, divisor))
        return NotImplemented

    def __itruediv__(self, rhs: Vec2 | Scalar) -> Vec2:
        quotient = self.__truediv__(rhs)
        if quotient is NotImplemented:
            return NotImplemented
        self.x, self.y = quotient.x, quotient.y
        return self

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.UP = Vec2(0.0, 1.0)
Vec2.DOWN = Vec2(0.0, -1.0)
Vec2.LEFT = Vec2(-1.0, 0.0)
Vec2.RIGHT = Vec2(1.0, 0.0)