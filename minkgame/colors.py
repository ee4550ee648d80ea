"""RGBA colours with HSV construction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(repr=False)
class Color:
    """A colour with float channels, normally in the range 0 to 1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        return cls(float(r), float(g), float(b), 1.0)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(float(r), float(g), float(b), float(a))

    @classmethod
    def hsv(cls, h: float, s: float, v: float) -> Color:
        return cls.hsva(h, s, v, 1.0)

    @classmethod
    def hsva(cls, h: float, s: float, v: float, a: float) -> Color:
        """Build a colour from hue in degrees, saturation and value."""
        h = float(h) % 360.0

        c = v * s
        x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
        m = v - c

        if 0.0 <= h < 60.0:
            r, g, b = c, x, 0.0
        elif 60.0 <= h < 120.0:
            r, g, b = x, c, 0.0
        elif 120.0 <= h < 180.0:
            r, g, b = 0.0, c, x
        elif 180.0 <= h < 240.0:
            r, g, b = 0.0, x, c
        elif 240.0 <= h < 300.0:
            r, g, b = x, 0.0, c
        elif 300.0 <= h < 360.0:
            r, g, b = c, 0.0, x
        else:
            r, g, b = 0.0, 0.0, 0.0

        return cls(r + m, g + m, b + m, float(a))

    def as_array(self) -> list[float]:
        return [self.r, self.g, self.b, self.a]

    def __str__(self) -> str:
        return f"Color({self.r:.2f}, {self.g:.2f}, {self.b:.2f}, {self.a:.2f})"

    __repr__ = __str__


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.CYAN = Color(0.0, 1.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0)