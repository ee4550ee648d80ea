"""Matrix helpers for 2D transforms and 4x4 camera/model matrices.

4x4 matrices are numpy arrays that act on column vectors: ``m @ v``.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from minkgame.vectors import Vec2


def _pair(value: Vec2 | Iterable[float]) -> np.ndarray:
    x, y = value
    return np.array([float(x), float(y)])


def _triple(value: Iterable[float]) -> np.ndarray:
    x, y, z = value
    return np.array([float(x), float(y), float(z)])


class Affine2:
    """A 2D affine transform: a 2x2 linear part plus an offset."""

    __slots__ = ("linear", "offset")

    def __init__(self, linear=None, offset=None) -> None:
        self.linear = (
            np.identity(2) if linear is None else np.array(linear, dtype=float).reshape(2, 2)
        )
        self.offset = np.zeros(2) if offset is None else np.array(offset, dtype=float).reshape(2)

    @classmethod
    def translation(cls, offset) -> Affine2:
        return cls(np.identity(2), _pair(offset))

    @classmethod
    def scale(cls, factors) -> Affine2:
        return cls(np.diag(_pair(factors)), np.zeros(2))

    @classmethod
    def rotation(cls, angle: float) -> Affine2:
        c, s = np.cos(angle), np.sin(angle)
        return cls([[c, -s], [s, c]], np.zeros(2))

    def __matmul__(self, other: Affine2) -> Affine2:
        if not isinstance(other, Affine2):
            return NotImplemented
        return Affine2(self.linear @ other.linear, self.linear @ other.offset + self.offset)

    def inverse(self) -> Affine2:
        try:
            inverse_linear = np.linalg.inv(self.linear)
        except np.linalg.LinAlgError as exc:
            raise ValueError("transform is not invertible") from exc
        return Affine2(inverse_linear, -(inverse_linear @ self.offset))

    def transform_point(self, point) -> Vec2:
        x, y = self.linear @ _pair(point) + self.offset
        return Vec2(x, y)

    def __repr__(self) -> str:
        return f"Affine2(linear={self.linear.tolist()}, offset={self.offset.tolist()})"


def rotation_z(angle: float) -> np.ndarray:
    """A 4x4 rotation about the Z axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _translation(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def model_matrix(position, rotation: float, size) -> np.ndarray:
    """Translate, rotate about Z and scale, applied to a unit quad."""
    px, py = _pair(position)
    sx, sy = _pair(size)
    return _translation(px, py, 0.0) @ rotation_z(rotation) @ np.diag([sx, sy, 1.0, 1.0])


def look_to_lh(eye, direction, up) -> np.ndarray:
    """A left-handed view matrix looking from ``eye`` along ``direction``."""
    eye = _triple(eye)
    forward = _triple(direction)
    forward = forward / np.linalg.norm(forward)
    side = np.cross(_triple(up), forward)
    side = side / np.linalg.norm(side)
    upward = np.cross(forward, side)
    return np.array(
        [
            [*side, -side @ eye],
            [*upward, -upward @ eye],
            [*forward, -forward @ eye],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def orthographic_lh(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """A left-handed orthographic projection with depth mapped to 0..1."""
    rcp_width = 1.0 / (right - left)
    rcp_height = 1.0 / (top - bottom)
    rcp_depth = 1.0 / (far - near)
    return np.array(
        [
            [2.0 * rcp_width, 0.0, 0.0, -(left + right) * rcp_width],
            [0.0, 2.0 * rcp_height, 0.0, -(top + bottom) * rcp_height],
            [0.0, 0.0, rcp_depth, -rcp_depth * near],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )