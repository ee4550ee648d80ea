"""2D orthographic camera."""

from __future__ import annotations

from typing import Optional

import numpy as np

from minkgame.matrices import Affine2, look_to_lh, orthographic_lh, rotation_z
from minkgame.vectors import Vec2

_MIN_ZOOM = 0.00000001
_NEAR = 0.001
_FAR = 1000.0


def _clamped_zoom(zoom: float) -> float:
    return zoom if zoom > _MIN_ZOOM else _MIN_ZOOM


def build_matrix(size, position, rotation: float, zoom: float) -> np.ndarray:
    """The combined projection and view matrix for a camera."""
    width, height = size
    px, py = position
    view = rotation_z(rotation) @ look_to_lh((px, py, -1.0), (0.0, 0.0, 1.0), (0.0, 1.0, 0.0))

    factor = 1.0 / _clamped_zoom(zoom)
    width, height = width * factor, height * factor

    projection = orthographic_lh(
        -width / 2.0, width / 2.0, -height / 2.0, height / 2.0, _NEAR, _FAR
    )
    return projection @ view


class Camera:
    """A camera with an optional fixed view size, position, rotation and zoom."""

    def __init__(self) -> None:
        self.size: Optional[Vec2] = None
        self.position: Vec2 = Vec2(0.0, 0.0)
        self.rotation: float = 0.0
        self.zoom: float = 1.0

    def _view_size(self, viewport_size) -> tuple[float, float]:
        if self.size is not None:
            return self.size.x, self.size.y
        width, height = viewport_size
        return float(width), float(height)

    def matrix(self, viewport_size) -> np.ndarray:
        return build_matrix(
            self._view_size(viewport_size), self.position, self.rotation, self.zoom
        )

    def world_to_screen_transform(self, viewport_size) -> Affine2:
        viewport_w, viewport_h = viewport_size
        width, height = self._view_size(viewport_size)
        factor = 1.0 / _clamped_zoom(self.zoom)
        width, height = width * factor, height * factor

        scale = (viewport_w / width, -viewport_h / height)
        return (
            Affine2.translation((viewport_w / 2.0, viewport_h / 2.0))
            @ Affine2.scale(scale)
            @ Affine2.rotation(self.rotation)
            @ Affine2.translation(-self.position)
        )

    def screen_to_world_transform(self, viewport_size) -> Affine2:
        return self.world_to_screen_transform(viewport_size).inverse()

    def project(self, position, window_size) -> Vec2:
        """Map a screen position to world space."""
        return self.screen_to_world_transform(window_size).transform_point(position)

    def unproject(self, position, window_size) -> Vec2:
        """Map a world position to screen space."""
        return self.world_to_screen_transform(window_size).transform_point(position)