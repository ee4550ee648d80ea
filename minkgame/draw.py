"""Batched sprite drawing onto a surface."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402

from minkgame.assets import Texture  # noqa: E402
from minkgame.camera import Camera, build_matrix  # noqa: E402
from minkgame.colors import Color  # noqa: E402
from minkgame.matrices import model_matrix  # noqa: E402
from minkgame.vectors import Vec2  # noqa: E402

# Corners of the unit quad every sprite is drawn from, in local coordinates.
_QUAD_CORNERS = np.array([[-0.5, -0.5], [0.5, -0.5], [0.5, 0.5], [-0.5, 0.5]])


@dataclass
class DrawInstance:
    """One sprite to draw: camera matrix, model matrix and tint."""

    camera: np.ndarray
    model: np.ndarray
    color: Color

    def matrix(self) -> np.ndarray:
        """The combined matrix taking quad coordinates to clip space."""
        return self.camera @ self.model


@dataclass
class DrawBatch:
    """Instances sharing one texture, kept alive for a few idle frames."""

    LIFETIME = 10

    label: str
    texture: Texture
    instances: list[DrawInstance] = field(default_factory=list)
    lifetime: int = LIFETIME

    def __post_init__(self) -> None:
        self.instances = list(self.instances)

    @property
    def count(self) -> int:
        return len(self.instances)

    def add(self, instance: DrawInstance) -> None:
        self.instances.append(instance)

    def write(self) -> list[DrawInstance]:
        """Take the queued instances and refresh or age the batch's lifetime."""
        written, self.instances = self.instances, []
        if written:
            self.lifetime = self.LIFETIME
        elif self.lifetime > 0:
            self.lifetime -= 1
        return written


class Batcher:
    """Groups draw instances into batches by identifier."""

    def __init__(self) -> None:
        self.batches: dict[str, DrawBatch] = {}

    def add(self, batch_id: str, texture: Texture, instance: DrawInstance) -> None:
        batch = self.batches.get(batch_id)
        if batch is None:
            self.batches[batch_id] = DrawBatch(batch_id, texture, [instance])
        else:
            batch.add(instance)

    def cleanup(self) -> None:
        """Drop batches that have gone unused for their whole lifetime."""
        self.batches = {
            batch_id: batch for batch_id, batch in self.batches.items() if batch.lifetime != 0
        }


@dataclass
class _TexelData:
    rgb: np.ndarray
    alpha: np.ndarray

    @classmethod
    def of(cls, surface: pygame.Surface) -> _TexelData:
        rgb = pygame.surfarray.array3d(surface).astype(float) / 255.0
        alpha = pygame.surfarray.array_alpha(surface).astype(float) / 255.0
        return cls(rgb, alpha)


def _composite(target: pygame.Surface, texels: _TexelData, instance: DrawInstance) -> None:
    width, height = target.get_size()
    matrix = instance.matrix()

    to_screen = np.diag([width / 2.0, -height / 2.0])
    linear = to_screen @ matrix[:2, :2]
    offset = to_screen @ matrix[:2, 3] + np.array([width / 2.0, height / 2.0])

    determinant = np.linalg.det(linear)
    if not math.isfinite(determinant) or abs(determinant) < 1e-12:
        return

    corners = _QUAD_CORNERS @ linear.T + offset
    x0 = max(0, math.floor(corners[:, 0].min()))
    x1 = min(width, math.ceil(corners[:, 0].max()))
    y0 = max(0, math.floor(corners[:, 1].min()))
    y1 = min(height, math.ceil(corners[:, 1].max()))
    if x0 >= x1 or y0 >= y1:
        return

    inverse = np.linalg.inv(linear)
    grid_x, grid_y = np.meshgrid(
        np.arange(x0, x1) + 0.5 - offset[0],
        np.arange(y0, y1) + 0.5 - offset[1],
        indexing="ij",
    )
    local_x = inverse[0, 0] * grid_x + inverse[0, 1] * grid_y
    local_y = inverse[1, 0] * grid_x + inverse[1, 1] * grid_y
    inside = (np.abs(local_x) <= 0.5) & (np.abs(local_y) <= 0.5)
    if not inside.any():
        return

    texture_w, texture_h = texels.alpha.shape
    tx = np.clip(np.floor((local_x + 0.5) * texture_w).astype(np.intp), 0, texture_w - 1)
    ty = np.clip(np.floor((0.5 - local_y) * texture_h).astype(np.intp), 0, texture_h - 1)

    tint = instance.color
    source_rgb = texels.rgb[tx, ty] * np.array([tint.r, tint.g, tint.b]) * 255.0
    source_alpha = np.clip(texels.alpha[tx, ty] * tint.a, 0.0, 1.0) * inside
    source_alpha = source_alpha[..., np.newaxis]

    pixels = pygame.surfarray.array3d(target).astype(float)
    region = pixels[x0:x1, y0:y1]
    pixels[x0:x1, y0:y1] = source_rgb * source_alpha + region * (1.0 - source_alpha)
    pygame.surfarray.blit_array(target, np.clip(np.rint(pixels), 0, 255).astype(np.uint8))


class Draw:
    """Queues sprites during a frame and renders them on submit."""

    def __init__(self, viewport_size=(1, 1)) -> None:
        width, height = viewport_size
        self.viewport_size = Vec2(width, height)
        self.default_camera: np.ndarray = np.identity(4)
        self.current_camera: Optional[np.ndarray] = None
        self.batcher = Batcher()

    def begin_frame(self, viewport_size) -> None:
        """Adopt the frame's viewport size and rebuild the default camera."""
        width, height = viewport_size
        self.viewport_size = Vec2(width, height)
        self.default_camera = build_matrix(self.viewport_size, (0.0, 0.0), 0.0, 1.0)

    def set_camera(self, camera: Optional[Camera]) -> None:
        """Draw with ``camera`` from now on, or with the default camera if None."""
        self.current_camera = None if camera is None else camera.matrix(self.viewport_size)

    def sprite(
        self,
        texture: Texture,
        position,
        rotation: Optional[float] = None,
        scale: Optional[Vec2] = None,
        tint: Optional[Color] = None,
    ) -> None:
        camera = self.default_camera if self.current_camera is None else self.current_camera
        size = texture.size * (Vec2.ONE if scale is None else scale)
        instance = DrawInstance(
            camera=camera,
            model=model_matrix(position, 0.0 if rotation is None else rotation, size),
            color=Color.WHITE if tint is None else tint,
        )
        self.batcher.add(texture.path, texture, instance)

    def submit(self, target: pygame.Surface) -> None:
        """Render every queued sprite onto ``target`` and age idle batches."""
        for batch in self.batcher.batches.values():
            instances = batch.write()
            if not instances:
                continue
            texels = _TexelData.of(batch.texture.surface)
            for instance in instances:
                _composite(target, texels, instance)
        self.batcher.cleanup()