"""Loading textures, sounds and music from an asset directory."""

from __future__ import annotations

import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minkgame.sounds import Music, Sound  # noqa: E402
from minkgame.vectors import Vec2  # noqa: E402


@dataclass(frozen=True, eq=False)
class Texture:
    """An image loaded for drawing, identified by its asset path."""

    path: str
    surface: pygame.Surface
    size: Vec2


class Assets:
    """Loads assets relative to a root directory."""

    def __init__(self, root: str = "assets") -> None:
        self.root = root

    def set_root(self, path: str) -> None:
        self.root = path

    def resolve_path(self, path: str) -> str:
        return f"{self.root}/{path}"

    def _load_audio(self, path: str, kind: str) -> pygame.mixer.Sound:
        filepath = self.resolve_path(path)
        try:
            return pygame.mixer.Sound(filepath)
        except (pygame.error, OSError) as exc:
            raise OSError(f"Failed to load {kind}: {filepath}") from exc

    def music(self, path: str) -> Music:
        return Music(self._load_audio(path, "music"))

    def sound(self, path: str) -> Sound:
        return Sound(self._load_audio(path, "sound"))

    def texture(self, path: str) -> Texture:
        filepath = self.resolve_path(path)
        try:
            image = pygame.image.load(filepath)
        except (pygame.error, OSError) as exc:
            raise OSError(f"Failed to load image: {filepath}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        width, height = image.get_size()
        return Texture(path=path, surface=image, size=Vec2(width, height))