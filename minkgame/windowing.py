"""The game window."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minkgame.vectors import Vec2  # noqa: E402


def _window_size(value) -> tuple[int, int]:
    width, height = value
    return max(1, int(width)), max(1, int(height))


class Window:
    """The display window: title, size and resizability."""

    def __init__(self, title: str = "Mink", size=(800, 600)) -> None:
        if not pygame.display.get_init():
            pygame.display.init()
        self._title = str(title)
        self._resizable = True
        self._open(_window_size(size))

    def _open(self, size: tuple[int, int]) -> None:
        flags = pygame.RESIZABLE if self._resizable else 0
        pygame.display.set_mode(size, flags)
        pygame.display.set_caption(self._title)

    @property
    def surface(self) -> pygame.Surface:
        return pygame.display.get_surface()

    def resizable(self) -> bool:
        return self._resizable

    def set_resizable(self, value: bool) -> None:
        self._resizable = bool(value)
        self._open(self.surface.get_size())

    def size(self) -> Vec2:
        width, height = self.surface.get_size()
        return Vec2(width, height)

    def set_size(self, value) -> None:
        self._open(_window_size(value))

    def title(self) -> str:
        caption = pygame.display.get_caption()
        return caption[0] if caption else self._title

    def set_title(self, title: str) -> None:
        self._title = str(title)
        pygame.display.set_caption(self._title)