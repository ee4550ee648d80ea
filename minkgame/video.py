"""The frame target sprites are rendered into and presented from."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minkgame.draw import Draw  # noqa: E402


class VideoStack:
    """Owns the off-screen render target and presents it to the display."""

    CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)

    def __init__(self, size) -> None:
        width, height = size
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        self.target = self._make_target()

    def _make_target(self) -> pygame.Surface:
        return pygame.Surface((self.width, self.height))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def clear_rgb(self) -> tuple[int, int, int]:
        return tuple(round(channel * 255) for channel in self.CLEAR_COLOR[:3])

    def resize(self, size) -> None:
        """Resize the target; sizes with a zero dimension are ignored."""
        width, height = (int(value) for value in size)
        if width == 0 or height == 0:
            return
        self.width, self.height = width, height
        self.target = self._make_target()

    def submit(self, draw: Draw) -> None:
        """Clear, render the queued sprites and present the frame."""
        self.target.fill(self.clear_rgb)
        draw.submit(self.target)

        if not pygame.display.get_init():
            return
        display = pygame.display.get_surface()
        if display is None:
            return
        display.blit(self.target, (0, 0))
        pygame.display.flip()