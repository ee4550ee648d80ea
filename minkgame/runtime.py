"""The game loop: the window, the engine services and the game's callbacks.

While a game runs, the services it uses are published as the module-level
names ``assets``, ``audio``, ``draw``, ``input``, ``stats``, ``time`` and
``window``. They are None when no game is running.
"""

from __future__ import annotations

import os
import time as _clock
from typing import Callable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minkgame.assets import Assets  # noqa: E402
from minkgame.draw import Draw  # noqa: E402
from minkgame.input import Input, key_code_name, mouse_button_name  # noqa: E402
from minkgame.sounds import Audio  # noqa: E402
from minkgame.timing import Time  # noqa: E402
from minkgame.video import VideoStack  # noqa: E402
from minkgame.windowing import Window  # noqa: E402

Callback = Callable[[], object]

WINDOW_TITLE = "Mink"

# Wheel motion also arrives as button events; it is reported as scrolling instead.
_WHEEL_BUTTONS = frozenset({4, 5})

assets: Optional[Assets] = None
audio: Optional[Audio] = None
draw: Optional[Draw] = None
input: Optional[Input] = None  # noqa: A001
stats: Optional["Stats"] = None
time: Optional[Time] = None
window: Optional[Window] = None


class Stats:
    """Engine statistics available to the game."""

    __slots__ = ()


def _publish(runtime: Runtime) -> None:
    global assets, audio, draw, input, stats, time, window
    assets = runtime.assets
    audio = runtime.audio
    draw = runtime.draw
    input = runtime.input  # noqa: A001
    stats = runtime.stats
    time = runtime.time
    window = runtime.window


def _reset_globals() -> None:
    global assets, audio, draw, input, stats, time, window
    assets = audio = draw = input = stats = time = window = None  # noqa: A001


class Runtime:
    """Drives the game: sets up services, dispatches events and renders frames."""

    def __init__(
        self,
        init: Callback,
        load: Callback,
        update: Callback,
        draw: Callback,
        exit: Callback,
    ) -> None:
        self._init_fn = init
        self._load_fn = load
        self._update_fn = update
        self._draw_fn = draw
        self._exit_fn = exit

        self.last_frame = _clock.perf_counter()
        self.exit_requested = False

        self.window: Optional[Window] = None
        self.video: Optional[VideoStack] = None
        self.assets: Optional[Assets] = None
        self.audio: Optional[Audio] = None
        self.draw: Optional[Draw] = None
        self.input: Optional[Input] = None
        self.stats: Optional[Stats] = None
        self.time: Optional[Time] = None

    def resume(self) -> None:
        """Open the window, create the services, publish them and start the game."""
        game_window = Window(WINDOW_TITLE)
        video = VideoStack(game_window.size())

        self.window = game_window
        self.video = video
        self.assets = Assets()
        self.audio = Audio()
        self.draw = Draw(video.size)
        self.input = Input()
        self.stats = Stats()
        self.time = Time()
        _publish(self)

        self.last_frame = _clock.perf_counter()

        self._init_fn()
        self._load_fn()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window or input event."""
        kind = event.type
        if kind == pygame.QUIT:
            self.exit_requested = True
        elif kind == pygame.VIDEORESIZE:
            if self.video is not None:
                self.video.resize(event.size)
        elif kind in (pygame.KEYDOWN, pygame.KEYUP):
            if self.input is not None:
                self.input.key_event(key_code_name(event.key), kind == pygame.KEYDOWN)
        elif kind == pygame.MOUSEMOTION:
            if self.input is not None:
                x, y = event.pos
                self.input.mouse_motion_event(x, y)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if self.input is not None and event.button not in _WHEEL_BUTTONS:
                self.input.click_event(
                    mouse_button_name(event.button), kind == pygame.MOUSEBUTTONDOWN
                )
        elif kind == pygame.MOUSEWHEEL:
            if self.input is not None:
                self.input.scroll_event(event.x, event.y)

    def _sync_size(self) -> None:
        width, height = self.window.size()
        size = (int(width), int(height))
        if size != self.video.size:
            self.video.resize(size)

    def frame(self) -> None:
        """Run one update and draw, then present the frame."""
        if self.window is None or self.video is None:
            return

        now = _clock.perf_counter()
        if self.time is not None:
            self.time.update(now - self.last_frame)
        self.last_frame = now

        self._update_fn()

        if self.draw is None:
            return
        self._sync_size()
        self.draw.begin_frame(self.video.size)

        self._draw_fn()

        try:
            self.video.submit(self.draw)
        except MemoryError:
            print("Out of memory!")
            self.exit_requested = True

        if self.input is not None:
            self.input.tick()

    def shutdown(self) -> None:
        """Let the game clean up, then withdraw the published services."""
        self._exit_fn()
        _reset_globals()


def run(
    init: Callback,
    load: Callback,
    update: Callback,
    draw: Callback,
    exit: Callback,
) -> None:
    """Run a game until its window is closed."""
    runtime = Runtime(init, load, update, draw, exit)
    try:
        runtime.resume()
        while not runtime.exit_requested:
            for event in pygame.event.get():
                runtime.handle_event(event)
            if runtime.exit_requested:
                break
            runtime.frame()
        runtime.shutdown()
    finally:
        pygame.quit()