"""Sound effects, music and the audio mixer."""

from __future__ import annotations

import math
import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pygame  # noqa: E402


def _gain(value: float) -> float:
    """Clamp a linear gain to what the mixer accepts."""
    if not value > 0:
        return 0.0
    return min(float(value), 1.0)


def _render(data: pygame.mixer.Sound, speed: float) -> Optional[pygame.mixer.Sound]:
    """Resample ``data`` to play at ``speed``; None when nothing would sound."""
    if speed == 1.0:
        return data
    if speed == 0 or not math.isfinite(speed):
        return None
    samples = pygame.sndarray.array(data)
    if speed < 0:
        samples = samples[::-1]
    positions = np.arange(0.0, len(samples), abs(speed)).astype(np.intp)
    if positions.size == 0:
        return None
    return pygame.sndarray.make_sound(np.ascontiguousarray(samples[positions]))


def _play(rendered: pygame.mixer.Sound, loops: int, what: str) -> pygame.mixer.Channel:
    channel = rendered.play(loops=loops)
    if channel is None:
        raise RuntimeError(f"Failed to play {what}")
    return channel


class Sound:
    """A short sound effect; several copies may play at once."""

    def __init__(self, data: pygame.mixer.Sound) -> None:
        self.data = data
        self._volume = 1.0
        self.speed = 1.0

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = float(value)
        self.data.set_volume(_gain(self._volume))

    def _start(self) -> Optional[pygame.mixer.Channel]:
        rendered = _render(self.data, self.speed)
        if rendered is None:
            return None
        rendered.set_volume(_gain(self._volume))
        return _play(rendered, 0, "sound")


class Music:
    """A long track with one live playback that can be paused.

    Volume and pausing act on the live playback; speed and looping apply
    from the next time the track is played.
    """

    def __init__(self, data: pygame.mixer.Sound) -> None:
        self.data = data
        self.handle: Optional[pygame.mixer.Channel] = None
        self._playing: Optional[pygame.mixer.Sound] = None
        self._volume = 1.0
        self.speed = 1.0
        self.loop = False
        self._paused = False

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = float(value)
        gain = _gain(self._volume)
        self.data.set_volume(gain)
        if self._playing is not None:
            self._playing.set_volume(gain)

    @property
    def paused(self) -> bool:
        return self._paused

    @paused.setter
    def paused(self, value: bool) -> None:
        if self.handle is None:
            self._paused = False
            return
        self._paused = bool(value)
        if self.handle.get_sound() is not self._playing:
            return
        if self._paused:
            self.handle.pause()
        else:
            self.handle.unpause()

    def _start(self) -> Optional[pygame.mixer.Channel]:
        rendered = _render(self.data, self.speed)
        if rendered is None:
            return None
        rendered.set_volume(_gain(self._volume))
        channel = _play(rendered, -1 if self.loop else 0, "music")
        self._playing = rendered
        self.handle = channel
        self._paused = False
        return channel


class Audio:
    """The mixer: plays sounds and music under a master volume."""

    def __init__(self) -> None:
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                raise RuntimeError("Failed to create audio manager") from exc
        self._volume = 1.0

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = float(value)
        gain = _gain(self._volume)
        for index in range(pygame.mixer.get_num_channels()):
            pygame.mixer.Channel(index).set_volume(gain)

    def play(self, audio: Sound | Music) -> None:
        if not isinstance(audio, (Sound, Music)):
            raise TypeError(f"cannot play {type(audio).__name__}")
        channel = audio._start()
        if channel is not None:
            channel.set_volume(_gain(self._volume))