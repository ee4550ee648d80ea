"""Frame timing."""


class Time:
    """Holds the duration of the last frame in seconds."""

    def __init__(self) -> None:
        self._delta = 0.0000001

    def delta(self) -> float:
        return self._delta

    def update(self, delta: float) -> None:
        self._delta = float(delta)