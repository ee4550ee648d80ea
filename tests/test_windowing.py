import os

os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame  # noqa: E402
import pytest  # noqa: E402

from minkgame.vectors import Vec2  # noqa: E402
from minkgame.windowing import Window  # noqa: E402


@pytest.fixture
def window():
    created = Window("Demo", Vec2(320, 240))
    yield created
    pygame.display.quit()


def test_initial_title(window):
    assert window.title() == "Demo"


def test_initial_size(window):
    assert window.size() == Vec2(320, 240)


def test_set_title(window):
    window.set_title("Other")
    assert window.title() == "Other"


def test_set_size_truncates(window):
    window.set_size(Vec2(100.7, 50.2))
    assert window.size() == Vec2(100, 50)


def test_set_size_keeps_minimum(window):
    window.set_size(Vec2(-5, 0))
    assert window.size() == Vec2(1, 1)


def test_resizable_toggle(window):
    assert window.resizable() is True
    window.set_resizable(False)
    assert window.resizable() is False
    assert window.size() == Vec2(320, 240)
    assert window.title() == "Demo"


def test_surface_matches_size(window):
    assert window.surface.get_size() == (320, 240)