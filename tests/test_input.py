import pygame
import pytest

from minkgame.input import Input, key_code_name, mouse_button_name
from minkgame.vectors import Vec2


def test_key_code_name_letter():
    assert key_code_name(pygame.K_a) == "KeyA"


def test_letter_names_are_distinct():
    names = {key_code_name(getattr(pygame, f"K_{c}")) for c in "abcdefghijklmnopqrstuvwxyz"}
    assert len(names) == 26
    assert None not in names


def test_unknown_key_has_no_name():
    assert key_code_name(-12345) is None


def test_mouse_button_name_left():
    assert mouse_button_name(1) == "Left"


def test_mouse_button_names_distinct_for_main_buttons():
    assert len({mouse_button_name(b) for b in (1, 2, 3, 6, 7)}) == 5


def test_fresh_input_reports_nothing():
    state = Input()
    assert state.key_down("KeyA") is False
    assert state.key_pressed("KeyA") is False
    assert state.key_released("KeyA") is False
    assert state.mouse_pos() == Vec2(0, 0)
    assert state.scroll() == Vec2(0, 0)


def test_key_press_lifecycle():
    state = Input()
    state.key_event("KeyW", True)
    assert state.key_down("KeyW") is True
    assert state.key_pressed("KeyW") is True
    state.tick()
    assert state.key_pressed("KeyW") is False
    assert state.key_down("KeyW") is True
    state.key_event("KeyW", False)
    assert state.key_released("KeyW") is True
    assert state.key_down("KeyW") is False
    state.tick()
    assert state.key_released("KeyW") is False


def test_unidentified_key_is_ignored():
    state = Input()
    state.key_event(None, True)
    assert state.key_down("None") is False


def test_mouse_button_lifecycle():
    state = Input()
    state.click_event("Left", True)
    assert state.mouse_pressed("Left") is True
    assert state.mouse_down("Left") is True
    state.tick()
    assert state.mouse_pressed("Left") is False
    state.click_event("Left", False)
    assert state.mouse_released("Left") is True
    state.tick()
    assert state.mouse_released("Left") is False


def test_mouse_pos_is_a_copy():
    state = Input()
    state.mouse_motion_event(10.5, 20.0)
    position = state.mouse_pos()
    position.x = 99.0
    assert state.mouse_pos() == Vec2(10.5, 20.0)


@pytest.mark.parametrize("x, y", [(1.0, -2.0), (0.0, 3.5)])
def test_scroll_cleared_by_tick(x, y):
    state = Input()
    state.scroll_event(x, y)
    assert state.scroll() == Vec2(x, y)
    state.tick()
    assert state.scroll() == Vec2(0, 0)