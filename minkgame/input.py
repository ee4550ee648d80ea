"""Keyboard and mouse state tracked between frames."""

from __future__ import annotations

import os
import string
from functools import lru_cache
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minkgame.vectors import Vec2  # noqa: E402

_NAMED_KEYS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("K_SPACE",), "Space"),
    (("K_RETURN",), "Enter"),
    (("K_ESCAPE",), "Escape"),
    (("K_BACKSPACE",), "Backspace"),
    (("K_TAB",), "Tab"),
    (("K_UP",), "ArrowUp"),
    (("K_DOWN",), "ArrowDown"),
    (("K_LEFT",), "ArrowLeft"),
    (("K_RIGHT",), "ArrowRight"),
    (("K_LSHIFT",), "ShiftLeft"),
    (("K_RSHIFT",), "ShiftRight"),
    (("K_LCTRL",), "ControlLeft"),
    (("K_RCTRL",), "ControlRight"),
    (("K_LALT",), "AltLeft"),
    (("K_RALT",), "AltRight"),
    (("K_LSUPER", "K_LGUI", "K_LMETA"), "SuperLeft"),
    (("K_RSUPER", "K_RGUI", "K_RMETA"), "SuperRight"),
    (("K_MINUS",), "Minus"),
    (("K_EQUALS",), "Equal"),
    (("K_LEFTBRACKET",), "BracketLeft"),
    (("K_RIGHTBRACKET",), "BracketRight"),
    (("K_BACKSLASH",), "Backslash"),
    (("K_SEMICOLON",), "Semicolon"),
    (("K_QUOTE",), "Quote"),
    (("K_BACKQUOTE",), "Backquote"),
    (("K_COMMA",), "Comma"),
    (("K_PERIOD",), "Period"),
    (("K_SLASH",), "Slash"),
    (("K_CAPSLOCK",), "CapsLock"),
    (("K_INSERT",), "Insert"),
    (("K_DELETE",), "Delete"),
    (("K_HOME",), "Home"),
    (("K_END",), "End"),
    (("K_PAGEUP",), "PageUp"),
    (("K_PAGEDOWN",), "PageDown"),
    (("K_PRINTSCREEN", "K_PRINT"), "PrintScreen"),
    (("K_SCROLLLOCK", "K_SCROLLOCK"), "ScrollLock"),
    (("K_PAUSE",), "Pause"),
    (("K_NUMLOCKCLEAR", "K_NUMLOCK"), "NumLock"),
    (("K_KP_DIVIDE",), "NumpadDivide"),
    (("K_KP_MULTIPLY",), "NumpadMultiply"),
    (("K_KP_MINUS",), "NumpadSubtract"),
    (("K_KP_PLUS",), "NumpadAdd"),
    (("K_KP_ENTER",), "NumpadEnter"),
    (("K_KP_PERIOD",), "NumpadDecimal"),
    (("K_KP_EQUALS",), "NumpadEqual"),
)


def _first_constant(names: tuple[str, ...]) -> Optional[int]:
    for name in names:
        value = getattr(pygame, name, None)
        if value is not None:
            return value
    return None


@lru_cache(maxsize=None)
def _key_names() -> dict[int, str]:
    names: dict[int, str] = {}
    for letter in string.ascii_lowercase:
        names[getattr(pygame, f"K_{letter}")] = f"Key{letter.upper()}"
    for digit in string.digits:
        names[getattr(pygame, f"K_{digit}")] = f"Digit{digit}"
        keypad = _first_constant((f"K_KP{digit}", f"K_KP_{digit}"))
        if keypad is not None:
            names[keypad] = f"Numpad{digit}"
    for number in range(1, 13):
        names[getattr(pygame, f"K_F{number}")] = f"F{number}"
    for constants, label in _NAMED_KEYS:
        value = _first_constant(constants)
        if value is not None:
            names.setdefault(value, label)
    return names


def key_code_name(key: int) -> Optional[str]:
    """Name of a key constant, or None for keys that have no name."""
    return _key_names().get(key)


def mouse_button_name(button: int) -> str:
    """Name of a mouse button number as reported by button events."""
    return {1: "Left", 2: "Middle", 3: "Right", 6: "Back", 7: "Forward"}.get(
        button, f"Other({button})"
    )


class Input:
    """Current and previous-frame state of keys, mouse buttons and wheel."""

    def __init__(self) -> None:
        self._prev_keys: dict[str, bool] = {}
        self._keys: dict[str, bool] = {}
        self._prev_mouse: dict[str, bool] = {}
        self._mouse: dict[str, bool] = {}
        self._mouse_pos = Vec2(0.0, 0.0)
        self._mouse_scroll = Vec2(0.0, 0.0)

    def tick(self) -> None:
        """Finish a frame: remember the current state and clear the scroll."""
        self._prev_keys = dict(self._keys)
        self._prev_mouse = dict(self._mouse)
        self._mouse_scroll = Vec2(0.0, 0.0)

    def key_event(self, code: Optional[str], pressed: bool) -> None:
        if code is None:
            return
        self._keys[code] = bool(pressed)

    def mouse_motion_event(self, x: float, y: float) -> None:
        self._mouse_pos = Vec2(x, y)

    def click_event(self, button: str, pressed: bool) -> None:
        self._mouse[button] = bool(pressed)

    def scroll_event(self, x: float, y: float) -> None:
        self._mouse_scroll = Vec2(x, y)

    def key_down(self, code: str) -> bool:
        return self._keys.get(code, False)

    def key_pressed(self, code: str) -> bool:
        return self._keys.get(code, False) and not self._prev_keys.get(code, False)

    def key_released(self, code: str) -> bool:
        return not self._keys.get(code, False) and self._prev_keys.get(code, False)

    def mouse_pos(self) -> Vec2:
        return Vec2(self._mouse_pos.x, self._mouse_pos.y)

    def mouse_down(self, button: str) -> bool:
        return self._mouse.get(button, False)

    def mouse_pressed(self, button: str) -> bool:
        return self._mouse.get(button, False) and not self._prev_mouse.get(button, False)

    def mouse_released(self, button: str) -> bool:
        return not self._mouse.get(button, False) and self._prev_mouse.get(button, False)

    def scroll(self) -> Vec2:
        return Vec2(self._mouse_scroll.x, self._mouse_scroll.y)