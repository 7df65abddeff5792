"""Typed terminal input events and their translation from curses input."""

from __future__ import annotations

import curses
import enum
from dataclasses import dataclass
from typing import Callable

ESC = "Esc"


class Modifiers(enum.Flag):
    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()


class KeyEventKind(enum.Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A key code is either a single character or a key name such as ``"Esc"``."""

    code: str
    modifiers: Modifiers = Modifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class MouseEvent:
    x: int
    y: int
    buttons: int = 0


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = KeyEvent | MouseEvent | ResizeEvent


def _from_char(ch: str) -> KeyEvent:
    if ch == "\x1b":
        return KeyEvent(ESC)
    if ch in ("\n", "\r"):
        return KeyEvent("Enter")
    if ch == "\t":
        return KeyEvent("Tab")
    if ch in ("\x7f", "\x08"):
        return KeyEvent("Backspace")
    code = ord(ch)
    if 1 <= code <= 26:
        # Ctrl+A .. Ctrl+Z arrive as 0x01 .. 0x1a
        return KeyEvent(chr(code + 96), Modifiers.CONTROL)
    return KeyEvent(ch)


def translate(
    key: str | int,
    size: tuple[int, int],
    *,
    read_next: Callable[[], str | int | None] | None = None,
    get_mouse: Callable[[], tuple[int, int, int, int, int]] | None = None,
) -> Event:
    """Turn one ``get_wch()`` result into an ``Event``.

    Args:
        key: Value returned by ``window.get_wch()``.
        size: Current ``(width, height)`` of the screen, used for resize events.
        read_next: Non-blocking read of the next pending input, used to detect
            ESC-prefixed (Alt) sequences. Returns None when nothing is queued;
            a second ESC must be pushed back rather than returned.
        get_mouse: ``curses.getmouse``-style callable for ``KEY_MOUSE``.
    """
    if isinstance(key, str):
        if key == "\x1b" and read_next is not None:
            follow = read_next()
            if isinstance(follow, str) and follow != "\x1b":
                inner = _from_char(follow)
                return KeyEvent(inner.code, inner.modifiers | Modifiers.ALT)
        return _from_char(key)

    if key == curses.KEY_RESIZE:
        return ResizeEvent(*size)
    if key == curses.KEY_MOUSE:
        if get_mouse is None:
            return MouseEvent(0, 0)
        _, x, y, _, bstate = get_mouse()
        return MouseEvent(x, y, bstate)

    name = curses.keyname(key).decode("ascii", "replace")
    if name.startswith("KEY_"):
        name = name[4:].title()
    if name == "Btab":
        return KeyEvent("Tab", Modifiers.SHIFT)
    return KeyEvent(name)
