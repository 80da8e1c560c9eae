"""User interface events, keys and input modifiers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .geometry import Point, Vector


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class KeyboardModifiers:
    """Which modifier keys are held."""

    shift: bool = False
    control: bool = False
    alt: bool = False
    command: bool = False


class Key(Enum):
    """Named, non-character keys."""

    ENTER = "enter"
    TAB = "tab"
    SPACE = "space"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    ARROW_UP = "arrow_up"
    END = "end"
    HOME = "home"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    BACKSPACE = "backspace"
    DELETE = "delete"
    ESCAPE = "escape"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


@dataclass(frozen=True)
class Character:
    """A key that produces a single character."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"expected a single character, got {self.char!r}")


class HotKey(Enum):
    """Letter keys usable as menu shortcuts."""

    KEY_A = "a"
    KEY_B = "b"
    KEY_C = "c"
    KEY_D = "d"
    KEY_E = "e"
    KEY_F = "f"
    KEY_G = "g"
    KEY_H = "h"
    KEY_I = "i"
    KEY_J = "j"
    KEY_K = "k"
    KEY_L = "l"
    KEY_M = "m"
    KEY_N = "n"
    KEY_O = "o"
    KEY_P = "p"
    KEY_Q = "q"
    KEY_R = "r"
    KEY_S = "s"
    KEY_T = "t"
    KEY_U = "u"
    KEY_V = "v"
    KEY_W = "w"
    KEY_X = "x"
    KEY_Y = "y"
    KEY_Z = "z"


@dataclass(frozen=True)
class TouchBegin:
    """A touch began, or a mouse button went down."""

    id: int
    position: Point

    def offset(self, offset: Vector) -> TouchBegin:
        return replace(self, position=self.position + offset)


@dataclass(frozen=True)
class TouchMove:
    """A touch moved, or the mouse moved while a button was down."""

    id: int
    position: Point
    delta: Vector

    def offset(self, offset: Vector) -> TouchMove:
        return replace(self, position=self.position + offset)


@dataclass(frozen=True)
class TouchEnd:
    """A touch ended, or a mouse button was released."""

    id: int
    position: Point

    def offset(self, offset: Vector) -> TouchEnd:
        return replace(self, position=self.position + offset)


@dataclass(frozen=True)
class CommandEvent:
    """A menu command, named by its path."""

    name: str

    def offset(self, offset: Vector) -> CommandEvent:
        """A copy of the event; commands carry no position to move."""
        return replace(self)


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""

    key: Union[Key, Character]

    def offset(self, offset: Vector) -> KeyEvent:
        """A copy of the event; key presses carry no position to move."""
        return replace(self)


@dataclass(frozen=True)
class AnimEvent:
    """An animation tick."""

    def offset(self, offset: Vector) -> AnimEvent:
        """A copy of the event; animation ticks carry no position to move."""
        return replace(self)


Event = Union[TouchBegin, TouchMove, TouchEnd, CommandEvent, KeyEvent, AnimEvent]