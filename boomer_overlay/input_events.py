"""Host-agnostic input events delivered to the input router."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Point = Tuple[float, float]


class ScrollDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class PointerButton(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    MIDDLE = "middle"
    OTHER = "other"


@dataclass(frozen=True)
class KeyPress:
    keycode: int


@dataclass(frozen=True)
class KeyRelease:
    keycode: int


@dataclass(frozen=True)
class Scroll:
    direction: ScrollDirection


@dataclass(frozen=True)
class PointerMotion:
    """Pointer moved to ``position``; ``primary_held`` mirrors the button mask."""

    position: Point
    primary_held: bool = False


@dataclass(frozen=True)
class ButtonPress:
    button: PointerButton
    position: Point


@dataclass(frozen=True)
class ButtonRelease:
    button: PointerButton
    position: Point


InputEvent = Union[KeyPress, KeyRelease, Scroll, PointerMotion, ButtonPress, ButtonRelease]
