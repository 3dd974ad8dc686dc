"""Mutable view state shared by the input router and the renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

Point = Tuple[float, float]

SCALE_DELTA = 0.1
SCALE_MIN = SCALE_DELTA
SCALE_MAX = 3.0
DEFAULT_SCALE = 1.0


def clamp_scale(value: float, minimum: float = SCALE_MIN, maximum: float = SCALE_MAX) -> float:
    return max(minimum, min(maximum, float(value)))


@dataclass(frozen=True)
class TransformSnapshot:
    """Read-only copy of the state taken at the start of a paint."""

    scale: float
    offset: Point
    pointer_position: Point
    highlight_active: bool
    drag_anchor: Optional[Point]


@dataclass
class TransformState:
    """Scale, pan offset, pointer and spotlight state for the viewport.

    The record has no behaviour beyond field updates; rendering is requested
    by the input router, never by the state itself. ``scale`` is kept inside
    ``[scale_min, scale_max]`` by every mutator.
    """

    scale: float = DEFAULT_SCALE
    offset: Point = (0.0, 0.0)
    pointer_position: Point = (0.0, 0.0)
    highlight_active: bool = False
    drag_anchor: Optional[Point] = None
    scale_min: float = field(default=SCALE_MIN, repr=False)
    scale_max: float = field(default=SCALE_MAX, repr=False)

    def __post_init__(self) -> None:
        if self.scale_min <= 0 or self.scale_min > self.scale_max:
            raise ValueError(f"invalid scale range [{self.scale_min}, {self.scale_max}]")
        self.scale = clamp_scale(self.scale, self.scale_min, self.scale_max)

    def set_scale(self, value: float) -> float:
        self.scale = clamp_scale(value, self.scale_min, self.scale_max)
        return self.scale

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self.offset
        self.offset = (ox + dx, oy + dy)

    def move_pointer(self, position: Point) -> None:
        self.pointer_position = (float(position[0]), float(position[1]))

    def set_highlight(self, active: bool) -> None:
        self.highlight_active = bool(active)

    def begin_drag(self, anchor: Point) -> None:
        self.drag_anchor = (float(anchor[0]), float(anchor[1]))

    def end_drag(self) -> None:
        self.drag_anchor = None

    @property
    def dragging(self) -> bool:
        return self.drag_anchor is not None

    def snapshot(self) -> TransformSnapshot:
        return TransformSnapshot(
            scale=self.scale,
            offset=self.offset,
            pointer_position=self.pointer_position,
            highlight_active=self.highlight_active,
            drag_anchor=self.drag_anchor,
        )
