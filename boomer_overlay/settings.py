"""Hard-coded overlay settings.

The magnifier takes no configuration file, flags or environment tunables; every
constant the router and renderer need lives here so tests can derive variants
with ``dataclasses.replace``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[float, float, float]
RGBA = Tuple[float, float, float, float]


@dataclass(frozen=True)
class OverlaySettings:
    """Key bindings, zoom limits and paint styles for one session."""

    # X11/xkb keycodes: 9 is Escape, 50 is the left Shift key.
    quit_keycode: int = 9
    highlight_keycode: int = 50
    scale_delta: float = 0.1
    scale_max: float = 3.0
    background: RGB = (0.1, 0.1, 0.1)
    highlight_radius: float = 70.0
    highlight_style: RGBA = (1.0, 1.0, 1.0, 0.4)
    application_name: str = "boomer"
    application_id: str = "net.olback.boomer"
    layer_shell_scope: str = "boomer-overlay"

    @property
    def scale_min(self) -> float:
        # Zooming out stops one step above zero.
        return self.scale_delta


DEFAULT_SETTINGS = OverlaySettings()
