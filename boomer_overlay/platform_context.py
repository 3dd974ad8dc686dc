"""Session and compositor hints for the overlay client."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class PlatformContext:
    """Desktop environment as seen from the process environment."""

    session_type: str = ""
    compositor: str = ""


def _detect_compositor(env: Mapping[str, str]) -> str:
    if env.get("HYPRLAND_INSTANCE_SIGNATURE"):
        return "hyprland"
    if env.get("SWAYSOCK"):
        return "sway"
    desktop = (env.get("XDG_CURRENT_DESKTOP") or "").lower()
    for token in ("hyprland", "sway", "wayfire", "kde", "gnome"):
        if token in desktop:
            return {"kde": "kwin", "gnome": "gnome-shell"}.get(token, token)
    return ""


def detect_platform_context(env: Optional[Mapping[str, str]] = None) -> PlatformContext:
    source = os.environ if env is None else env
    session = (source.get("XDG_SESSION_TYPE") or "").lower()
    if not session and source.get("WAYLAND_DISPLAY"):
        session = "wayland"
    return PlatformContext(session_type=session, compositor=_detect_compositor(source))
