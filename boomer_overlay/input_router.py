"""Translate discrete input events into view-state updates and repaint decisions."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from boomer_overlay.input_events import (
    ButtonPress,
    ButtonRelease,
    InputEvent,
    KeyPress,
    KeyRelease,
    PointerButton,
    PointerMotion,
    Scroll,
    ScrollDirection,
)
from boomer_overlay.settings import DEFAULT_SETTINGS, OverlaySettings
from boomer_overlay.transform_state import TransformState

_LOGGER = logging.getLogger("boomer.overlay.client.input")


class RouteAction(Enum):
    """What the host should do after an event has been applied."""

    NONE = "none"
    RENDER = "render"
    QUIT = "quit"


class InputRouter:
    """Single entry point that owns every mutation of :class:`TransformState`.

    Events are applied one at a time in arrival order. Once the quit key has
    been seen the router is terminated and ignores everything that follows.
    """

    def __init__(self, state: Optional[TransformState] = None, settings: OverlaySettings = DEFAULT_SETTINGS) -> None:
        self._settings = settings
        if state is None:
            state = TransformState(scale_min=settings.scale_min, scale_max=settings.scale_max)
        self._state = state
        self._terminated = False

    @property
    def state(self) -> TransformState:
        return self._state

    @property
    def terminated(self) -> bool:
        return self._terminated

    def dispatch(self, event: InputEvent) -> RouteAction:
        if self._terminated:
            return RouteAction.NONE
        if isinstance(event, KeyPress):
            return self._on_key_press(event)
        if isinstance(event, KeyRelease):
            return self._on_key_release(event)
        if isinstance(event, Scroll):
            return self._on_scroll(event)
        if isinstance(event, PointerMotion):
            return self._on_motion(event)
        if isinstance(event, ButtonPress):
            return self._on_button_press(event)
        if isinstance(event, ButtonRelease):
            return self._on_button_release(event)
        raise TypeError(f"unsupported input event: {event!r}")

    # Handlers ----------------------------------------------------------

    def _on_key_press(self, event: KeyPress) -> RouteAction:
        if event.keycode == self._settings.quit_keycode:
            self._terminated = True
            _LOGGER.debug("Quit key pressed; router terminated")
            return RouteAction.QUIT
        if event.keycode == self._settings.highlight_keycode:
            self._state.set_highlight(True)
            return RouteAction.RENDER
        return RouteAction.NONE

    def _on_key_release(self, event: KeyRelease) -> RouteAction:
        if event.keycode != self._settings.highlight_keycode:
            return RouteAction.NONE
        self._state.set_highlight(False)
        return RouteAction.RENDER

    def _on_scroll(self, event: Scroll) -> RouteAction:
        state = self._state
        if event.direction is ScrollDirection.UP:
            state.set_scale(min(state.scale + self._settings.scale_delta, self._settings.scale_max))
        elif event.direction is ScrollDirection.DOWN:
            state.set_scale(max(state.scale - self._settings.scale_delta, self._settings.scale_min))
        else:
            return RouteAction.NONE
        return RouteAction.RENDER

    def _on_motion(self, event: PointerMotion) -> RouteAction:
        state = self._state
        position = event.position
        state.move_pointer(position)
        offset_changed = False
        if event.primary_held:
            anchor = state.drag_anchor
            if anchor is not None:
                dx = anchor[0] - position[0]
                dy = anchor[1] - position[1]
                if dx or dy:
                    state.translate(dx, dy)
                    offset_changed = True
            state.begin_drag(position)
        elif state.dragging:
            # Button was released outside the viewport.
            state.end_drag()
        if offset_changed or state.highlight_active:
            return RouteAction.RENDER
        return RouteAction.NONE

    def _on_button_press(self, event: ButtonPress) -> RouteAction:
        if event.button is not PointerButton.PRIMARY:
            return RouteAction.NONE
        self._state.move_pointer(event.position)
        if not self._state.dragging:
            self._state.begin_drag(event.position)
        return RouteAction.NONE

    def _on_button_release(self, event: ButtonRelease) -> RouteAction:
        if event.button is PointerButton.PRIMARY:
            self._state.end_drag()
        return RouteAction.NONE
