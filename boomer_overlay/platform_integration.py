"""Platform-specific helpers for placing the magnifier above every other window."""
from __future__ import annotations

import importlib
import logging
import sys
from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QScreen, QWindow
from PyQt6.QtWidgets import QWidget

from boomer_overlay.platform_context import PlatformContext

_LAYER_SHELL_COMPOSITORS = {"sway", "wayfire", "wlroots", "hyprland"}


def screen_for_output(output_name: Optional[str]) -> Optional[QScreen]:
    """Return the Qt screen whose name matches the captured output, if any."""
    if not output_name:
        return None
    for screen in QGuiApplication.screens():
        if screen.name() == output_name:
            return screen
    return None


def _import_wayland_client() -> Any:
    return importlib.import_module("PyQt6.QtWaylandClient")


def _enum_member(owner: Any, enum_name: str, *candidates: str) -> Any:
    enum = getattr(owner, enum_name, None)
    if enum is None:
        return None
    for candidate in candidates:
        value = getattr(enum, candidate, None)
        if value is not None:
            return value
    return None


class _IntegrationBase:
    """Base class for per-platform integrations."""

    def __init__(self, widget: QWidget, logger: logging.Logger, context: PlatformContext, scope: str) -> None:
        self._widget = widget
        self._logger = logger
        self._context = context
        self._scope = scope
        self._window: Optional[QWindow] = None

    @property
    def layer_shell_active(self) -> bool:
        return False

    def window_flags(self) -> Qt.WindowType:
        return Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint

    def prepare_window(self, window: Optional[QWindow]) -> None:
        self._window = window

    def show(self, screen: Optional[QScreen]) -> None:
        if screen is not None:
            self._widget.setGeometry(screen.geometry())
        self._widget.showFullScreen()
        self._widget.raise_()
        self._widget.activateWindow()


class _WaylandIntegration(_IntegrationBase):
    """Wayland integration that requests a layer-shell overlay surface when available."""

    def __init__(self, widget: QWidget, logger: logging.Logger, context: PlatformContext, scope: str) -> None:
        super().__init__(widget, logger, context, scope)
        self._layer_shell: Any = None

    @property
    def layer_shell_active(self) -> bool:
        return self._layer_shell is not None

    def prepare_window(self, window: Optional[QWindow]) -> None:
        super().prepare_window(window)
        if window is None:
            return
        compositor = (self._context.compositor or "").lower()
        self._logger.debug(
            "Wayland integration initialising: platform=%s compositor=%s",
            QGuiApplication.platformName(),
            compositor or "unknown",
        )
        if compositor in _LAYER_SHELL_COMPOSITORS or not compositor:
            self._initialise_layer_shell(window)
        else:
            self._logger.debug("Compositor '%s' has no layer-shell path; using a full-screen toplevel", compositor)

    def _initialise_layer_shell(self, window: QWindow) -> None:
        try:
            module = _import_wayland_client()
        except Exception as exc:
            self._logger.debug("QtWaylandClient unavailable; cannot request layer-shell surface: %s", exc)
            return

        layer_shell_cls = getattr(module, "QWaylandLayerShellV1", None) or getattr(module, "QWaylandLayerShell", None)
        if layer_shell_cls is None:
            self._logger.debug("QtWaylandClient missing QWaylandLayerShellV1/QWaylandLayerShell class")
            return
        try:
            layer_shell = layer_shell_cls(window)
            overlay_layer = _enum_member(layer_shell_cls, "Layer", "Overlay", "LayerOverlay")
            if overlay_layer is not None:
                layer_shell.setLayer(overlay_layer)
            scope_method = getattr(layer_shell, "setScope", None)
            if callable(scope_method):
                scope_method(self._scope)
            anchors = [
                _enum_member(layer_shell_cls, "Anchor", name, f"Anchor{name}")
                for name in ("Left", "Right", "Top", "Bottom")
            ]
            set_anchors = getattr(layer_shell, "setAnchors", None)
            if callable(set_anchors) and all(anchor is not None for anchor in anchors):
                combined = anchors[0]
                for anchor in anchors[1:]:
                    combined = combined | anchor
                set_anchors(combined)
            exclusive_zone = getattr(layer_shell, "setExclusiveZone", None)
            if callable(exclusive_zone):
                exclusive_zone(-1)
            keyboard = _enum_member(
                layer_shell_cls,
                "KeyboardInteractivity",
                "Exclusive",
                "KeyboardInteractivityExclusive",
                "OnDemand",
                "KeyboardInteractivityOnDemand",
            )
            set_keyboard = getattr(layer_shell, "setKeyboardInteractivity", None)
            if keyboard is not None and callable(set_keyboard):
                set_keyboard(keyboard)
            apply_method = getattr(layer_shell, "apply", None)
            if callable(apply_method):
                apply_method()
            self._layer_shell = layer_shell
            self._logger.debug("Configured Wayland layer-shell overlay surface anchored to all edges")
        except Exception as exc:  # pragma: no cover - best effort only
            self._logger.warning("Failed to initialise Wayland layer-shell surface: %s", exc)

    def show(self, screen: Optional[QScreen]) -> None:
        if self._layer_shell is None:
            super().show(screen)
            return
        if screen is not None:
            self._widget.setGeometry(screen.geometry())
        self._widget.show()


class PlatformController:
    """Facade that selects the correct integration for the running platform."""

    def __init__(self, widget: QWidget, logger: logging.Logger, context: PlatformContext, *, scope: str) -> None:
        self._widget = widget
        self._logger = logger
        self._context = context
        self._platform_name = (QGuiApplication.platformName() or "").lower()
        self._integration = self._select_integration(scope)

    def _select_integration(self, scope: str) -> _IntegrationBase:
        if sys.platform.startswith("linux") and self._platform_name.startswith("wayland"):
            self._logger.debug("Selecting Wayland integration for overlay window")
            return _WaylandIntegration(self._widget, self._logger, self._context, scope)
        self._logger.debug("Selecting full-screen integration for platform '%s'", self._platform_name or "unknown")
        return _IntegrationBase(self._widget, self._logger, self._context, scope)

    @property
    def layer_shell_active(self) -> bool:
        return self._integration.layer_shell_active

    def window_flags(self) -> Qt.WindowType:
        return self._integration.window_flags()

    def prepare_window(self, window: Optional[QWindow]) -> None:
        self._integration.prepare_window(window)

    def show(self, screen: Optional[QScreen]) -> None:
        self._integration.show(screen)
