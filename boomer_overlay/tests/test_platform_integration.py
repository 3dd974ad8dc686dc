from __future__ import annotations

import enum
import logging
import types

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget

from boomer_overlay import platform_integration
from boomer_overlay.platform_context import PlatformContext
from boomer_overlay.platform_integration import PlatformController, _WaylandIntegration, screen_for_output


class _FakeLayerShell:
    class Layer(enum.Enum):
        Background = 0
        Overlay = 3

    class Anchor(enum.IntFlag):
        Top = 1
        Bottom = 2
        Left = 4
        Right = 8

    class KeyboardInteractivity(enum.Enum):
        NoInteractivity = 0
        Exclusive = 1

    instances: list = []

    def __init__(self, window) -> None:
        self.window = window
        self.calls = []
        _FakeLayerShell.instances.append(self)

    def setLayer(self, layer):
        self.calls.append(("layer", layer))

    def setScope(self, scope):
        self.calls.append(("scope", scope))

    def setAnchors(self, anchors):
        self.calls.append(("anchors", anchors))

    def setExclusiveZone(self, zone):
        self.calls.append(("zone", zone))

    def setKeyboardInteractivity(self, mode):
        self.calls.append(("keyboard", mode))

    def apply(self):
        self.calls.append(("apply",))


def test_screen_lookup_by_output_name(qt_app):
    assert screen_for_output(None) is None
    assert screen_for_output("no-such-output") is None


def test_offscreen_platform_uses_generic_integration(qt_app):
    widget = QWidget()
    controller = PlatformController(widget, logging.getLogger("test"), PlatformContext(), scope="boomer-test")
    flags = controller.window_flags()
    assert flags & Qt.WindowType.WindowStaysOnTopHint
    assert flags & Qt.WindowType.FramelessWindowHint
    assert controller.layer_shell_active is False


def test_layer_shell_surface_anchored_on_all_edges(qt_app, monkeypatch):
    _FakeLayerShell.instances.clear()
    fake_module = types.SimpleNamespace(QWaylandLayerShellV1=_FakeLayerShell)
    monkeypatch.setattr(platform_integration, "_import_wayland_client", lambda: fake_module)

    widget = QWidget()
    integration = _WaylandIntegration(
        widget, logging.getLogger("test"), PlatformContext("wayland", "sway"), "boomer-test"
    )
    window_handle = object()
    integration.prepare_window(window_handle)  # type: ignore[arg-type]

    assert integration.layer_shell_active is True
    shell = _FakeLayerShell.instances[-1]
    assert shell.window is window_handle
    calls = dict((call[0], call[1:]) for call in shell.calls)
    assert calls["layer"] == (_FakeLayerShell.Layer.Overlay,)
    assert calls["scope"] == ("boomer-test",)
    anchors = calls["anchors"][0]
    for edge in _FakeLayerShell.Anchor:
        assert anchors & edge
    assert calls["zone"] == (-1,)
    assert calls["keyboard"] == (_FakeLayerShell.KeyboardInteractivity.Exclusive,)
    assert shell.calls[-1] == ("apply",)


def test_missing_wayland_client_falls_back(qt_app, monkeypatch):
    def _raise():
        raise ImportError("PyQt6.QtWaylandClient")

    monkeypatch.setattr(platform_integration, "_import_wayland_client", _raise)
    integration = _WaylandIntegration(
        QWidget(), logging.getLogger("test"), PlatformContext("wayland", "hyprland"), "boomer-test"
    )
    integration.prepare_window(object())  # type: ignore[arg-type]
    assert integration.layer_shell_active is False


def test_unsupported_compositor_skips_layer_shell(qt_app, monkeypatch):
    requested = []
    monkeypatch.setattr(platform_integration, "_import_wayland_client", lambda: requested.append("QtWaylandClient"))
    integration = _WaylandIntegration(
        QWidget(), logging.getLogger("test"), PlatformContext("wayland", "gnome-shell"), "boomer-test"
    )
    integration.prepare_window(object())  # type: ignore[arg-type]
    assert requested == []
    assert integration.layer_shell_active is False
