"""PyQt6 host window for the magnifier overlay."""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QPainter, QWheelEvent
from PyQt6.QtWidgets import QApplication, QWidget

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
from boomer_overlay.input_router import InputRouter, RouteAction
from boomer_overlay.logging_utils import LOGGER_NAME
from boomer_overlay.platform_context import PlatformContext, detect_platform_context
from boomer_overlay.platform_integration import PlatformController, screen_for_output
from boomer_overlay.renderer import FrameReport, Renderer
from boomer_overlay.settings import DEFAULT_SETTINGS, OverlaySettings
from boomer_overlay.source_image import SourceImage

_CLIENT_LOGGER = logging.getLogger(LOGGER_NAME)

_BUTTONS: Dict[Qt.MouseButton, PointerButton] = {
    Qt.MouseButton.LeftButton: PointerButton.PRIMARY,
    Qt.MouseButton.RightButton: PointerButton.SECONDARY,
    Qt.MouseButton.MiddleButton: PointerButton.MIDDLE,
}


def _default_quit() -> None:
    QApplication.exit(0)


class MagnifierWindow(QWidget):
    """Full-screen surface that feeds Qt input into the router and paints on demand."""

    _WHEEL_STEP = 120  # one notch in QWheelEvent.angleDelta units

    def __init__(
        self,
        source: SourceImage,
        settings: OverlaySettings = DEFAULT_SETTINGS,
        *,
        context: Optional[PlatformContext] = None,
        quit_fn: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._router = InputRouter(settings=settings)
        self._renderer = Renderer(source, settings)
        self._quit_fn = quit_fn or _default_quit
        self._closing = False
        self._wheel_remainder = 0
        self._last_frame: Optional[FrameReport] = None
        self._platform_context = context or detect_platform_context()
        # Qt reports 0 for native scan codes on platforms without X keycodes.
        self._fallback_keycodes: Dict[int, int] = {
            Qt.Key.Key_Escape.value: settings.quit_keycode,
            Qt.Key.Key_Shift.value: settings.highlight_keycode,
        }

        self.setWindowTitle(settings.application_name)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self._platform_controller = PlatformController(
            self,
            _CLIENT_LOGGER,
            self._platform_context,
            scope=settings.layer_shell_scope,
        )
        self.setWindowFlags(self._platform_controller.window_flags())

    # Public API -----------------------------------------------------------

    @property
    def router(self) -> InputRouter:
        return self._router

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def last_frame(self) -> Optional[FrameReport]:
        return self._last_frame

    def present(self, output_name: Optional[str] = None) -> None:
        """Create the native surface, apply overlay integration and show it."""
        self.winId()
        self._platform_controller.prepare_window(self.windowHandle())
        screen = screen_for_output(output_name)
        if output_name and screen is None:
            _CLIENT_LOGGER.debug("No Qt screen named %s; using the default placement", output_name)
        self._platform_controller.show(screen)
        _CLIENT_LOGGER.debug(
            "Overlay shown: platform=%s compositor=%s layer_shell=%s size=%dx%d",
            self._platform_context.session_type or "unknown",
            self._platform_context.compositor or "unknown",
            self._platform_controller.layer_shell_active,
            self.width(),
            self.height(),
        )

    def handle_input(self, event: InputEvent) -> RouteAction:
        action = self._router.dispatch(event)
        if action is RouteAction.RENDER:
            self._request_repaint(type(event).__name__)
        elif action is RouteAction.QUIT:
            self._quit()
        return action

    # Qt event translation -----------------------------------------------

    def keycode_for(self, event: QKeyEvent) -> int:
        native = int(event.nativeScanCode())
        if native:
            return native
        return self._fallback_keycodes.get(int(event.key()), 0)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        if event.isAutoRepeat():
            event.accept()
            return
        self.handle_input(KeyPress(self.keycode_for(event)))
        event.accept()

    def keyReleaseEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        if event.isAutoRepeat():
            event.accept()
            return
        self.handle_input(KeyRelease(self.keycode_for(event)))
        event.accept()

    def wheelEvent(self, event: QWheelEvent) -> None:  # type: ignore[override]
        delta = event.angleDelta()
        if delta.y() == 0:
            if delta.x() != 0:
                self.handle_input(Scroll(ScrollDirection.LEFT if delta.x() > 0 else ScrollDirection.RIGHT))
            event.accept()
            return
        if (delta.y() > 0) != (self._wheel_remainder > 0):
            self._wheel_remainder = 0
        self._wheel_remainder += delta.y()
        while abs(self._wheel_remainder) >= self._WHEEL_STEP:
            if self._wheel_remainder > 0:
                self._wheel_remainder -= self._WHEEL_STEP
                direction = ScrollDirection.UP
            else:
                self._wheel_remainder += self._WHEEL_STEP
                direction = ScrollDirection.DOWN
            if self.handle_input(Scroll(direction)) is RouteAction.QUIT:
                break
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        position = event.position()
        primary_held = bool(event.buttons() & Qt.MouseButton.LeftButton)
        self.handle_input(PointerMotion((position.x(), position.y()), primary_held))
        event.accept()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        position = event.position()
        button = _BUTTONS.get(event.button(), PointerButton.OTHER)
        self.handle_input(ButtonPress(button, (position.x(), position.y())))
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        position = event.position()
        button = _BUTTONS.get(event.button(), PointerButton.OTHER)
        self.handle_input(ButtonRelease(button, (position.x(), position.y())))
        event.accept()

    # Rendering ------------------------------------------------------------

    def paintEvent(self, event) -> None:  # type: ignore[override]
        if self._closing:
            return
        painter = QPainter(self)
        try:
            self._last_frame = self._renderer.render(painter, self.rect(), self._router.state.snapshot())
        finally:
            painter.end()

    def _request_repaint(self, reason: str) -> None:
        if self._closing:
            return
        _CLIENT_LOGGER.debug("Repaint requested: reason=%s", reason)
        self.update()

    def _quit(self) -> None:
        if self._closing:
            return
        self._closing = True
        _CLIENT_LOGGER.info("Quit key pressed; closing overlay")
        self._quit_fn()
