from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from boomer_overlay import __version__
from boomer_overlay.errors import StartupError
from boomer_overlay.logging_utils import LOGGER_NAME, configure_client_logging
from boomer_overlay.output_query import OutputProvider, create_output_provider
from boomer_overlay.overlay_window import MagnifierWindow
from boomer_overlay.platform_context import PlatformContext, detect_platform_context
from boomer_overlay.screen_capture import GrimCapturer, ScreenCapturer
from boomer_overlay.settings import DEFAULT_SETTINGS, OverlaySettings
from boomer_overlay.startup import acquire_source

_CLIENT_LOGGER = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="boomer",
        description="Capture the focused output and magnify it in a full-screen overlay. "
        "Scroll to zoom, drag to pan, hold Shift for a spotlight, press Escape to quit.",
    )


def main(
    argv: Optional[list[str]] = None,
    *,
    provider: Optional[OutputProvider] = None,
    capturer: Optional[ScreenCapturer] = None,
    context: Optional[PlatformContext] = None,
    settings: OverlaySettings = DEFAULT_SETTINGS,
) -> int:
    build_parser().parse_args(argv)
    configure_client_logging(_CLIENT_LOGGER)

    context = context or detect_platform_context()
    _CLIENT_LOGGER.debug(
        "Starting overlay client %s (pid=%s session=%s compositor=%s)",
        __version__,
        os.getpid(),
        context.session_type or "unknown",
        context.compositor or "unknown",
    )
    try:
        output_name, source = acquire_source(
            provider or create_output_provider(context.compositor),
            capturer or GrimCapturer(),
        )
    except StartupError as exc:
        _CLIENT_LOGGER.error("Startup failed: %s", exc)
        return 1

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(settings.application_name)
    app.setDesktopFileName(settings.application_id)
    window = MagnifierWindow(source, settings, context=context)
    window.present(output_name)

    exit_code = app.exec()
    _CLIENT_LOGGER.info("Overlay client exiting with code %s", exit_code)
    return int(exit_code)
