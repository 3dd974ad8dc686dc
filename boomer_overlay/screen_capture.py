"""Capture a single output as encoded image bytes."""
from __future__ import annotations

import logging
from typing import Protocol

from boomer_overlay.errors import CommandError
from boomer_overlay.output_query import run_helper

_LOGGER = logging.getLogger("boomer.overlay.client.capture")

_CAPTURE_TIMEOUT = 10.0


class ScreenCapturer(Protocol):
    """Capability returning encoded screenshot bytes for one output."""

    def capture(self, output_name: str) -> bytes:
        ...


class GrimCapturer:
    """Run ``grim`` and read the PNG it writes to stdout."""

    def __init__(self, binary: str = "grim", *, timeout: float = _CAPTURE_TIMEOUT) -> None:
        self._binary = binary
        self._timeout = timeout

    def capture(self, output_name: str) -> bytes:
        command = (self._binary, "-o", output_name, "-")
        data = run_helper(command, timeout=self._timeout)
        if not data:
            raise CommandError(command, "produced no image data")
        _LOGGER.debug("Captured %d bytes from output %s", len(data), output_name)
        return data
