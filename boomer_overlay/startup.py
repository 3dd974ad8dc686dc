"""Acquire the focused output's screenshot before the overlay is shown."""
from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, Tuple

from boomer_overlay.output_query import OutputProvider, select_focused_output
from boomer_overlay.screen_capture import ScreenCapturer
from boomer_overlay.source_image import SourceImage

_LOGGER = logging.getLogger("boomer.overlay.client.startup")


def _print_stdout(line: str) -> None:
    print(line, file=sys.stdout, flush=True)


def acquire_source(
    provider: OutputProvider,
    capturer: ScreenCapturer,
    *,
    announce: Optional[Callable[[str], None]] = None,
) -> Tuple[str, SourceImage]:
    """Select the focused output, capture it and decode the result.

    Any failure raises a :class:`~boomer_overlay.errors.StartupError` subclass;
    nothing is retried.
    """
    outputs = provider.list_outputs()
    name = select_focused_output(outputs)
    _LOGGER.debug("Selected output %s from %d candidate(s)", name, len(outputs))
    data = capturer.capture(name)
    (announce or _print_stdout)(f"Monitor: {name}")
    source = SourceImage.from_bytes(data)
    _LOGGER.info("Captured %s at %dx%d", name, source.width, source.height)
    return name, source
