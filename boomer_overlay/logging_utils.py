from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "boomer.overlay.client"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_ATTR = "_boomer_client_handler"


def build_stream_handler(
    stream: Optional[IO[str]] = None,
    *,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a stderr handler with the client's formatter."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    return handler


def configure_client_logging(
    logger: logging.Logger,
    *,
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Install exactly one client stream handler on ``logger``.

    Handlers installed by earlier calls are removed first so repeated
    configuration never duplicates output. The launcher runs at INFO;
    DEBUG records (helper invocations, layer-shell setup, frame skips and
    repaint reasons) surface only when an embedding caller passes
    ``level=logging.DEBUG``.
    """
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            logger.removeHandler(existing)
            existing.close()
    handler = build_stream_handler(stream)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
