"""Compose one magnifier frame from the source image and a view snapshot."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PyQt6.QtCore import QPointF, QRect, QRectF, Qt
from PyQt6.QtGui import QColor, QImage, QPainter

from boomer_overlay.settings import DEFAULT_SETTINGS, OverlaySettings
from boomer_overlay.source_image import SourceImage
from boomer_overlay.transform_state import TransformSnapshot

_LOGGER = logging.getLogger("boomer.overlay.client.render")

Point = Tuple[float, float]
Size = Tuple[int, int]


def scaled_size(source: Size, scale: float) -> Size:
    """Integer size of the zoomed copy, truncated like a raster scaler would."""
    return int(source[0] * scale), int(source[1] * scale)


def compute_blit_position(source: Size, scaled: Size, offset: Point) -> Point:
    """Top-left corner for the scaled image.

    Zoom grows around the centre of the unscaled image; the pan offset is
    subtracted on top of that.
    """
    x = -(scaled[0] - source[0]) / 2.0 - offset[0]
    y = -(scaled[1] - source[1]) / 2.0 - offset[1]
    return x, y


@dataclass(frozen=True)
class FrameReport:
    """What the last :meth:`Renderer.render` call actually painted."""

    blit_position: Optional[Point]
    scaled_size: Optional[Size]
    highlight_drawn: bool

    @property
    def skipped(self) -> bool:
        return self.blit_position is None


class Renderer:
    """Paints background, zoomed screenshot and the optional spotlight."""

    def __init__(self, source: SourceImage, settings: OverlaySettings = DEFAULT_SETTINGS) -> None:
        self._source = source
        self._settings = settings
        self._background = QColor.fromRgbF(*settings.background, 1.0)
        self._highlight = QColor.fromRgbF(*settings.highlight_style)
        self._cache_key: Optional[Size] = None
        self._cache_image: Optional[QImage] = None
        self.frames_rendered = 0

    def render(self, painter: QPainter, viewport: QRect, snapshot: TransformSnapshot) -> FrameReport:
        self.frames_rendered += 1
        painter.fillRect(viewport, self._background)

        target = scaled_size(self._source.size, snapshot.scale)
        scaled = self._scaled_image(target)
        if scaled is None:
            _LOGGER.debug("Skipping frame content: could not scale %s to %s", self._source.size, target)
            return FrameReport(blit_position=None, scaled_size=None, highlight_drawn=False)

        x, y = compute_blit_position(self._source.size, target, snapshot.offset)
        painter.drawImage(QPointF(x, y), scaled)

        highlight_drawn = False
        if snapshot.highlight_active:
            self._paint_highlight(painter, snapshot.pointer_position)
            highlight_drawn = True
        return FrameReport(blit_position=(x, y), scaled_size=target, highlight_drawn=highlight_drawn)

    def _scaled_image(self, target: Size) -> Optional[QImage]:
        width, height = target
        if width <= 0 or height <= 0:
            return None
        if self._cache_key == target and self._cache_image is not None:
            return self._cache_image
        source = self._source.image
        if target == self._source.size:
            scaled = source
        else:
            scaled = source.scaled(
                width,
                height,
                Qt.AspectRatioMode.IgnoreAspectRatio,
                Qt.TransformationMode.FastTransformation,
            )
        if scaled.isNull():
            return None
        self._cache_key = target
        self._cache_image = scaled
        return scaled

    def _paint_highlight(self, painter: QPainter, center: Point) -> None:
        radius = self._settings.highlight_radius
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._highlight)
        painter.drawEllipse(QRectF(center[0] - radius, center[1] - radius, radius * 2, radius * 2))
        painter.restore()
