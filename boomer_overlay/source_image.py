"""Immutable screenshot raster captured once at startup."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PyQt6.QtGui import QImage

from boomer_overlay.errors import ImageDecodeError


@dataclass(frozen=True)
class SourceImage:
    """Decoded screenshot; the wrapped ``QImage`` is never modified after creation."""

    image: QImage

    def __post_init__(self) -> None:
        if self.image.isNull() or self.image.width() <= 0 or self.image.height() <= 0:
            raise ImageDecodeError("source image is empty")

    @classmethod
    def from_bytes(cls, data: bytes) -> "SourceImage":
        if not data:
            raise ImageDecodeError("screenshot capture returned no data")
        image = QImage()
        if not image.loadFromData(data):
            raise ImageDecodeError(f"could not decode {len(data)} bytes of screenshot data")
        return cls(image.convertToFormat(QImage.Format.Format_ARGB32_Premultiplied))

    @property
    def width(self) -> int:
        return self.image.width()

    @property
    def height(self) -> int:
        return self.image.height()

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height
