from __future__ import annotations

from typing import List

import pytest

from boomer_overlay.errors import CommandError, ImageDecodeError, NoOutputError
from boomer_overlay.output_query import Output
from boomer_overlay.source_image import SourceImage
from boomer_overlay.startup import acquire_source


class FakeProvider:
    def __init__(self, outputs: List[Output]) -> None:
        self.outputs = outputs
        self.calls = 0

    def list_outputs(self) -> List[Output]:
        self.calls += 1
        return list(self.outputs)


class FakeCapturer:
    def __init__(self, data: bytes = b"", error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.requested: List[str] = []

    def capture(self, output_name: str) -> bytes:
        self.requested.append(output_name)
        if self.error is not None:
            raise self.error
        return self.data


def test_acquire_source_captures_focused_output(png_bytes):
    provider = FakeProvider([Output("eDP-1", False), Output("HDMI-1", True)])
    capturer = FakeCapturer(png_bytes(64, 32))
    announced: List[str] = []

    name, source = acquire_source(provider, capturer, announce=announced.append)

    assert name == "HDMI-1"
    assert capturer.requested == ["HDMI-1"]
    assert announced == ["Monitor: HDMI-1"]
    assert source.size == (64, 32)


def test_acquire_source_prints_monitor_to_stdout(png_bytes, capsys):
    acquire_source(FakeProvider([Output("DP-3", True)]), FakeCapturer(png_bytes(4, 4)))
    assert capsys.readouterr().out == "Monitor: DP-3\n"


def test_no_focused_output_skips_capture():
    capturer = FakeCapturer()
    with pytest.raises(NoOutputError):
        acquire_source(FakeProvider([Output("eDP-1", False)]), capturer, announce=lambda _line: None)
    assert capturer.requested == []


def test_capture_failure_propagates():
    error = CommandError(["grim"], "executable not found")
    with pytest.raises(CommandError):
        acquire_source(
            FakeProvider([Output("eDP-1", True)]),
            FakeCapturer(error=error),
            announce=lambda _line: None,
        )


def test_undecodable_capture_raises(qt_app):
    with pytest.raises(ImageDecodeError):
        acquire_source(
            FakeProvider([Output("eDP-1", True)]),
            FakeCapturer(b"definitely not a png"),
            announce=lambda _line: None,
        )


def test_source_image_rejects_empty_bytes():
    with pytest.raises(ImageDecodeError):
        SourceImage.from_bytes(b"")
