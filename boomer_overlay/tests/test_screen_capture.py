from __future__ import annotations

import types

import pytest

from boomer_overlay import output_query
from boomer_overlay.errors import CommandError
from boomer_overlay.screen_capture import GrimCapturer


def test_grim_captures_named_output(monkeypatch):
    seen = []

    def fake_run(command, **kwargs):
        seen.append(command)
        return types.SimpleNamespace(stdout=b"\x89PNG...", stderr=b"", returncode=0)

    monkeypatch.setattr(output_query.subprocess, "run", fake_run)
    assert GrimCapturer().capture("HDMI-1") == b"\x89PNG..."
    assert seen == [["grim", "-o", "HDMI-1", "-"]]


def test_grim_empty_output_is_an_error(monkeypatch):
    monkeypatch.setattr(
        output_query.subprocess,
        "run",
        lambda command, **kwargs: types.SimpleNamespace(stdout=b"", stderr=b"", returncode=0),
    )
    with pytest.raises(CommandError):
        GrimCapturer().capture("HDMI-1")


def test_grim_failure_propagates(monkeypatch):
    monkeypatch.setattr(
        output_query.subprocess,
        "run",
        lambda command, **kwargs: types.SimpleNamespace(stdout=b"", stderr=b"unknown output", returncode=1),
    )
    with pytest.raises(CommandError) as excinfo:
        GrimCapturer(binary="/usr/bin/grim").capture("nope")
    assert excinfo.value.command[0] == "/usr/bin/grim"
