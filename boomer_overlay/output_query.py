"""Discover which display output currently has focus."""
from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from typing import Any, List, Optional, Protocol, Sequence

from boomer_overlay.errors import CommandError, NoOutputError, OutputParseError

_LOGGER = logging.getLogger("boomer.overlay.client.outputs")

_QUERY_TIMEOUT = 5.0


@dataclass(frozen=True)
class Output:
    name: str
    focused: bool


class OutputProvider(Protocol):
    """Capability returning the compositor's outputs."""

    def list_outputs(self) -> List[Output]:
        ...


def parse_outputs(raw: str | bytes) -> List[Output]:
    """Parse a JSON array of ``{"name": str, "focused": bool}`` objects.

    Extra keys are ignored; missing or mistyped ``name``/``focused`` fields are
    treated as malformed data.
    """
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise OutputParseError(f"output list is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise OutputParseError(f"expected a JSON array of outputs, got {type(data).__name__}")
    outputs: List[Output] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise OutputParseError(f"output #{index} is not an object")
        name = entry.get("name")
        focused = entry.get("focused")
        if not isinstance(name, str) or not isinstance(focused, bool):
            raise OutputParseError(f"output #{index} lacks a string 'name' and boolean 'focused'")
        outputs.append(Output(name=name, focused=focused))
    return outputs


def select_focused_output(outputs: Sequence[Output]) -> str:
    for output in outputs:
        if output.focused:
            return output.name
    raise NoOutputError([output.name for output in outputs])


def run_helper(command: Sequence[str], *, timeout: float = _QUERY_TIMEOUT) -> bytes:
    """Run an external helper and return its stdout, raising ``CommandError`` on failure."""
    try:
        result = subprocess.run(
            list(command),
            check=False,
            capture_output=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise CommandError(command, "executable not found") from exc
    except subprocess.TimeoutExpired as exc:
        raise CommandError(command, f"timed out after {timeout:.1f}s") from exc
    except (OSError, subprocess.SubprocessError) as exc:
        raise CommandError(command, str(exc)) from exc
    if result.returncode != 0:
        stderr = (result.stderr or b"").decode("utf-8", errors="replace").strip()
        raise CommandError(
            command,
            f"exited with status {result.returncode}" + (f": {stderr}" if stderr else ""),
            returncode=result.returncode,
        )
    return result.stdout or b""


class SwayOutputProvider:
    """Use ``swaymsg`` on sway and other wlroots compositors speaking its IPC."""

    command = ("swaymsg", "-t", "get_outputs", "-r")

    def list_outputs(self) -> List[Output]:
        _LOGGER.debug("Querying outputs via %s", " ".join(self.command))
        return parse_outputs(run_helper(self.command))


class HyprlandOutputProvider:
    """Use ``hyprctl`` monitor JSON on Hyprland."""

    command = ("hyprctl", "monitors", "-j")

    def list_outputs(self) -> List[Output]:
        _LOGGER.debug("Querying outputs via %s", " ".join(self.command))
        return parse_outputs(run_helper(self.command))


def create_output_provider(compositor: Optional[str] = None) -> OutputProvider:
    """Pick the output query backend for ``compositor`` (sway when unknown)."""
    name = (compositor or "").lower()
    if name == "hyprland":
        return HyprlandOutputProvider()
    if name and name not in {"sway", "wlroots", "wayfire"}:
        _LOGGER.info("No output query for compositor '%s'; trying swaymsg", name)
    return SwayOutputProvider()
