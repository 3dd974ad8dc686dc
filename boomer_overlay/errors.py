"""Startup failures for the magnifier overlay."""
from __future__ import annotations

from typing import Optional, Sequence


class StartupError(Exception):
    """Base class for failures that abort the process before the window is shown."""


class CommandError(StartupError):
    """An external helper could not be run or exited unsuccessfully."""

    def __init__(self, command: Sequence[str], detail: str, *, returncode: Optional[int] = None) -> None:
        self.command = tuple(command)
        self.detail = detail
        self.returncode = returncode
        super().__init__(f"{' '.join(self.command)}: {detail}")


class OutputParseError(StartupError):
    """The display query returned data that is not a list of outputs."""


class NoOutputError(StartupError):
    """None of the reported outputs is focused."""

    def __init__(self, names: Sequence[str] = ()) -> None:
        self.names = tuple(names)
        known = ", ".join(self.names) if self.names else "none reported"
        super().__init__(f"no focused output (outputs: {known})")


class ImageDecodeError(StartupError):
    """The captured screenshot bytes could not be decoded into an image."""
