"""Full-screen magnifier overlay for wlroots-style Wayland compositors."""

__version__ = "0.1.0"
