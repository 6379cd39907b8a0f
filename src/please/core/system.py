"""Operating system label used in the prompt."""

from __future__ import annotations

import sys


def os_label(platform: str | None = None) -> str:
    """Map ``sys.platform`` to a human readable OS name.

    Windows hosts are assumed to run the commands under WSL.
    """
    if platform is None:
        platform = sys.platform
    if platform in ("win32", "cygwin"):
        return "Windows (WSL/Ubuntu)"
    if platform == "darwin":
        return "macOS"
    if platform.startswith("linux"):
        return "Linux"
    return "Unknown"
