"""Clipboard utilities for cross-platform branch name copying."""

import os
import platform
import subprocess
from typing import List

from tikit.api.exceptions import SideEffectError


def detect_platform() -> str:
    """Detect the current platform for clipboard operations.

    Returns:
        Platform identifier: 'macos', 'windows', 'wayland', 'x11', 'wsl', 'linux' or 'unknown'
    """
    system = platform.system().lower()

    if system == "darwin":
        return "macos"
    if system == "windows":
        return "windows"
    if system == "linux":
        if "microsoft" in platform.uname().release.lower():
            return "wsl"
        if os.environ.get("WAYLAND_DISPLAY"):
            return "wayland"
        if os.environ.get("DISPLAY"):
            return "x11"
        return "linux"

    return "unknown"


def clipboard_commands(platform_type: str) -> List[List[str]]:
    """Candidate clipboard writer commands for a platform, in preference order."""
    return {
        "macos": [["pbcopy"]],
        "windows": [["clip"]],
        "wsl": [["clip.exe"]],
        "wayland": [["wl-copy"]],
        "x11": [["xclip", "-selection", "clipboard"], ["xsel", "--clipboard", "--input"]],
    }.get(platform_type, [])


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard.

    Raises:
        SideEffectError: no clipboard tool is available or every candidate failed
    """
    platform_type = detect_platform()
    commands = clipboard_commands(platform_type)
    if not commands:
        raise SideEffectError(f"No clipboard support on platform '{platform_type}'")

    last_error: Exception | None = None
    for cmd in commands:
        try:
            subprocess.run(cmd, input=text, text=True, check=True)
            return
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            last_error = e

    raise SideEffectError(f"Error copying to clipboard: {last_error}")
