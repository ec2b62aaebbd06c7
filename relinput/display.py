"""Locate the running X display and read its screen size."""

from __future__ import annotations

import os
import re
import subprocess

__all__ = ["find_display", "parse_xrandr_size", "get_display", "get_display_size"]

_XORG_MARKER = "/usr/lib/xorg/Xorg "
_XVNC_MARKER = "/usr/bin/Xvnc "
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _token_after(output: str, marker: str) -> str | None:
    _, found, rest = output.partition(marker)
    if not found:
        return None
    tokens = rest.split(maxsplit=1)
    return tokens[0] if tokens else ""


def find_display(xorg_output: str, xvnc_output: str) -> str:
    """Return the display named on an Xorg command line, else on an Xvnc one.

    Both arguments are process listings. Raises LookupError if neither
    names a display server.
    """
    for output, marker in ((xorg_output, _XORG_MARKER), (xvnc_output, _XVNC_MARKER)):
        display = _token_after(output, marker)
        if display is not None:
            return display
    raise LookupError("no Xorg or Xvnc display found")


def parse_xrandr_size(output: str) -> tuple[int, int]:
    """Return the current screen size from xrandr output, or (0, 0)."""
    parts = output.split(",")
    if len(parts) < 2:
        return 0, 0
    current = parts[1].strip()
    if "current" not in current:
        return 0, 0
    axis = current.split(" ")
    if len(axis) < 4:
        return 0, 0
    return _atoi(axis[1]), _atoi(axis[3])


def _run(args: list[str], env: dict[str, str] | None = None) -> str:
    try:
        result = subprocess.run(args, capture_output=True, text=True, env=env, check=False)
    except OSError:
        return ""
    return result.stdout or ""


def _ps(name: str) -> str:
    return _run(["bash", "-c", f"ps -x|grep {name}"])


def get_display() -> str:
    """Return the display of the running Xorg or Xvnc server.

    Raises LookupError if no such server is running.
    """
    xorg_output = _ps("Xorg")
    display = _token_after(xorg_output, _XORG_MARKER)
    if display is not None:
        return display
    return find_display(xorg_output, _ps("Xvnc"))


def get_display_size(display: str) -> tuple[int, int]:
    """Return the current size of the given display, or (0, 0)."""
    env = {**os.environ, "DISPLAY": display}
    return parse_xrandr_size(_run(["/usr/bin/xrandr"], env=env))