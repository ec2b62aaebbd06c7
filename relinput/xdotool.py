"""Replay input on an X display through the xdotool command."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import threading
from enum import IntEnum

__all__ = ["MouseButton", "Xdotool"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _value_of(field: str) -> int:
    _, sep, value = field.partition("=")
    return _atoi(value if sep else field)


class MouseButton(IntEnum):
    """xdotool mouse button numbers."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class Xdotool:
    """Runs xdotool commands against one X display.

    Mouse commands run in the background and return the thread running them;
    key commands run to completion before returning.
    """

    def __init__(self, display: str) -> None:
        self.display = display

    def _exec(self, event: str, *values: str) -> str:
        env = {**os.environ, "DISPLAY": self.display}
        try:
            result = subprocess.run(
                ["xdotool", event, *values],
                capture_output=True,
                text=True,
                env=env,
                check=False,
            )
        except OSError as exc:
            print(f"Failed to input: {exc}", file=sys.stderr)
            return ""
        if result.returncode != 0:
            print(f"Failed to input: exit status {result.returncode}", file=sys.stderr)
        return result.stdout or ""

    def _spawn(self, event: str, *values: str) -> threading.Thread:
        thread = threading.Thread(target=self._exec, args=(event, *values), daemon=True)
        thread.start()
        return thread

    def mouse_move_relative(self, x: int, y: int) -> threading.Thread:
        """Move the pointer by (x, y)."""
        return self._spawn("mousemove_relative", "--", str(x), str(y))

    def mouse_move_absolute(self, x: int, y: int) -> threading.Thread:
        """Move the pointer to (x, y)."""
        return self._spawn("mousemove", "--", str(x), str(y))

    def mouse_down(self, button: int) -> threading.Thread:
        """Press a mouse button."""
        return self._spawn("mousedown", "--", str(int(button)))

    def mouse_up(self, button: int) -> threading.Thread:
        """Release a mouse button."""
        return self._spawn("mouseup", "--", str(int(button)))

    def wheel_up(self) -> threading.Thread:
        """Scroll the wheel up one step."""
        return self._spawn("click", str(int(MouseButton.WHEEL_UP)))

    def wheel_down(self) -> threading.Thread:
        """Scroll the wheel down one step."""
        return self._spawn("click", str(int(MouseButton.WHEEL_DOWN)))

    def get_position(self) -> tuple[int, int]:
        """Return the pointer position, or (0, 0) if it cannot be read."""
        lines = self._exec("getmouselocation", "--shell").split("\n")
        if len(lines) < 2 or "=" not in lines[0]:
            return 0, 0
        return _value_of(lines[0]), _value_of(lines[1])

    def get_window_geometry(self) -> tuple[int, int]:
        """Return the display width and height, or zeros where unreadable."""
        fields = self._exec("getdisplaygeometry").split()
        width = _value_of(fields[0]) if fields else 0
        height = _value_of(fields[1]) if len(fields) > 1 else 0
        return width, height

    def key_down(self, key: str) -> None:
        """Press the key with the given xdotool name."""
        self._exec("keydown", key)

    def key_up(self, key: str) -> None:
        """Release the key with the given xdotool name."""
        self._exec("keyup", key)