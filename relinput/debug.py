"""Optional debug log, switched on through the environment."""

from __future__ import annotations

import os

__all__ = ["is_enabled", "debugf", "debugln"]

_ENABLE_VAR = "RELATIVE_INPUT_DEBUG"
_PATH_VAR = "RELATIVE_INPUT_DEBUG_PATH"


def is_enabled() -> bool:
    """Return True when RELATIVE_INPUT_DEBUG is set to ON."""
    return os.environ.get(_ENABLE_VAR) == "ON"


def _format_operand(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append(text: str) -> int:
    path = os.environ.get(_PATH_VAR, "")
    with open(path, "a", encoding="utf-8") as log:
        return log.write(text)


def debugf(fmt: str, *args: object) -> int:
    """Append a %-formatted message to the debug file.

    Returns the number of characters written, 0 when debugging is off.
    Raises OSError if the file cannot be opened.
    """
    if not is_enabled():
        return 0
    return _append(fmt % args if args else fmt)


def debugln(*args: object) -> int:
    """Append the operands, space-separated and newline-terminated.

    Returns the number of characters written, 0 when debugging is off.
    Raises OSError if the file cannot be opened.
    """
    if not is_enabled():
        return 0
    return _append(" ".join(_format_operand(a) for a in args) + "\n")