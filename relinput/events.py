"""Event categories carried on the wire, and the lookup error for key tables."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["EventType", "KeyNotFoundError"]


class EventType(IntEnum):
    """Kind of input event; the integer value is what goes on the wire."""

    MOUSE = 0
    MOUSE_MOVE = 1
    WHEEL = 2
    KEY = 3


class KeyNotFoundError(LookupError):
    """Raised when a key code or event-input name has no entry in a key table."""

    def __init__(self, key: object = None) -> None:
        self.key = key
        super().__init__("NotFound" if key is None else f"NotFound: {key!r}")