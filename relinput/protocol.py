"""The line-based wire format: four space-separated integers per event."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from relinput.events import EventType

__all__ = ["MouseMoveType", "InputType", "Event", "Sender", "parse_event"]

_UINT32_MAX = 2**32 - 1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


class MouseMoveType(IntEnum):
    """How the coordinates of a mouse-move event are meant."""

    RELATIVE = 0
    ABSOLUTE = 1


class InputType(IntEnum):
    """Whether a key, button or wheel event is a press or a release."""

    KEY_DOWN = 0
    KEY_UP = 1


@dataclass(frozen=True)
class Event:
    """One event line: type and input are unsigned 32-bit, values signed 32-bit."""

    event_type: int
    input: int
    value1: int
    value2: int

    def __post_init__(self) -> None:
        for name in ("event_type", "input"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT32_MAX:
                raise ValueError(f"{name} out of uint32 range: {value}")
        for name in ("value1", "value2"):
            value = getattr(self, name)
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError(f"{name} out of int32 range: {value}")

    def to_line(self) -> str:
        """Return the wire line for this event, newline included."""
        return f"{self.event_type} {self.input} {self.value1} {self.value2}\n"


def _parse_field(text: str, pattern: re.Pattern[str], low: int, high: int) -> int:
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid integer field: {text!r}")
    value = int(text)
    if not low <= value <= high:
        raise ValueError(f"integer field out of range: {text!r}")
    return value


def parse_event(line: str) -> Event:
    """Parse one wire line into an Event.

    Fields beyond the fourth are ignored. Raises ValueError if there are fewer
    than four fields or a field is not a valid integer of its width.
    """
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    fields = line.split(" ")
    if len(fields) < 4:
        raise ValueError(f"expected 4 fields, got {len(fields)}: {line!r}")
    return Event(
        _parse_field(fields[0], _UNSIGNED, 0, _UINT32_MAX),
        _parse_field(fields[1], _UNSIGNED, 0, _UINT32_MAX),
        _parse_field(fields[2], _SIGNED, _INT32_MIN, _INT32_MAX),
        _parse_field(fields[3], _SIGNED, _INT32_MIN, _INT32_MAX),
    )


class Sender:
    """Writes events as wire lines to a text stream."""

    def __init__(self, writer: TextIO) -> None:
        self.writer = writer

    def _send(self, event: Event) -> None:
        self.writer.write(event.to_line())

    def send_relative_cursor(self, x: int, y: int) -> None:
        """Send a cursor movement by (x, y)."""
        self._send(Event(EventType.MOUSE_MOVE, MouseMoveType.RELATIVE, x, y))

    def send_absolute_cursor(self, x: int, y: int) -> None:
        """Send a cursor movement to (x, y)."""
        self._send(Event(EventType.MOUSE_MOVE, MouseMoveType.ABSOLUTE, x, y))

    def send_input(self, event_type: EventType, key_value: int, state: InputType) -> None:
        """Send a press or release of a key, button or wheel."""
        self._send(Event(int(event_type), int(key_value), int(state), 0))