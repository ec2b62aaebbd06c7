"""Read wire events and replay them on the local X display."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from relinput.display import get_display
from relinput.events import EventType, KeyNotFoundError
from relinput.protocol import Event, InputType, MouseMoveType, parse_event
from relinput.windows_keys import get_windows_key_detail
from relinput.xdotool import MouseButton, Xdotool

__all__ = ["dispatch", "serve", "main"]

# Windows virtual-key codes of the mouse buttons as sent on the wire.
_BUTTONS = {
    0x01: MouseButton.LEFT,
    0x02: MouseButton.RIGHT,
    0x04: MouseButton.MIDDLE,
}


def dispatch(xdot: Xdotool, event: Event) -> None:
    """Replay one event; events that mean nothing here are ignored."""
    state = event.value1
    if event.event_type == EventType.MOUSE_MOVE:
        if event.input == MouseMoveType.RELATIVE:
            xdot.mouse_move_relative(event.value1, event.value2)
        elif event.input == MouseMoveType.ABSOLUTE:
            xdot.mouse_move_absolute(event.value1, event.value2)
    elif event.event_type == EventType.MOUSE:
        button = _BUTTONS.get(event.input)
        if button is None:
            return
        if state == InputType.KEY_DOWN:
            xdot.mouse_down(button)
        elif state == InputType.KEY_UP:
            xdot.mouse_up(button)
    elif event.event_type == EventType.WHEEL:
        if state == InputType.KEY_DOWN:
            xdot.wheel_down()
        elif state == InputType.KEY_UP:
            xdot.wheel_up()
    elif event.event_type == EventType.KEY:
        try:
            key = get_windows_key_detail(event.input)
        except KeyNotFoundError:
            return
        if not key.event_input:
            return
        if state == InputType.KEY_DOWN:
            xdot.key_down(key.event_input)
        elif state == InputType.KEY_UP:
            xdot.key_up(key.event_input)


def serve(lines: Iterable[str], xdot: Xdotool) -> None:
    """Replay every well-formed event line; malformed lines are skipped."""
    for line in lines:
        try:
            event = parse_event(line)
        except ValueError:
            continue
        dispatch(xdot, event)


def main(argv: list[str] | None = None) -> int:
    """Replay events read from standard input on the running X display."""
    parser = argparse.ArgumentParser(
        prog="relinput-server",
        description="Replay input events from standard input on the X display.",
    )
    parser.parse_args(argv)
    xdot = Xdotool(get_display())
    serve(sys.stdin, xdot)
    return 0


if __name__ == "__main__":
    sys.exit(main())