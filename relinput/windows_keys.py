"""Lookups in the Windows virtual-key table, by code or by xdotool key name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from relinput.events import KeyNotFoundError
from relinput.windows_keytable import WINDOWS_KEYS, WindowsKey

__all__ = [
    "WindowsKey",
    "WINDOWS_KEYS",
    "get_windows_key_detail",
    "get_windows_key_detail_from_event_input",
]


def _index_by_event_input(keys: Mapping[int, WindowsKey]) -> Mapping[str, WindowsKey]:
    # Several codes share a name (e.g. both shift keys are "shift");
    # the lowest code wins so that lookups are stable.
    index: dict[str, WindowsKey] = {}
    for code in sorted(keys):
        key = keys[code]
        index.setdefault(key.event_input, key)
    return MappingProxyType(index)


_BY_EVENT_INPUT: Mapping[str, WindowsKey] = _index_by_event_input(WINDOWS_KEYS)


def get_windows_key_detail(code: int) -> WindowsKey:
    """Return the key for a Windows virtual-key code.

    Raises KeyNotFoundError if the code is not in the table.
    """
    try:
        return WINDOWS_KEYS[code]
    except KeyError:
        raise KeyNotFoundError(code) from None


def get_windows_key_detail_from_event_input(event_input: str) -> WindowsKey:
    """Return the key replayed under the given xdotool key name.

    Where several codes share the name, the one with the lowest code is
    returned. Raises KeyNotFoundError if no key has that name.
    """
    try:
        return _BY_EVENT_INPUT[event_input]
    except KeyError:
        raise KeyNotFoundError(event_input) from None