"""Linux key codes with their xdotool names and matching Windows virtual keys."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from relinput.events import KeyNotFoundError

__all__ = [
    "LinuxKey",
    "LINUX_KEYS",
    "get_linux_key_detail",
    "get_linux_key_detail_from_event_input",
]


@dataclass(frozen=True)
class LinuxKey:
    """One Linux key code.

    ``windows_key`` is the matching Windows virtual-key code (0 when there is
    none); ``event_input`` is the xdotool key name, empty when there is none.
    """

    constant: str
    value: int
    description: str
    windows_key: int = 0
    event_input: str = ""


# (code, name, xdotool key name, Windows virtual-key code)
_ROWS: list[tuple[int, str, str, int]] = [
    (53, "Esc", "Escape", 0x1B),
    (122, "F1", "F1", 0x70),
    (120, "F2", "F2", 0x71),
    (99, "F3", "F3", 0x72),
    (118, "F4", "F4", 0x73),
    (96, "F5", "F5", 0x74),
    (97, "F6", "F6", 0x75),
    (98, "F7", "F7", 0x76),
    (100, "F8", "F8", 0x77),
    (101, "F9", "F9", 0x78),
    (109, "F10", "F10", 0x79),
    (103, "F11", "F11", 0x7A),
    (127, "F12", "F12", 0x7B),
    (105, "PrintScrn", "Print", 0x2A),
    (107, "Scroll Lock", "Scroll_Lock", 0x91),
    (113, "Pause", "Pause", 0x13),
    (50, "`", "", 0),
    (18, "1", "1", 0x31),
    (19, "2", "2", 0x32),
    (20, "3", "3", 0x33),
    (21, "4", "4", 0x34),
    (23, "5", "5", 0x35),
    (22, "6", "6", 0x36),
    (26, "7", "7", 0x37),
    (28, "8", "8", 0x38),
    (25, "9", "9", 0x39),
    (29, "0", "0", 0x30),
    (27, "-", "minus", 0x6D),
    (24, "=", "", 0),
    (51, "Backspace", "BackSpace", 0x08),
    (114, "Insert", "Insert", 0x2D),
    (115, "Home", "Home", 0x24),
    (116, "Page Up", "Page_Up", 0x21),
    (71, "Num Lock", "Num_Lock", 0x90),
    (75, "KP /", "", 0),
    (67, "KP *", "", 0),
    (78, "KP -", "", 0),
    (48, "Tab", "Tab", 0x09),
    (12, "Q", "q", 0x51),
    (13, "W", "w", 0x57),
    (14, "E", "e", 0x45),
    (15, "R", "r", 0x52),
    (17, "T", "t", 0x54),
    (16, "Y", "y", 0x59),
    (32, "U", "u", 0x55),
    (34, "I", "i", 0x49),
    (31, "O", "o", 0x4F),
    (35, "P", "p", 0x50),
    (33, "[", "[", 0),
    (30, "]", "]", 0),
    (36, "Return", "Return", 0x0D),
    (117, "Delete", "Delete", 0x2E),
    (119, "End", "End", 0x23),
    (121, "Page Down", "Page_Down", 0x22),
    (89, "KP 7", "", 0),
    (91, "KP 8", "", 0),
    (92, "KP 9", "", 0),
    (69, "KP +", "", 0),
    (57, "Caps Lock", "Caps_Lock", 0x14),
    (0, "A", "a", 0x41),
    (1, "S", "s", 0x53),
    (2, "D", "d", 0x44),
    (3, "F", "f", 0x46),
    (5, "G", "g", 0x47),
    (4, "H", "h", 0x48),
    (38, "J", "j", 0x4A),
    (40, "K", "k", 0x4B),
    (37, "L", "l", 0x4C),
    (41, ";", ";", 0),
    (39, "'", "'", 0),
    (86, "KP 4", "", 0),
    (87, "KP 5", "", 0),
    (88, "KP 6", "", 0),
    (56, "Shift Left", "shift", 0xA0),
    (6, "Z", "z", 0x5A),
    (7, "X", "x", 0x58),
    (8, "C", "c", 0x43),
    (9, "V", "v", 0x56),
    (11, "B", "b", 0x42),
    (45, "N", "n", 0x4D),
    (46, "M", "m", 0x53),
    (43, ",", "comma", 0),
    (47, ".", "period", 0x6E),
    (44, "/", "slash", 0x6F),
    (42, "\\", "backslash", 0),
    (62, "Cursor Up", "Up", 0x26),
    (83, "KP 1", "", 0),
    (84, "KP 2", "", 0),
    (85, "KP 3", "", 0),
    (76, "KP Enter", "", 0),
    (54, "Ctrl Left", "ctrl", 0xA2),
    (58, "Logo Left (-> Option)", "", 0x5B),
    (55, "Alt Left (-> Command)", "alt", 0x12),
    (49, "Space", "space", 0x20),
    (59, "Cursor Left", "Left", 0x25),
    (61, "Cursor Down", "Down", 0x28),
    (60, "Cursor Right", "Right", 0x27),
    (82, "KP 0", "", 0),
    (65, "KP .", "", 0),
]

#: Linux key code to key detail, in ascending code order.
LINUX_KEYS: Mapping[int, LinuxKey] = MappingProxyType(
    {
        code: LinuxKey(name, code, name, windows_key, event_input)
        for code, name, event_input, windows_key in sorted(_ROWS)
    }
)

del _ROWS


def _index_by_event_input(keys: Mapping[int, LinuxKey]) -> Mapping[str, LinuxKey]:
    # Where several codes share a name, the lowest code wins.
    index: dict[str, LinuxKey] = {}
    for code in sorted(keys):
        index.setdefault(keys[code].event_input, keys[code])
    return MappingProxyType(index)


_BY_EVENT_INPUT: Mapping[str, LinuxKey] = _index_by_event_input(LINUX_KEYS)


def get_linux_key_detail(code: int) -> LinuxKey:
    """Return the key for a Linux key code.

    Raises KeyNotFoundError if the code is not in the table.
    """
    try:
        return LINUX_KEYS[code]
    except KeyError:
        raise KeyNotFoundError(code) from None


def get_linux_key_detail_from_event_input(event_input: str) -> LinuxKey:
    """Return the key with the given xdotool key name.

    Where several codes share the name, the one with the lowest code is
    returned. Raises KeyNotFoundError if no key has that name.
    """
    try:
        return _BY_EVENT_INPUT[event_input]
    except KeyError:
        raise KeyNotFoundError(event_input) from None