"""Windows virtual-key codes with their names and xdotool key names."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from relinput.events import EventType

__all__ = ["WindowsKey", "WINDOWS_KEYS"]


@dataclass(frozen=True)
class WindowsKey:
    """One Windows virtual key.

    ``event_input`` is the xdotool key name the key is replayed as; an empty
    string means the key has no counterpart.
    """

    constant: str
    value: int
    description: str
    event_type: EventType
    event_input: str


_M = EventType.MOUSE
_K = EventType.KEY

_MISC = "Used for miscellaneous characters; it can vary by keyboard."
_PACKET = (
    "Used to pass Unicode characters as if they were keystrokes. The VK_PACKET key "
    "is the low word of a 32-bit Virtual Key value used for non-keyboard input "
    "methods. For more information, see Remark in KEYBDINPUT, SendInput, "
    "WM_KEYDOWN, and WM_KEYUP"
)

_ROWS: list[tuple[int, str, str, EventType, str]] = [
    (0x01, "VK_LBUTTON", "Left mouse button", _M, "left"),
    (0x02, "VK_RBUTTON", "Right mouse button", _M, "right"),
    (0x03, "VK_CANCEL", "Control-break processing", _M, ""),
    (0x04, "VK_MBUTTON", "Middle mouse button (three-button mouse)", _M, "middle"),
    (0x05, "VK_XBUTTON1", "X1 mouse button", _M, ""),
    (0x06, "VK_XBUTTON2", "X2 mouse button", _M, ""),
    (0x07, "", "Undefined", _K, ""),
    (0x08, "VK_BACK", "BACKSPACE key", _K, "BackSpace"),
    (0x09, "VK_TAB", "TAB key", _K, "Tab"),
    (0x0C, "VK_CLEAR", "CLEAR key", _K, "Clear"),
    (0x0D, "VK_RETURN", "ENTER key", _K, "Return"),
    (0x10, "VK_SHIFT", "SHIFT key", _K, "shift"),
    (0x11, "VK_CONTROL", "CTRL key", _K, "ctrl"),
    (0x12, "VK_MENU", "ALT key", _K, "alt"),
    (0x13, "VK_PAUSE", "PAUSE key", _K, "Pause"),
    (0x14, "VK_CAPITAL", "CAPS LOCK key", _K, "Caps_Lock"),
    (0x15, "VK_KANA", "IME Kana mode", _K, "kana_switch"),
    (0x16, "VK_IME_ON", "IME On", _K, ""),
    (0x17, "VK_JUNJA", "IME Junja mode", _K, ""),
    (0x18, "VK_FINAL", "IME final mode", _K, ""),
    (0x19, "VK_KANJI", "IME Kanji mode", _K, "kana_switch"),
    (0x1A, "VK_IME_OFF", "IME Off", _K, ""),
    (0x1B, "VK_ESCAPE", "ESC key", _K, "Escape"),
    (0x1C, "VK_CONVERT", "IME convert", _K, ""),
    (0x1D, "VK_NONCONVERT", "IME nonconvert", _K, ""),
    (0x1E, "VK_ACCEPT", "IME accept", _K, ""),
    (0x1F, "VK_MODECHANGE", "IME mode change request", _K, ""),
    (0x20, "VK_SPACE", "SPACEBAR", _K, "space"),
    (0x21, "VK_PRIOR", "PAGE UP key", _K, "Page_Up"),
    (0x22, "VK_NEXT", "PAGE DOWN key", _K, "Page_Down"),
    (0x23, "VK_END", "END key", _K, "End"),
    (0x24, "VK_HOME", "HOME key", _K, "Home"),
    (0x25, "VK_LEFT", "LEFT ARROW key", _K, "Left"),
    (0x26, "VK_UP", "UP ARROW key", _K, "Up"),
    (0x27, "VK_RIGHT", "RIGHT ARROW key", _K, "Right"),
    (0x28, "VK_DOWN", "DOWN ARROW key", _K, "Down"),
    (0x29, "VK_SELECT", "SELECT key", _K, "Select"),
    (0x2A, "VK_PRINT", "PRINT key", _K, "Print"),
    (0x2B, "VK_EXECUTE", "EXECUTE key", _K, "Execute"),
    (0x2C, "VK_SNAPSHOT", "PRINT SCREEN key", _K, "Print"),
    (0x2D, "VK_INSERT", "INS key", _K, "Insert"),
    (0x2E, "VK_DELETE", "DEL key", _K, "Delete"),
    (0x2F, "VK_HELP", "HELP key", _K, "Help"),
]

# Digit and letter keys: "0 key".."9 key", "A key".."Z key".
_ROWS += [
    (ord(ch), f"{ch} key", f"{ch} key", _K, ch.lower())
    for ch in "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
]

_ROWS += [
    (0x5B, "VK_LWIN", "Left Windows key (Natural keyboard)", _K, "Super_L"),
    (0x5C, "VK_RWIN", "Right Windows key (Natural keyboard)", _K, "Super_R"),
    (0x5D, "VK_APPS", "Applications key (Natural keyboard)", _K, ""),
    (0x5E, "", "Reserved", _K, ""),
    (0x5F, "VK_SLEEP", "Computer Sleep key", _K, ""),
]

_ROWS += [
    (0x60 + n, f"VK_NUMPAD{n}", f"Numeric keypad {n} key", _K, str(n))
    for n in range(10)
]

_ROWS += [
    (0x6A, "VK_MULTIPLY", "Multiply key", _K, "multiply"),
    (0x6B, "VK_ADD", "Add key", _K, ""),
    (0x6C, "VK_SEPARATOR", "Separator key", _K, "bar"),
    (0x6D, "VK_SUBTRACT", "Subtract key", _K, "minus"),
    (0x6E, "VK_DECIMAL", "Decimal key", _K, "period"),
    (0x6F, "VK_DIVIDE", "Divide key", _K, "slash"),
]

_ROWS += [
    (0x70 + n - 1, f"VK_F{n}", f"F{n} key", _K, f"F{n}")
    for n in range(1, 25)
]

_ROWS += [
    (0x90, "VK_NUMLOCK", "NUM LOCK key", _K, "Num_Lock"),
    (0x91, "VK_SCROLL", "SCROLL LOCK key", _K, "Scroll_Lock"),
    (0xA0, "VK_LSHIFT", "Left SHIFT key", _K, "shift"),
    (0xA1, "VK_RSHIFT", "Right SHIFT key", _K, "shift"),
    (0xA2, "VK_LCONTROL", "Left CONTROL key", _K, "ctrl"),
    (0xA3, "VK_RCONTROL", "Right CONTROL key", _K, "ctrl"),
    (0xA4, "VK_LMENU", "Left MENU key", _K, "Menu"),
    (0xA5, "VK_RMENU", "Right MENU key", _K, "Menu"),
    (0xA6, "VK_BROWSER_BACK", "Browser Back key", _K, ""),
    (0xA7, "VK_BROWSER_FORWARD", "Browser Forward key", _K, ""),
    (0xA8, "VK_BROWSER_REFRESH", "Browser Refresh key", _K, ""),
    (0xA9, "VK_BROWSER_STOP", "Browser Stop key", _K, ""),
    (0xAA, "VK_BROWSER_SEARCH", "Browser Search key", _K, ""),
    (0xAB, "VK_BROWSER_FAVORITES", "Browser Favorites key", _K, ""),
    (0xAC, "VK_BROWSER_HOME", "Browser Start and Home key", _K, ""),
    (0xAD, "VK_VOLUME_MUTE", "Volume Mute key", _K, ""),
    (0xAE, "VK_VOLUME_DOWN", "Volume Down key", _K, ""),
    (0xAF, "VK_VOLUME_UP", "Volume Up key", _K, ""),
    (0xB0, "VK_MEDIA_NEXT_TRACK", "Next Track key", _K, ""),
    (0xB1, "VK_MEDIA_PREV_TRACK", "Previous Track key", _K, ""),
    (0xB2, "VK_MEDIA_STOP", "Stop Media key", _K, ""),
    (0xB3, "VK_MEDIA_PLAY_PAUSE", "Play/Pause Media key", _K, ""),
    (0xB4, "VK_LAUNCH_MAIL", "Start Mail key", _K, ""),
    (0xB5, "VK_LAUNCH_MEDIA_SELECT", "Select Media key", _K, ""),
    (0xB6, "VK_LAUNCH_APP1", "Start Application 1 key", _K, ""),
    (0xB7, "VK_LAUNCH_APP2", "Start Application 2 key", _K, ""),
    (0xBA, "VK_OEM_1", _MISC, _K, ""),
    (0xBB, "VK_OEM_PLUS", "For any country/region, the '+' key", _K, "semicolon"),
    (0xBC, "VK_OEM_COMMA", "For any country/region, the ',' key", _K, "comma"),
    (0xBD, "VK_OEM_MINUS", "For any country/region, the '-' key", _K, "minus"),
    (0xBE, "VK_OEM_PERIOD", "For any country/region, the '.' key", _K, "period"),
    (0xBF, "VK_OEM_2", _MISC, _K, ""),
    (0xC0, "VK_OEM_3", _MISC, _K, ""),
    (0xDB, "VK_OEM_4", _MISC, _K, "parenleft"),
    (0xDC, "VK_OEM_5", _MISC, _K, "backslash"),
    (0xDD, "VK_OEM_6", _MISC, _K, "parenright"),
    (0xDE, "VK_OEM_7", _MISC, _K, "caret"),
    (0xDF, "VK_OEM_8", _MISC, _K, ""),
    (0xE0, "", "Reserved", _K, ""),
    (0xE1, "", "OEM specific", _K, ""),
    (
        0xE2,
        "VK_OEM_102",
        "Either the angle bracket key or the backslash key on the RT 102-key keyboard",
        _K,
        "underscore",
    ),
    (0xE5, "VK_PROCESSKEY", "IME PROCESS key", _K, ""),
    (0xE6, "", "OEM specific", _K, ""),
    (0xE7, "VK_PACKET", _PACKET, _K, ""),
    (0xE8, "", "Unassigned", _K, ""),
    (0xF6, "VK_ATTN", "Attn key", _K, "3270_Attn"),
    (0xF7, "VK_CRSEL", "CrSel key", _K, ""),
    (0xF8, "VK_EXSEL", "ExSel key", _K, ""),
    (0xF9, "VK_EREOF", "Erase EOF key", _K, ""),
    (0xFA, "VK_PLAY", "Play key", _K, ""),
    (0xFB, "VK_ZOOM", "Zoom key", _K, ""),
    (0xFC, "VK_NONAME", "Reserved", _K, ""),
    (0xFD, "VK_PA1", "PA1 key", _K, "PA1"),
    (0xFE, "VK_OEM_CLEAR", "Clear key", _K, "Clear"),
]

#: Virtual-key code to key detail, in ascending code order.
WINDOWS_KEYS: Mapping[int, WindowsKey] = MappingProxyType(
    {
        value: WindowsKey(constant, value, description, event_type, event_input)
        for value, constant, description, event_type, event_input in sorted(_ROWS)
    }
)

del _ROWS