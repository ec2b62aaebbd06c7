import dataclasses

import pytest

from relinput.events import EventType
from relinput.windows_keytable import WINDOWS_KEYS, WindowsKey


def test_every_entry_is_keyed_by_its_own_value():
    assert all(code == key.value for code, key in WINDOWS_KEYS.items())


def test_codes_fit_in_a_byte():
    assert all(0 < code < 0x100 for code in WINDOWS_KEYS.keys())


def test_codes_are_in_ascending_order():
    codes = list(WINDOWS_KEYS.keys())
    assert codes == sorted(codes)


def test_f8_entry():
    key = WINDOWS_KEYS[0x77]
    assert key == WindowsKey("VK_F8", 0x77, "F8 key", EventType.KEY, "F8")


def test_left_mouse_button_entry():
    key = WINDOWS_KEYS.get(0x01)
    assert key == WindowsKey("VK_LBUTTON", 0x01, "Left mouse button", EventType.MOUSE, "left")
    assert key.event_type is EventType.MOUSE


@pytest.mark.parametrize("code", [0x01, 0x02, 0x03, 0x04, 0x05, 0x06])
def test_mouse_buttons_are_mouse_events(code):
    assert WINDOWS_KEYS.get(code).event_type is EventType.MOUSE


def test_only_mouse_buttons_are_mouse_events():
    mouse_codes = {c for c, k in WINDOWS_KEYS.items() if k.event_type is EventType.MOUSE}
    assert mouse_codes == {0x01, 0x02, 0x03, 0x04, 0x05, 0x06}


@pytest.mark.parametrize("ch", list("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
def test_digit_and_letter_keys(ch):
    key = WINDOWS_KEYS.get(ord(ch))
    assert key.constant == f"{ch} key"
    assert key.event_input == ch.lower()


def test_numpad_keys_share_digit_names():
    for n in range(10):
        assert WINDOWS_KEYS.get(0x60 + n).event_input == WINDOWS_KEYS.get(0x30 + n).event_input


def test_function_keys_span_f1_to_f24():
    assert WINDOWS_KEYS.get(0x70).event_input == "F1"
    last = WINDOWS_KEYS.get(0x87)
    assert last.event_input == "F24"
    assert last.constant == "VK_F24"


def test_selected_event_inputs():
    assert WINDOWS_KEYS.get(0x1B).event_input == "Escape"
    assert WINDOWS_KEYS.get(0x2C).event_input == "Print"
    assert WINDOWS_KEYS.get(0xF6).event_input == "3270_Attn"
    assert WINDOWS_KEYS.get(0xE2).event_input == "underscore"


@pytest.mark.parametrize("code", [0x0A, 0x0B, 0x3A, 0x40, 0x88, 0xFF])
def test_gaps_in_code_space_are_absent(code):
    assert WINDOWS_KEYS.get(code, "absent") == "absent"


def test_entries_are_immutable():
    key = WINDOWS_KEYS.get(0x09)
    with pytest.raises(dataclasses.FrozenInstanceError):
        key.event_input = "x"  # type: ignore[misc]
    assert WINDOWS_KEYS.get(0x09).event_input == "Tab"


def test_table_is_read_only():
    tab = WINDOWS_KEYS.get(0x09)
    with pytest.raises(TypeError):
        WINDOWS_KEYS[0x0A] = tab  # type: ignore[index]
    assert WINDOWS_KEYS.get(0x0A, "absent") == "absent"