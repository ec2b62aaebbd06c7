import pytest

from relinput.events import EventType, KeyNotFoundError
from relinput.windows_keys import (
    WINDOWS_KEYS,
    get_windows_key_detail,
    get_windows_key_detail_from_event_input,
)


def test_lookup_f8_by_code():
    key = get_windows_key_detail(0x77)
    assert key.constant == "VK_F8"
    assert key.event_input == "F8"
    assert key.event_type == EventType.KEY


def test_lookup_f8_by_event_input():
    key = get_windows_key_detail_from_event_input("F8")
    assert key.value == 0x77
    assert key.constant == "VK_F8"


def test_mouse_button_entry():
    key = get_windows_key_detail(0x01)
    assert key.constant == "VK_LBUTTON"
    assert key.event_type == EventType.MOUSE
    assert key.event_input == "left"


def test_unknown_code_raises():
    with pytest.raises(KeyNotFoundError):
        get_windows_key_detail(0x0A)


def test_unknown_event_input_raises():
    with pytest.raises(KeyNotFoundError):
        get_windows_key_detail_from_event_input("no_such_key_name")


def test_error_is_lookup_error():
    with pytest.raises(LookupError):
        get_windows_key_detail(0xFF)


def test_every_code_lookup_returns_its_own_value():
    for code in WINDOWS_KEYS:
        assert get_windows_key_detail(code).value == code


def test_event_input_lookup_matches_name():
    for key in WINDOWS_KEYS.values():
        found = get_windows_key_detail_from_event_input(key.event_input)
        assert found.event_input == key.event_input


def test_shared_name_resolves_to_lowest_code():
    for key in WINDOWS_KEYS.values():
        found = get_windows_key_detail_from_event_input(key.event_input)
        assert found.value <= key.value


def test_print_shared_by_two_codes():
    assert get_windows_key_detail(0x2A).event_input == "Print"
    assert get_windows_key_detail(0x2C).event_input == "Print"
    assert get_windows_key_detail_from_event_input("Print").value == 0x2A


def test_unique_names_round_trip():
    names = [k.event_input for k in WINDOWS_KEYS.values()]
    for key in WINDOWS_KEYS.values():
        if names.count(key.event_input) == 1:
            assert get_windows_key_detail_from_event_input(key.event_input) == key