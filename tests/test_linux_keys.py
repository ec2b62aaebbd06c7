import pytest

from relinput.events import KeyNotFoundError
from relinput.linux_keys import (
    LINUX_KEYS,
    get_linux_key_detail,
    get_linux_key_detail_from_event_input,
)
from relinput.windows_keys import get_windows_key_detail


def test_f8_by_code():
    key = get_linux_key_detail(100)
    assert key.constant == "F8"
    assert key.event_input == "F8"
    assert key.windows_key == 0x77


def test_escape_by_event_input():
    key = get_linux_key_detail_from_event_input("Escape")
    assert key.value == 53
    assert key.windows_key == 0x1B


def test_key_without_windows_counterpart_defaults():
    key = get_linux_key_detail(50)
    assert key.description == "`"
    assert key.windows_key == 0
    assert key.event_input == ""


def test_unknown_code_raises():
    with pytest.raises(KeyNotFoundError):
        get_linux_key_detail(10)


def test_unknown_event_input_raises():
    with pytest.raises(KeyNotFoundError):
        get_linux_key_detail_from_event_input("no-such-key")


def test_values_match_codes():
    for code, key in LINUX_KEYS.items():
        assert key.value == code
        assert key.constant == key.description


def test_event_input_round_trip():
    for key in LINUX_KEYS.values():
        if key.event_input:
            found = get_linux_key_detail_from_event_input(key.event_input)
            assert found.event_input == key.event_input
            assert found.value <= key.value


def test_function_keys_agree_with_windows_table():
    for n in range(1, 13):
        key = get_linux_key_detail_from_event_input(f"F{n}")
        assert get_windows_key_detail(key.windows_key).event_input == f"F{n}"


def test_empty_event_input_picks_lowest_code():
    key = get_linux_key_detail_from_event_input("")
    blanks = [k.value for k in LINUX_KEYS.values() if k.event_input == ""]
    assert key.value == min(blanks)