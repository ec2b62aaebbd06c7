import pytest

from relinput.events import EventType, KeyNotFoundError


def test_event_type_wire_values_follow_declaration_order():
    assert [EventType(value) for value in range(4)] == list(EventType)


def test_event_type_members_in_order():
    assert [EventType(value).name for value in range(4)] == ["MOUSE", "MOUSE_MOVE", "WHEEL", "KEY"]


def test_event_type_from_integer_round_trip():
    for member in EventType:
        assert EventType(int(member)) is member


def test_event_type_formats_as_integer():
    key = EventType(3)
    assert key is EventType.KEY
    assert f"{int(key)}" == "3"


def test_event_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        EventType(len(EventType))


def test_key_not_found_is_lookup_error():
    error = KeyNotFoundError(0x07)
    assert issubclass(KeyNotFoundError, LookupError)
    assert error.key == 0x07
    assert "NotFound" in str(error)


def test_key_not_found_keeps_key_and_message():
    error = KeyNotFoundError("F8")
    assert error.key == "F8"
    assert "NotFound" in str(error)
    assert "F8" in str(error)


def test_key_not_found_without_key():
    error = KeyNotFoundError()
    assert error.key is None
    assert str(error) == "NotFound"