import pytest

from relinput.debug import debugf, debugln, is_enabled


@pytest.fixture
def log_path(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG_PATH", str(path))
    return path


def test_disabled_writes_nothing(log_path, monkeypatch):
    monkeypatch.delenv("RELATIVE_INPUT_DEBUG", raising=False)
    assert is_enabled() is False
    assert debugln("hello") == 0
    assert debugf("x %d", 1) == 0
    assert not log_path.exists()


def test_only_on_enables(monkeypatch):
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "on")
    assert is_enabled() is False
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    assert is_enabled() is True


def test_debugln_appends(log_path, monkeypatch):
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    written = debugln("ToggleKey:", "F8")
    debugln("flag", True)
    assert log_path.read_text() == "ToggleKey: F8\nflag true\n"
    assert written == len("ToggleKey: F8\n")


def test_debugf_formats(log_path, monkeypatch):
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    first = debugf("X: %4d Y: %4d\n", 3, -2)
    second = debugf("GetModuleHandle...")
    assert first == len("X:    3 Y:   -2\n")
    assert second == len("GetModuleHandle...")
    assert log_path.read_text() == "X:    3 Y:   -2\nGetModuleHandle..."


def test_unopenable_path_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG", "ON")
    monkeypatch.setenv("RELATIVE_INPUT_DEBUG_PATH", str(tmp_path / "missing" / "log"))
    with pytest.raises(OSError):
        debugln("x")