import pytest

from jsonc import debug


@pytest.fixture(autouse=True)
def _reset_state():
    debug.set_debug(False)
    debug.set_syslog(False)
    yield
    debug.set_debug(False)
    debug.set_syslog(False)


def test_debug_flag_round_trip():
    debug.set_debug(True)
    assert debug.get_debug() is True
    debug.set_debug(0)
    assert debug.get_debug() is False


def test_debug_silent_when_disabled(capsys):
    debug.debug("hidden %s\n", "text")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_debug_prints_to_stdout_when_enabled(capsys):
    debug.set_debug(True)
    debug.debug("value %d\n", 5)
    captured = capsys.readouterr()
    assert captured.out == "value 5\n"
    assert captured.err == ""


def test_error_goes_to_stderr(capsys):
    debug.error("bad %s\n", "thing")
    captured = capsys.readouterr()
    assert captured.err == "bad thing\n"
    assert captured.out == ""


def test_info_goes_to_stderr_even_without_debug(capsys):
    debug.info("note\n")
    captured = capsys.readouterr()
    assert captured.err == "note\n"


def test_message_without_args_is_not_formatted(capsys):
    debug.error("100%\n")
    assert capsys.readouterr().err == "100%\n"