import json
import threading

import pytest

from jsonc.serialize import (
    OptionScope,
    ToStringFlags,
    current_double_format,
    escape_string,
    format_double,
    indent,
    set_double_format,
)


@pytest.fixture(autouse=True)
def reset_format():
    set_double_format(None, OptionScope.GLOBAL)
    yield
    set_double_format(None, OptionScope.GLOBAL)


@pytest.mark.parametrize(
    "text",
    ["", "plain", 'quote " here', "back\\slash", "a/b", "\b\f\n\r\t", "\x00\x01\x1f", "ünï"],
)
def test_escape_round_trips_through_json(text):
    assert json.loads('"' + escape_string(text) + '"') == text


def test_escape_slash_by_default():
    assert escape_string("a/b", 0) == "a\\/b"


def test_no_slash_escape_flag_keeps_slash():
    assert escape_string("a/b", ToStringFlags.NOSLASHESCAPE) == "a/b"


def test_control_character_uses_unicode_escape():
    assert escape_string("\x01") == "\\u0001"


def test_escape_output_has_no_raw_control_characters():
    escaped = escape_string("".join(chr(c) for c in range(32)))
    assert all(ord(c) >= 0x20 for c in escaped)


def test_indent_empty_without_pretty():
    assert indent(5, ToStringFlags.SPACED) == ""


def test_indent_two_spaces_per_level():
    result = indent(3, ToStringFlags.PRETTY)
    assert len(result) == 6
    assert set(result) == {" "}


def test_indent_tabs():
    assert indent(3, ToStringFlags.PRETTY | ToStringFlags.PRETTY_TAB) == "\t" * 3


def test_default_format_is_standard():
    assert current_double_format() == "%.17g"


def test_global_format_set_and_reset():
    set_double_format("%.3g", OptionScope.GLOBAL)
    assert current_double_format() == "%.3g"
    set_double_format(None, OptionScope.GLOBAL)
    assert current_double_format() == "%.17g"


def test_thread_format_overrides_and_is_local():
    set_double_format("%.5g", OptionScope.GLOBAL)
    set_double_format("%.2g", OptionScope.THREAD)
    assert current_double_format() == "%.2g"
    seen = []
    worker = threading.Thread(target=lambda: seen.append(current_double_format()))
    worker.start()
    worker.join()
    assert seen == ["%.5g"]


def test_global_set_clears_thread_format():
    set_double_format("%.2g", OptionScope.THREAD)
    set_double_format("%.4g", OptionScope.GLOBAL)
    assert current_double_format() == "%.4g"


def test_invalid_scope_raises():
    with pytest.raises(ValueError):
        set_double_format("%.3g", 7)


@pytest.mark.parametrize(
    "value, expected",
    [(float("nan"), "NaN"), (float("inf"), "Infinity"), (float("-inf"), "-Infinity")],
)
def test_non_finite_values(value, expected):
    assert format_double(value) == expected


def test_whole_number_gets_decimal_point():
    assert format_double(1.0) == "1.0"


@pytest.mark.parametrize("value", [0.1, -2.5, 1e300, 12.3, 3.0, -7.0, 5e-324])
def test_default_format_round_trips(value):
    text = format_double(value)
    assert float(text) == value
    assert "." in text or "e" in text


def test_dot_zero_f_format_keeps_integer_look():
    text = format_double(2.0, 0, "%.0f")
    assert "." not in text
    assert float(text) == 2.0


def test_nozero_drops_trailing_zeros():
    text = format_double(1.5, ToStringFlags.NOZERO, "%.3f")
    assert float(text) == 1.5
    assert not text.endswith("0")


def test_nozero_keeps_one_zero():
    text = format_double(2.0, ToStringFlags.NOZERO, "%.3f")
    assert text.endswith(".0")
    assert float(text) == 2.0


def test_without_nozero_zeros_stay():
    assert format_double(1.5, 0, "%.3f") == "%.3f" % 1.5


def test_global_format_is_used():
    set_double_format("%.3f", OptionScope.GLOBAL)
    assert format_double(0.25) == "%.3f" % 0.25


def test_bad_format_raises():
    with pytest.raises(ValueError):
        format_double(1.0, 0, "%d %d")


def test_long_output_is_truncated():
    text = format_double(1.0, 0, "%.200f")
    assert len(text) == 127
    assert text.startswith("1.000")