"""Unit tests for the illustrative fallible operations."""

import pytest

from faultline.core.errors import FatalRequestError
from faultline.illustrations import (
    divide,
    divide_safe,
    get_element,
    get_element_safe,
    get_nested_value,
    parse_and_double,
    parse_and_double_safe,
    parse_int32,
    read_config_file,
    read_config_file_safe,
    unwrap,
)


class TestUncheckedOperations:
    """The unwrapping forms crash on the first missing value."""

    @pytest.mark.parametrize("a,b,expected", [
        (10, 2, 5),
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (10, 0, None),
    ])
    def test_divide(self, a, b, expected):
        assert divide(a, b) == expected

    def test_parse_and_double(self):
        assert parse_and_double("10") == 10
        assert parse_and_double("15") == 14

    def test_parse_and_double_crashes_on_garbage(self):
        with pytest.raises(FatalRequestError, match="parse error"):
            parse_and_double("not a number")

    @pytest.mark.parametrize("text", [" 10 ", "1_0", "\u0661\u0662", "", "2147483648", "-2147483649"])
    def test_parse_and_double_rejects_non_int32_text(self, text):
        with pytest.raises(FatalRequestError, match="parse error"):
            parse_and_double(text)

    def test_read_config_file(self, tmp_path):
        config = tmp_path / "config.txt"
        config.write_text("timeout=30")

        assert read_config_file(config) == "timeout=30"
        with pytest.raises(FatalRequestError):
            read_config_file(tmp_path / "nonexistent.txt")

    def test_read_config_file_crashes_on_undecodable_bytes(self, tmp_path):
        config = tmp_path / "config.bin"
        config.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(FatalRequestError, match="I/O error"):
            read_config_file(config)

    def test_nested_value(self):
        assert get_nested_value(((42,),)) == 42
        with pytest.raises(FatalRequestError, match="inner layer"):
            get_nested_value(((None,),))
        with pytest.raises(FatalRequestError, match="middle layer"):
            get_nested_value((None,))
        with pytest.raises(FatalRequestError, match="outer layer"):
            get_nested_value(None)

    def test_get_element(self):
        numbers = [1, 2, 3, 4, 5]

        assert get_element(numbers, 2) == 3
        with pytest.raises(FatalRequestError, match="out-of-bounds"):
            get_element(numbers, 10)
        with pytest.raises(FatalRequestError):
            get_element(numbers, -1)

    def test_unwrap(self):
        assert unwrap(0) == 0
        with pytest.raises(FatalRequestError):
            unwrap(None)


class TestCheckedOperations:
    """The safe forms return errors as values."""

    def test_divide_safe(self):
        assert divide_safe(10, 2).value == 5
        assert divide_safe(1, 0).error == "Division by zero"

    def test_parse_and_double_safe(self):
        assert parse_and_double_safe("15").value == 14

        result = parse_and_double_safe("invalid")
        assert not result.is_ok
        assert result.error.startswith("Parse error: ")

    def test_parse_and_double_safe_rejects_separators(self):
        result = parse_and_double_safe(" 1_0 ")

        assert not result.is_ok
        assert "invalid digit" in result.error

    def test_parse_and_double_safe_rejects_overflow(self):
        result = parse_and_double_safe("99999999999")

        assert not result.is_ok
        assert "too large" in result.error

    def test_read_config_file_safe(self, tmp_path):
        result = read_config_file_safe(tmp_path / "nonexistent.txt")

        assert not result.is_ok
        assert "nonexistent.txt" in result.error

    def test_read_config_file_safe_undecodable_bytes(self, tmp_path):
        config = tmp_path / "config.bin"
        config.write_bytes(b"\xff\xfe\x00bad")

        result = read_config_file_safe(config)

        assert not result.is_ok
        assert "utf-8" in result.error

    def test_get_element_safe(self):
        assert get_element_safe([1, 2], 1).value == 2
        assert "out of bounds" in get_element_safe([1, 2], 5).error


class TestParseInt32:
    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("+8", 8),
        ("-17", -17),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ])
    def test_accepts_ascii_int32(self, text, expected):
        assert parse_int32(text) == expected

    @pytest.mark.parametrize("text,message", [
        ("", "empty string"),
        (" 5", "invalid digit"),
        ("5\n", "invalid digit"),
        ("1_000", "invalid digit"),
        ("\u0663", "invalid digit"),
        ("2147483648", "too large"),
        ("-2147483649", "too small"),
    ])
    def test_rejects_everything_else(self, text, message):
        with pytest.raises(ValueError, match=message):
            parse_int32(text)
