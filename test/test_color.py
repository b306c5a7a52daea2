"""Tests for the ColorData value object."""

from formfields.cells.color import ColorData


class TestColorData:
    def test_str_is_hex(self):
        assert str(ColorData("#aabbcc")) == "#aabbcc"

    def test_valid_hex(self):
        assert ColorData("#ff8000").is_valid is True

    def test_invalid_hex_flagged(self):
        assert ColorData("#zzzzzz").is_valid is False
        assert ColorData("#abc").is_valid is False

    def test_equality_by_value(self):
        assert ColorData("#aabbcc") == ColorData("#aabbcc")
