"""
Cell type tests

Test classes:
    TestCellTypeTags        — enum tags and lookup
    TestTextCells           — singleline / multiline normalization
    TestColorCells          — color normalization and validation
    TestDateCells           — lenient date/time cells
    TestUrlAndEmailCells    — url / email validation
    TestUnknownCellTypes    — passthrough behavior
    TestNormalizeIdempotent — normalize(normalize(x)) == normalize(x)
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from formfields.cells.base import CellType, CellTypeHandler, cell_type_tag
from formfields.cells.color import ColorData
from formfields.exceptions import UnknownCellTypeError


class TestCellTypeTags:
    def test_all_builtin_tags_registered(self, registry):
        assert set(registry.types()) == {member.value for member in CellType}

    def test_enum_and_string_resolve_to_same_handler(self, registry):
        assert registry.get(CellType.EMAIL) is registry.get("email")

    def test_cell_type_tag(self):
        assert cell_type_tag(CellType.COLOR) == "color"
        assert cell_type_tag("color") == "color"

    def test_register_custom_handler(self, registry):
        class UpperHandler(CellTypeHandler):
            @property
            def cell_types(self):
                return ("upper",)

            def normalize(self, value):
                return str(value).upper()

        registry.register(UpperHandler())
        assert registry.is_registered("upper")
        assert registry.normalize("upper", "abc") == "ABC"


class TestTextCells:
    def test_line_breaks_collapsed(self, registry):
        assert registry.normalize("singleline", "a\r\nb\rc") == "a\nb\nc"

    def test_multiline_same_rules(self, registry):
        assert registry.normalize("multiline", "one\r\ntwo\u2028three") == "one\ntwo\nthree"

    def test_text_trimmed(self, registry):
        assert registry.normalize("singleline", "  Jane  ") == "Jane"

    def test_null_stays_null(self, registry):
        assert registry.normalize("singleline", None) is None

    def test_shortcodes_become_emoji(self, registry):
        assert registry.normalize("singleline", "Nice :thumbsup:") == "Nice \U0001f44d"

    def test_numbers_become_text(self, registry):
        assert registry.normalize("singleline", 42) == "42"


class TestColorCells:
    def test_shorthand_expanded(self, registry):
        assert registry.normalize("color", "abc") == registry.normalize("color", "aabbcc")
        assert registry.normalize("color", "abc").hex == "#aabbcc"

    def test_hash_added_and_lowercased(self, registry):
        assert registry.normalize("color", "#ABC").hex == "#aabbcc"
        assert registry.normalize("color", "FF0000").hex == "#ff0000"

    @pytest.mark.parametrize("raw", ["", "#", None])
    def test_empty_colors_are_null(self, registry, raw):
        assert registry.normalize("color", raw) is None

    def test_color_data_kept(self, registry):
        color = ColorData("#123456")
        assert registry.normalize("color", color) is color

    def test_valid_hex_passes(self, registry, translator):
        assert registry.validate("color", registry.normalize("color", "#00ff00"), translator) is None

    def test_invalid_hex_names_the_value(self, registry, translator):
        message = registry.validate("color", registry.normalize("color", "zzz"), translator)
        assert message == "#zzzzzz isn’t a valid hex color value."

    def test_named_colors_rejected(self, registry, translator):
        assert registry.validate("color", registry.normalize("color", "red"), translator) is not None

    def test_to_string_is_hex(self, registry):
        assert registry.to_string("color", ColorData("#aabbcc")) == "#aabbcc"


class TestDateCells:
    def test_string_parsed_as_utc(self, registry):
        assert registry.normalize("date", "2024-05-01 13:45") == datetime(2024, 5, 1, 13, 45, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self, registry):
        value = registry.normalize("date", "2024-05-01T15:45:00+02:00")
        assert value == datetime(2024, 5, 1, 13, 45, tzinfo=timezone.utc)
        assert value.utcoffset().total_seconds() == 0

    def test_picker_mapping(self, registry):
        value = registry.normalize("date", {"date": "2024-05-01", "time": "09:30", "timezone": "UTC"})
        assert value == datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)

    def test_timestamp(self, registry):
        assert registry.normalize("date", 0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", ["", None, "not a date", True, {"date": ""}])
    def test_unparseable_dates_are_null(self, registry, raw):
        assert registry.normalize("date", raw) is None

    def test_never_invalid(self, registry, translator):
        assert registry.validate("time", "whenever", translator) is None

    def test_to_string_is_iso8601(self, registry):
        value = registry.normalize("time", "2024-05-01 13:45")
        assert registry.to_string("time", value) == "2024-05-01T13:45:00+00:00"


class TestUrlAndEmailCells:
    @pytest.mark.parametrize("value", ["", None])
    def test_empty_email_passes(self, registry, translator, value):
        assert registry.validate("email", value, translator) is None

    def test_invalid_email_fails(self, registry, translator):
        assert registry.validate("email", "not-an-email", translator) == "not-an-email is not a valid email address."

    def test_valid_email_passes(self, registry, translator):
        assert registry.validate("email", "jane@example.com", translator) is None

    def test_display_name_form_fails(self, registry, translator):
        message = registry.validate("email", "Jane <jane@example.com>", translator)
        assert message == "Jane <jane@example.com> is not a valid email address."

    def test_invalid_url_fails(self, registry, translator):
        assert registry.validate("url", "not a url", translator) == "not a url is not a valid URL."

    def test_url_scheme_must_be_allowed(self, registry, translator):
        assert registry.validate("url", "ftp://example.com/file", translator) is not None

    def test_valid_url_passes(self, registry, translator):
        assert registry.validate("url", "https://example.com/page?q=1", translator) is None

    def test_url_trimmed(self, registry):
        assert registry.normalize("url", "  https://example.com  ") == "https://example.com"

    def test_messages_translated(self, registry):
        from formfields.i18n.translator import Translator

        message = registry.validate("email", "nope", Translator("fr"))
        assert message == "nope n’est pas une adresse e-mail valide."


class TestUnknownCellTypes:
    def test_passthrough_normalize(self, registry):
        value = {"stars": 4}
        assert registry.normalize("rating", value) is value

    def test_passthrough_never_fails(self, registry, translator):
        assert registry.validate("rating", "anything", translator) is None

    def test_passthrough_to_string(self, registry):
        assert registry.to_string("rating", "4 stars") == "4 stars"

    def test_require_raises(self, registry):
        with pytest.raises(UnknownCellTypeError) as exc_info:
            registry.require("rating")
        assert exc_info.value.details == {"cell_type": "rating"}


class TestNormalizeIdempotent:
    @pytest.mark.parametrize(
        ("cell_type", "raw"),
        [
            ("singleline", "  a\r\nb :smile: "),
            ("multiline", "x\ry"),
            ("color", "ABC"),
            ("color", "#123456"),
            ("date", "2024-05-01T15:45:00+02:00"),
            ("time", {"date": "2024-05-01", "time": "09:30"}),
            ("url", " https://example.com "),
            ("email", "jane@example.com"),
            ("rating", [1, 2]),
        ],
    )
    def test_normalize_twice(self, registry, cell_type, raw):
        once = registry.normalize(cell_type, raw)
        assert registry.normalize(cell_type, once) == once
