"""
Internationalization Tests

Test classes:
    TestLocaleHelpers   — base language and Accept-Language parsing
    TestFormatMessage   — ICU-lite placeholder formatting
    TestTranslator      — catalog lookup per locale
"""

from __future__ import annotations

import pytest

from formfields.i18n import Translator, base_language, format_message, parse_accept_language
from formfields.i18n import messages

# ══════════════════════════════════════════════════════════════════════════════
# 1. TestLocaleHelpers
# ══════════════════════════════════════════════════════════════════════════════


class TestLocaleHelpers:
    def test_base_language(self):
        assert base_language("fr-CA") == "fr"
        assert base_language("EN") == "en"

    def test_exact_match(self):
        assert parse_accept_language("de", ["en", "fr", "de"]) == "de"

    def test_quality_order(self):
        assert parse_accept_language("en;q=0.5,fr;q=0.9", ["en", "fr"]) == "fr"

    def test_base_language_match(self):
        assert parse_accept_language("fr-CA,en;q=0.1", ["en", "fr"]) == "fr"

    def test_no_match(self):
        assert parse_accept_language("ja", ["en", "fr"]) is None

    def test_empty_header(self):
        assert parse_accept_language("", ["en"]) is None

    def test_bad_quality_defaults_to_one(self):
        assert parse_accept_language("fr;q=abc,en;q=0.9", ["en", "fr"]) == "fr"


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestFormatMessage
# ══════════════════════════════════════════════════════════════════════════════


class TestFormatMessage:
    def test_plain_substitution(self):
        assert format_message("{attribute} cannot be blank.", {"attribute": "Name"}) == "Name cannot be blank."

    def test_missing_param_left_intact(self):
        assert format_message("{value} and {other}", {"value": "x"}) == "x and {other}"

    def test_no_params(self):
        assert format_message("{attribute}") == "{attribute}"

    def test_number(self):
        assert format_message("{n, number}", {"n": 12345}) == "12,345"

    @pytest.mark.parametrize(("count", "expected"), [(0, "none"), (1, "1 row"), (2, "2 rows")])
    def test_plural(self, count, expected):
        template = "{n, plural, =0{none} one{# row} other{# rows}}"
        assert format_message(template, {"n": count}) == expected

    def test_plural_with_nested_placeholder(self):
        template = "{n, plural, one{one {thing}} other{many {thing}s}}"
        assert format_message(template, {"n": 3, "thing": "cell"}) == "many cells"

    def test_unsupported_type_renders_value(self):
        assert format_message("{g, select, male{he} other{they}}", {"g": "male"}) == "male"

    def test_none_renders_empty(self):
        assert format_message("[{value}]", {"value": None}) == "[]"


# ══════════════════════════════════════════════════════════════════════════════
# 3. TestTranslator
# ══════════════════════════════════════════════════════════════════════════════


class TestTranslator:
    def test_english_is_source(self):
        assert Translator("en")(messages.ADD_ROW) == "Add row"

    def test_french(self):
        assert Translator("fr")(messages.ADD_ROW) == "Ajouter une ligne"

    def test_region_falls_back_to_base(self):
        assert Translator("de-AT")(messages.REMOVE_ROW) == "Entfernen"

    def test_unknown_message_passes_through(self):
        assert Translator("fr")("Contacts") == "Contacts"

    def test_custom_catalog(self):
        translator = Translator("xx", catalog={"Hello": "Hallo {name}"})
        assert translator.translate("Hello", {"name": "Ann"}) == "Hallo Ann"

    def test_for_accept_language(self):
        translator = Translator.for_accept_language("fr-FR,fr;q=0.9", ["en", "fr"])
        assert translator.locale == "fr"

    def test_for_accept_language_default(self):
        assert Translator.for_accept_language(None, ["en", "fr"], default="en").locale == "en"

    def test_every_catalog_covers_field_messages(self):
        for locale in ("fr", "de"):
            catalog = messages.CATALOGS[locale]
            for message in (messages.CANNOT_BE_BLANK, messages.TOO_FEW_ROWS, messages.TOO_MANY_ROWS):
                assert message in catalog
