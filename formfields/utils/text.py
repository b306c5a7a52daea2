"""Text helpers shared by text cells and handle generation."""

import re

import emoji
from unidecode import unidecode

# Every Unicode line terminator, CRLF first so it collapses to one newline
LINE_BREAK_PATTERN = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")


def shortcodes_to_emoji(text: str) -> str:
    """Replace ``:shortcode:`` sequences with their emoji symbol."""
    return emoji.emojize(text, language="alias")


def normalize_line_breaks(text: str) -> str:
    return LINE_BREAK_PATTERN.sub("\n", text)


def normalize_text(value) -> str:
    """Emoji substitution, line-break collapse and trim for text cells."""
    text = shortcodes_to_emoji(str(value))
    return normalize_line_breaks(text).strip()


def generate_handle(text):
    """
    Derive a camelCase ASCII handle from a label.

    "First Name" -> "firstName", "Größe (cm)" -> "grosseCm"
    """
    words = re.findall(r"[a-z0-9]+", unidecode(text or "").lower())
    if not words:
        return ""
    handle = words[0] + "".join(word.capitalize() for word in words[1:])
    return handle.lstrip("0123456789")
