"""
i18n (Internationalization) package

Message catalogs, the Translator that field types receive as an explicit
dependency, and Accept-Language parsing for the HTTP layer.
"""

from .locale import base_language, parse_accept_language
from .translator import Translator, format_message

__all__ = [
    "Translator",
    "base_language",
    "format_message",
    "parse_accept_language",
]
