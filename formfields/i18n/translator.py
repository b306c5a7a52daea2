"""
Translator

Catalog lookup plus a small ICU-style formatter. It is not a full ICU
MessageFormat implementation: the only format types understood are
``number`` and ``plural``. Any other type (``select``, ``date``, ...) renders
the bare value. Plural selection knows ``=N``, ``one`` and ``other`` only.

Supported forms:

    {name}                               plain substitution
    {name, number}                       grouped number
    {name, plural, =0{…} one{…} other{…}}  plural selection (``#`` = the number)

Placeholders whose name is missing from ``params`` are left untouched, so a
message can be formatted in several passes.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from formfields.i18n.locale import base_language, parse_accept_language
from formfields.i18n.messages import CATALOGS

_PLURAL_SELECTOR = re.compile(r"\s*(=\d+|[a-z]+)\s*\{")


def _matching_brace(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        if text[index] == "{":
            depth += 1
        elif text[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


def _format_number(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _to_text(value)
    return f"{value:,}"


def _select_plural(style: str, value: Any) -> str:
    branches: dict[str, str] = {}
    position = 0
    while True:
        match = _PLURAL_SELECTOR.match(style, position)
        if not match:
            break
        open_brace = match.end() - 1
        close_brace = _matching_brace(style, open_brace)
        if close_brace == -1:
            break
        branches[match.group(1)] = style[open_brace + 1 : close_brace]
        position = close_brace + 1

    exact = f"={value}"
    if exact in branches:
        return branches[exact]
    if value == 1 and "one" in branches:
        return branches["one"]
    return branches.get("other", "")


def _format_placeholder(body: str, params: Mapping[str, Any]) -> str:
    name, _, rest = body.partition(",")
    name = name.strip()
    if name not in params:
        return "{" + body + "}"

    value = params[name]
    if not rest:
        return _to_text(value)

    kind, _, style = rest.partition(",")
    kind = kind.strip()
    if kind == "number":
        return _format_number(value)
    if kind == "plural":
        branch = _select_plural(style, value).replace("#", _format_number(value))
        return format_message(branch, params)
    return _to_text(value)


def format_message(template: str, params: Mapping[str, Any] | None = None) -> str:
    """Substitute ``params`` into an ICU-lite message template."""
    if not params:
        return template

    parts: list[str] = []
    index = 0
    while index < len(template):
        char = template[index]
        if char != "{":
            parts.append(char)
            index += 1
            continue
        end = _matching_brace(template, index)
        if end == -1:
            parts.append(template[index:])
            break
        parts.append(_format_placeholder(template[index + 1 : end], params))
        index = end + 1
    return "".join(parts)


class Translator:
    """
    Translate message templates for one locale.

    Field types receive a translator explicitly; there is no process-wide
    current language.
    """

    def __init__(self, locale: str = "en", catalog: Mapping[str, str] | None = None) -> None:
        self.locale = locale
        default_catalog = CATALOGS.get(base_language(locale), {})
        self._catalog: dict[str, str] = dict(catalog if catalog is not None else default_catalog)

    def translate(self, message: str, params: Mapping[str, Any] | None = None) -> str:
        """Look up ``message`` in the catalog and format it with ``params``."""
        return format_message(self._catalog.get(message, message), params)

    __call__ = translate

    @classmethod
    def for_accept_language(cls, header: str | None, supported: list[str], default: str = "en") -> Translator:
        """Build a translator for the best locale in an Accept-Language header."""
        locale = parse_accept_language(header or "", supported) or default
        return cls(locale)
