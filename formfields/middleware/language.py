"""
Language Detection Middleware

Sets request.state.locale from:
  1. X-Language request header (exact match against supported list)
  2. Accept-Language header (quality-weighted, best-match)
  3. settings.default_locale (fallback)

Routes build their Translator from request.state.locale.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from formfields.config import settings
from formfields.i18n.locale import parse_accept_language

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import Request
    from starlette.responses import Response


class LanguageMiddleware(BaseHTTPMiddleware):
    """Detect the request locale and attach it to request.state.locale."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        locale = request.headers.get("X-Language", "").strip()
        if locale not in settings.supported_locales:
            locale = (
                parse_accept_language(
                    request.headers.get("Accept-Language", ""),
                    settings.supported_locales,
                )
                or settings.default_locale
            )
        request.state.locale = locale
        response = await call_next(request)
        response.headers["Content-Language"] = locale
        return response
