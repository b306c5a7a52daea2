"""
Lenient date/time parsing

Accepts whatever a date or time picker may submit and returns an aware UTC
datetime, or None when nothing sensible can be read. Parsing never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from dateutil import parser as date_parser
from dateutil import tz

logger = logging.getLogger(__name__)


def _parse_text(text: str) -> datetime | None:
    text = text.strip()
    if not text:
        return None

    # Unix timestamps arrive as digit strings from some pickers
    if text.lstrip("-").isdigit():
        return _from_timestamp(int(text))

    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError) as exc:
        logger.debug("Unparseable date value %r normalized to None: %s", text, exc)
        return None


def _from_timestamp(seconds: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as exc:
        logger.debug("Timestamp %r out of range: %s", seconds, exc)
        return None


def _from_mapping(value: Mapping[str, Any]) -> datetime | None:
    date_part = str(value.get("date") or "").strip()
    time_part = str(value.get("time") or "").strip()
    if not date_part and not time_part:
        return None

    parsed = _parse_text(f"{date_part} {time_part}")
    if parsed is None:
        return None

    zone_name = value.get("timezone")
    if zone_name and parsed.tzinfo is None:
        zone = tz.gettz(str(zone_name))
        if zone is not None:
            parsed = parsed.replace(tzinfo=zone)
    return parsed


def to_datetime(value: Any) -> datetime | None:
    """
    Convert a raw date/time cell value into an aware UTC datetime.

    Supported inputs: datetime and date objects, {"date", "time", "timezone"}
    mappings, epoch timestamps (numbers or digit strings) and free-form
    strings. Naive results are read as UTC. Anything else yields None.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed: datetime | None = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, Mapping):
        parsed = _from_mapping(value)
    elif isinstance(value, (int, float)):
        parsed = _from_timestamp(value)
    elif isinstance(value, str):
        parsed = _parse_text(value)
    else:
        logger.debug("Unsupported date value type %s normalized to None", type(value).__name__)
        return None

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso8601(value: Any) -> str | None:
    """Format a date/time cell as ISO-8601 (``2024-05-01T13:45:00+00:00``)."""
    parsed = to_datetime(value)
    if parsed is None:
        return None
    return parsed.isoformat(timespec="seconds")
