"""
Security Utilities

Sanitization for values that leave the library as spreadsheet exports.
"""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# Leading characters that spreadsheet applications treat as a formula
FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r", "\n")


def sanitize_csv_field(value: Any) -> str:
    """
    Sanitize a CSV field value to prevent CSV injection attacks.

    Args:
        value: Field value to sanitize

    Returns:
        Sanitized string safe for CSV export

    Example:
        >>> sanitize_csv_field("=SUM(A1:A10)")
        "'=SUM(A1:A10)"
        >>> sanitize_csv_field("normal text")
        'normal text'
    """
    value_str = str(value) if value is not None else ""

    if value_str and value_str.startswith(FORMULA_PREFIXES):
        # Prefix with single quote to prevent formula interpretation
        value_str = "'" + value_str
        logger.debug("CSV injection attempt prevented: prefixed value with quote")

    # Multi-line cells are flattened to one line
    value_str = re.sub(r"[\r\n]+", " ", value_str)

    return value_str
