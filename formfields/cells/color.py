"""Structured color value stored in color cells."""

from __future__ import annotations

import re
from dataclasses import dataclass

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE)


@dataclass(frozen=True)
class ColorData:
    """
    A color cell value.

    Attributes:
        hex: Lower-cased ``#rrggbb`` string once normalized. The value is not
             checked on construction; validation reports a malformed hex as a
             cell error.
    """

    hex: str

    def __str__(self) -> str:
        return self.hex

    @property
    def is_valid(self) -> bool:
        return bool(HEX_COLOR_PATTERN.match(self.hex))
