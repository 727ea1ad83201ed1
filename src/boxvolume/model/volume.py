"""
Volume Arithmetic & Display Formatting
======================================
Pure functions behind the calculator: parse the text of a dimension field,
multiply the three dimensions, and render the product for display.

Classes:
    VolumeResult: Raw product together with its display text.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from boxvolume.config import DECIMAL_PLACES

# Decimal('0.01') for two places
_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)


def parse_dimension(text: Optional[str]) -> float:
    """
    Convert the raw text of an input field to a number.

    Anything that is not a finite decimal number (empty, whitespace, letters,
    non-ASCII digits, "inf", "nan", "1_000", ...) resolves to 0.0. Never raises.
    """
    if text is None:
        return 0.0
    stripped = text.strip()
    if not stripped or not stripped.isascii() or "_" in stripped:
        return 0.0
    try:
        value = float(stripped)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def compute_volume(length: float, width: float, height: float) -> float:
    """Volume of a cuboid. No validation: negative and zero sides are allowed."""
    return float(length) * float(width) * float(height)


def format_volume(value: float) -> str:
    """
    Render a volume for display.

    Whole numbers are shown without a decimal point ("1000", "-5"), everything
    else with exactly DECIMAL_PLACES digits, rounded half-up on the shortest
    decimal form of the float ("1.005" -> "1.01"). The separator is always '.'.

    Examples:
        >>> format_volume(24.0)
        '24'
        >>> format_volume(123.456)
        '123.46'
        >>> format_volume(0.1)
        '0.10'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if value.is_integer():
        # int() also turns -0.0 into 0
        return str(int(value))

    rounded = Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = abs(rounded)
    return format(rounded, "f")


@dataclass(frozen=True)
class VolumeResult:
    """One computed volume as it is shown to the user."""
    value: float
    display_text: str

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.value)

    @classmethod
    def from_value(cls, value: float) -> VolumeResult:
        return cls(value=value, display_text=format_volume(value))

    @classmethod
    def from_dimensions(cls, length: float, width: float, height: float) -> VolumeResult:
        return cls.from_value(compute_volume(length, width, height))
