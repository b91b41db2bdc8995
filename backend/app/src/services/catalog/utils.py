"""Utilities shared by the catalog services."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

CENTS = Decimal("0.01")


def to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a JSON price (string or number) to Decimal without float drift."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr gives the shortest round-tripping text, e.g. 0.1 -> "0.1".
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None


def format_cad(value: Decimal | None) -> Optional[str]:
    """Format Decimal values as Canadian dollars, rounding half up to cents."""
    if value is None:
        return None

    quantized = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"${quantized:,.2f}"
