"""Numeric helpers for TeX point measurements."""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

POINT_PATTERN = re.compile(r"^\s*([\d.]+)\s*pt\s*$")


def parse_points(value: str) -> float:
    """Convert a ``123.45pt`` dimension into a float number of points."""
    match = POINT_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Not a point dimension: {value!r}")
    return float(match.group(1))


def round_half_up(value: float, places: int) -> float:
    """Round to ``places`` decimals, ties away from zero (not banker's rounding)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
