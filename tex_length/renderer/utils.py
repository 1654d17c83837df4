"""Common helpers shared by renderer implementations."""
from __future__ import annotations

from typing import Iterable


def column_width(values: Iterable[str], header: str) -> int:
    """Width of a left-aligned column that fits the header and every value."""
    return max([len(header), *(len(value) for value in values)])


def underline(title: str) -> str:
    return f"{title}\n{'-' * len(title)}"
