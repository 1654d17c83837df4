"""Publisher constants for converting equations and figures into words."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LengthGuide:
    """Word-equivalent coefficients of a journal length guide.

    Single-column figures cost ``single_column_words / ar + single_column_offset``
    and double-column figures cost
    ``double_column_words / (double_column_scale * ar) + double_column_offset``,
    where ``ar`` is the aspect ratio rounded to ``aspect_ratio_places``.
    """

    words_per_equation_line: int = 16
    single_column_words: float = 150.0
    single_column_offset: float = 20.0
    double_column_words: float = 300.0
    double_column_scale: float = 0.5
    double_column_offset: float = 40.0
    aspect_ratio_places: int = 3


# https://journals.aps.org/authors/length-guide
DEFAULT_GUIDE = LengthGuide()
