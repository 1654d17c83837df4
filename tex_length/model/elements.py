"""In-memory representation of markup events, display math, figures and images."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MarkupKind(Enum):
    """Kinds of LaTeX constructs the scanner reports."""

    BEGIN_ENV = "begin"
    END_ENV = "end"
    LINE_BREAK = "line_break"
    DOUBLE_DOLLAR = "double_dollar"
    BRACKET_OPEN = "bracket_open"
    BRACKET_CLOSE = "bracket_close"


@dataclass(frozen=True, slots=True)
class MarkupEvent:
    """Single markup token found at ``position`` in the cleaned source."""

    kind: MarkupKind
    position: int
    name: Optional[str] = None


class DisplayMathKind(Enum):
    """Families of display-math constructs counted by the length guide."""

    ENVIRONMENT = "environment"
    DOUBLE_DOLLAR = "double_dollar"
    BRACKET = "bracket"


@dataclass(slots=True)
class DisplayMathBlock:
    """A display-math region and the number of ``\\\\`` breaks inside it."""

    kind: DisplayMathKind
    start: int
    end: int
    environment: Optional[str] = None
    line_breaks: int = 0

    @property
    def line_count(self) -> int:
        """Typeset lines: one per break plus the first; always 1 for $$ and \\[."""
        if self.kind is DisplayMathKind.ENVIRONMENT:
            return self.line_breaks + 1
        return 1


class ColumnMode(Enum):
    """Whether a figure spans one column or both columns of the page."""

    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True, slots=True)
class FigureEnvironment:
    """A ``figure`` or ``figure*`` environment in document order."""

    index: int
    column_mode: ColumnMode
    position: int


@dataclass(frozen=True, slots=True)
class ImageUsage:
    """A graphic placement reported by pdflatex, sizes in points."""

    file_name: str
    requested_width: float
    requested_height: float


@dataclass(frozen=True, slots=True)
class ImageEstimate:
    """Word-equivalent computed for one placed image."""

    file_name: str
    aspect_ratio: float
    word_equivalent: int
    column_mode: ColumnMode

    @property
    def is_two_column(self) -> bool:
        return self.column_mode is ColumnMode.DOUBLE
