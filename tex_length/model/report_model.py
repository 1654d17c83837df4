"""Aggregate model combining text, equation and image word counts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from tex_length.model.elements import ImageEstimate
from tex_length.model.length_guide import DEFAULT_GUIDE, LengthGuide


@dataclass(slots=True)
class LengthReport:
    """Every partial count of a run plus the grand total that renderers consume."""

    texcount_output: str
    text_words: int
    math_lines: int
    images: List[ImageEstimate] = field(default_factory=list)
    guide: LengthGuide = DEFAULT_GUIDE

    @property
    def equation_words(self) -> int:
        return self.guide.words_per_equation_line * self.math_lines

    @property
    def image_words(self) -> int:
        return sum(image.word_equivalent for image in self.images)

    @property
    def total(self) -> int:
        """Text words + equation words + image words."""
        return self.text_words + self.equation_words + self.image_words
