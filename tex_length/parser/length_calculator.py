"""Convert placed images into word-equivalents following the length guide."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence

from tex_length.model.elements import ColumnMode, FigureEnvironment, ImageEstimate, ImageUsage
from tex_length.model.length_guide import DEFAULT_GUIDE, LengthGuide
from tex_length.parser.figure_matcher import PositionalCorrespondence
from tex_length.utils.errors import FatalMismatchError
from tex_length.utils.units import round_half_up


class LengthCalculator:
    """Apply the aspect-ratio formulas of a :class:`LengthGuide`.

    The length guide prices a figure as::

                         150              150 * height
        (word count) = -------------- + 20 = ------------ + 20
                        aspect ratio            width

    for a single column, and ``300 / (0.5 * ar) + 40`` for a figure
    spanning both columns.
    """

    def __init__(self, guide: LengthGuide = DEFAULT_GUIDE, resolver: Optional[PositionalCorrespondence] = None) -> None:
        self._guide = guide
        self._resolver = resolver or PositionalCorrespondence()

    # ------------------------------------------------------------------
    # Public API
    def aspect_ratio(self, width: float, height: float) -> float:
        if height <= 0:
            raise FatalMismatchError(f"Image height must be positive, got {height}pt")
        ratio = round_half_up(width / height, self._guide.aspect_ratio_places)
        if ratio <= 0:
            raise FatalMismatchError(
                f"Image width must be positive, got {width}pt x {height}pt (aspect ratio {ratio})"
            )
        return ratio

    def word_equivalent(self, aspect_ratio: float, column_mode: ColumnMode) -> int:
        guide = self._guide
        if aspect_ratio <= 0:
            raise FatalMismatchError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if column_mode is ColumnMode.SINGLE:
            return math.ceil(guide.single_column_words / aspect_ratio + guide.single_column_offset)
        if column_mode is ColumnMode.DOUBLE:
            return math.ceil(
                guide.double_column_words / (guide.double_column_scale * aspect_ratio) + guide.double_column_offset
            )
        raise FatalMismatchError(f"Unrecognized figure environment variant: {column_mode!r}")

    def estimate(self, image: ImageUsage, column_mode: ColumnMode) -> ImageEstimate:
        ratio = self.aspect_ratio(image.requested_width, image.requested_height)
        return ImageEstimate(
            file_name=image.file_name,
            aspect_ratio=ratio,
            word_equivalent=self.word_equivalent(ratio, column_mode),
            column_mode=column_mode,
        )

    def estimate_all(
        self, images: Sequence[ImageUsage], figures: Sequence[FigureEnvironment]
    ) -> List[ImageEstimate]:
        """Estimate every logged image against the figure it is paired with."""
        return [
            self.estimate(image, figure.column_mode)
            for image, figure in self._resolver.resolve(images, figures)
        ]
