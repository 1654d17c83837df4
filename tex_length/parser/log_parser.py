"""
pdflatex log parser.

For each included graphic the log contains a block similar to::

    <fig1.pdf, id=116, 199.74625pt x 108.405pt>
    File: fig1.pdf Graphic file (type pdf)
    <use fig1.pdf>
    Package pdftex.def Info: fig1.pdf used on input line 313.
    (pdftex.def)             Requested size: 221.3985pt x 120.16223pt.

The ``<use ...>`` markers give the file names and the ``Requested size``
lines give the rendered dimensions, both in placement order.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from tex_length.model.elements import ImageUsage
from tex_length.utils.errors import FatalMismatchError
from tex_length.utils.logger import get_logger
from tex_length.utils.units import parse_points

LOGGER = get_logger(__name__)

USE_PATTERN = re.compile(r"<use (.*?)>")
REQUESTED_SIZE_PATTERN = re.compile(r"Requested size:\s([\d.]+pt)\sx\s([\d.]+pt)")


class LogParser:
    """Extracts image placements from compiler log text."""

    def __init__(self, log_text: str) -> None:
        self._log_text = log_text

    def file_names(self) -> List[str]:
        return USE_PATTERN.findall(self._log_text)

    def requested_sizes(self) -> List[Tuple[float, float]]:
        return [
            (parse_points(width), parse_points(height))
            for width, height in REQUESTED_SIZE_PATTERN.findall(self._log_text)
        ]

    def parse(self) -> List[ImageUsage]:
        """Pair the i-th ``<use>`` file name with the i-th requested size."""
        names = self.file_names()
        try:
            sizes = self.requested_sizes()
        except ValueError as exc:
            raise FatalMismatchError(f"Malformed requested size in log: {exc}") from exc
        LOGGER.debug("Log lists %d images and %d requested sizes", len(names), len(sizes))
        if len(sizes) < len(names):
            raise FatalMismatchError(
                f"Log lists {len(names)} images but only {len(sizes)} requested sizes"
            )
        return [
            ImageUsage(file_name=name, requested_width=width, requested_height=height)
            for name, (width, height) in zip(names, sizes)
        ]


def parse_image_usages(log_text: str) -> List[ImageUsage]:
    """Convenience function returning the image placements listed in a log."""
    return LogParser(log_text).parse()
