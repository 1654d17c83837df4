"""Render a length report as the plain-text summary printed on stdout."""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from tex_length.model.report_model import LengthReport
from tex_length.renderer.utils import column_width, underline

FILE_NAME_HEADER = "File name"
RATIO_HEADER = "Aspect ratio"
WORDS_HEADER = "Est. word count"
COLUMNS_HEADER = "Two-column"


class TextRenderer:
    """Produce the human-readable word count report."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdout

    def render(self, report: LengthReport) -> None:
        self._stream.write(self.build_text(report))

    def build_text(self, report: LengthReport) -> str:
        sections = [
            "",
            underline("Words in text, headers and equations"),
            report.texcount_output.rstrip("\n"),
            f"Number of displayed math lines: {report.math_lines}",
            "",
            underline("Images"),
            *self._image_lines(report),
            "",
            "Total word count (words + equations + images)",
            str(report.total),
        ]
        return "\n".join(sections) + "\n"

    def _image_lines(self, report: LengthReport) -> List[str]:
        if not report.images:
            return ["The file doesn't contain images."]

        width = column_width((image.file_name for image in report.images), FILE_NAME_HEADER)
        header = f"{FILE_NAME_HEADER:<{width}}  {RATIO_HEADER:<13}  {WORDS_HEADER:<16}  {COLUMNS_HEADER}"
        lines = [header, "-" * len(header)]
        for image in report.images:
            two_column = "yes" if image.is_two_column else "no"
            lines.append(
                f"{image.file_name:<{width}}  {image.aspect_ratio:<13}  {image.word_equivalent:<16}  {two_column}"
            )
        lines.append("")
        lines.append(f"Total word count for images: {report.image_words}")
        return lines
