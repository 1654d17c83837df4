"""Entry-point for the manuscript length pipeline."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from tex_length.model.length_guide import DEFAULT_GUIDE, LengthGuide
from tex_length.model.report_model import LengthReport
from tex_length.parser.equation_counter import count_display_math_lines
from tex_length.parser.figure_matcher import find_figure_environments
from tex_length.parser.length_calculator import LengthCalculator
from tex_length.parser.log_parser import parse_image_usages
from tex_length.parser.tex_loader import load_manuscript
from tex_length.parser.texcount_runner import TexcountRunner
from tex_length.renderer.text_renderer import TextRenderer
from tex_length.utils.errors import FatalError, ReportedError, UsageError
from tex_length.utils.logger import configure_diagnostics, get_logger

LOGGER = get_logger(__name__)

USAGE = "Usage: tex-length filename"


def build_length_report(
    file_name: Union[str, Path],
    *,
    runner: Optional[TexcountRunner] = None,
    guide: LengthGuide = DEFAULT_GUIDE,
) -> LengthReport:
    """Load a manuscript and its log, then combine text, equation and image counts."""
    manuscript = load_manuscript(file_name)
    texcount = (runner or TexcountRunner()).run(manuscript.tex_path)

    math_lines = count_display_math_lines(manuscript.source)
    images = parse_image_usages(manuscript.log)
    figures = find_figure_environments(manuscript.source)
    estimates = LengthCalculator(guide).estimate_all(images, figures)

    return LengthReport(
        texcount_output=texcount.output,
        text_words=texcount.sum_count,
        math_lines=math_lines,
        images=estimates,
        guide=guide,
    )


def main(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> int:
    """Run the length estimate for one manuscript and print the report."""
    out = stream or sys.stdout
    parser = argparse.ArgumentParser(
        prog="tex-length",
        description="Estimate the length of a LaTeX manuscript following the PRL length guide",
    )
    parser.add_argument("filename", nargs="?", help="Manuscript base name, with or without extension")
    args = parser.parse_args(argv)

    try:
        if args.filename is None:
            raise UsageError(USAGE)
        report = build_length_report(args.filename)
    except ReportedError as exc:
        print(exc, file=out)
        return 0
    except FatalError as exc:
        LOGGER.error("%s", exc)
        return 1

    TextRenderer(out).render(report)
    return 0


def run() -> None:
    configure_diagnostics()
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
