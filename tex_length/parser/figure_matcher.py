"""Find figure environments and pair them with the images placed in the log."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from tex_length.model.elements import ColumnMode, FigureEnvironment, ImageUsage, MarkupKind
from tex_length.parser.markup_scanner import scan_markup
from tex_length.utils.errors import FatalMismatchError
from tex_length.utils.logger import get_logger

LOGGER = get_logger(__name__)

FIGURE_ENVIRONMENTS: Dict[str, ColumnMode] = {
    "figure": ColumnMode.SINGLE,
    "figure*": ColumnMode.DOUBLE,
}


def find_figure_environments(text: str) -> List[FigureEnvironment]:
    """Return every ``figure``/``figure*`` opening in document order."""
    figures: List[FigureEnvironment] = []
    for event in scan_markup(text):
        if event.kind is not MarkupKind.BEGIN_ENV:
            continue
        column_mode = FIGURE_ENVIRONMENTS.get(event.name)
        if column_mode is None:
            continue
        figures.append(FigureEnvironment(index=len(figures), column_mode=column_mode, position=event.position))
    return figures


class PositionalCorrespondence:
    """Pairs the i-th logged image with the i-th figure environment.

    Document order and log order are assumed to coincide; nothing in either
    input confirms it.
    """

    def resolve(
        self, images: Sequence[ImageUsage], figures: Sequence[FigureEnvironment]
    ) -> List[Tuple[ImageUsage, FigureEnvironment]]:
        if len(images) > len(figures):
            raise FatalMismatchError(
                f"Log places {len(images)} images but the document has only {len(figures)} figure environments"
            )
        if len(figures) > len(images):
            LOGGER.debug("Ignoring %d figure environments without a logged image", len(figures) - len(images))
        return list(zip(images, figures))
