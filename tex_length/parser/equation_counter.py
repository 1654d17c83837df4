"""Count the typeset lines produced by display-math constructs."""
from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Sequence

from tex_length.model.elements import DisplayMathBlock, DisplayMathKind, MarkupEvent, MarkupKind
from tex_length.parser.markup_scanner import scan_markup
from tex_length.utils.logger import get_logger

LOGGER = get_logger(__name__)

DISPLAY_ENVIRONMENTS: FrozenSet[str] = frozenset({"equation", "align", "align*", "eqnarray"})


class EquationCounter:
    """Locate display-math blocks in cleaned source and total their lines.

    Environments, ``$$`` pairs and ``\\[ \\]`` pairs are three independent
    scans over the whole document whose line counts are summed.
    """

    def __init__(self, environments: Iterable[str] = DISPLAY_ENVIRONMENTS) -> None:
        self._environments = frozenset(environments)

    def count_lines(self, text: str) -> int:
        """Return the total number of display-math lines in ``text``."""
        return sum(block.line_count for block in self.find_blocks(text))

    def find_blocks(self, text: str) -> List[DisplayMathBlock]:
        events = list(scan_markup(text))
        LOGGER.debug("Scanned %d markup events", len(events))
        blocks = self._environment_blocks(events)
        blocks.extend(self._double_dollar_blocks(events))
        blocks.extend(self._bracket_blocks(events))
        return blocks

    # ------------------------------------------------------------------
    # Internal scans
    def _environment_blocks(self, events: Sequence[MarkupEvent]) -> List[DisplayMathBlock]:
        blocks: List[DisplayMathBlock] = []
        index = 0
        while index < len(events):
            event = events[index]
            if event.kind is not MarkupKind.BEGIN_ENV or event.name not in self._environments:
                index += 1
                continue
            end_index = self._find_matching_end(events, index)
            if end_index is None:
                # Unterminated: skip this begin and keep looking after it.
                LOGGER.debug("No \\end{%s} for environment at offset %d", event.name, event.position)
                index += 1
                continue
            breaks = sum(1 for inner in events[index + 1:end_index] if inner.kind is MarkupKind.LINE_BREAK)
            blocks.append(
                DisplayMathBlock(
                    kind=DisplayMathKind.ENVIRONMENT,
                    start=event.position,
                    end=events[end_index].position,
                    environment=event.name,
                    line_breaks=breaks,
                )
            )
            index = end_index + 1
        return blocks

    @staticmethod
    def _find_matching_end(events: Sequence[MarkupEvent], begin_index: int) -> Optional[int]:
        name = events[begin_index].name
        for index in range(begin_index + 1, len(events)):
            event = events[index]
            if event.kind is MarkupKind.END_ENV and event.name == name:
                return index
        return None

    @staticmethod
    def _double_dollar_blocks(events: Sequence[MarkupEvent]) -> List[DisplayMathBlock]:
        blocks: List[DisplayMathBlock] = []
        opening: Optional[MarkupEvent] = None
        for event in events:
            if event.kind is not MarkupKind.DOUBLE_DOLLAR:
                continue
            if opening is None:
                opening = event
            else:
                blocks.append(DisplayMathBlock(kind=DisplayMathKind.DOUBLE_DOLLAR, start=opening.position, end=event.position))
                opening = None
        return blocks

    @staticmethod
    def _bracket_blocks(events: Sequence[MarkupEvent]) -> List[DisplayMathBlock]:
        blocks: List[DisplayMathBlock] = []
        opening: Optional[MarkupEvent] = None
        for event in events:
            if event.kind is MarkupKind.BRACKET_OPEN and opening is None:
                opening = event
            elif event.kind is MarkupKind.BRACKET_CLOSE and opening is not None:
                blocks.append(DisplayMathBlock(kind=DisplayMathKind.BRACKET, start=opening.position, end=event.position))
                opening = None
        return blocks


def count_display_math_lines(text: str) -> int:
    """Convenience function to count display-math lines in cleaned source."""
    return EquationCounter().count_lines(text)
