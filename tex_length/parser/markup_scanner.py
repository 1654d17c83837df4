"""Tokenize cleaned LaTeX source into the markup events used for counting."""
from __future__ import annotations

import re
from typing import Iterator

from tex_length.model.elements import MarkupEvent, MarkupKind

# Alternation order matters: ``\\`` is consumed before ``\[`` so that a line
# break followed by an optional spacing argument (``\\[2pt]``) is never read
# as an opening display bracket, and ``\$`` is consumed so an escaped dollar
# cannot pair with a following ``$``.
TOKEN_PATTERN = re.compile(
    r"(?P<line_break>\\\\)"
    r"|(?P<escaped>\\[$%])"
    r"|(?P<bracket_open>\\\[)"
    r"|(?P<bracket_close>\\\])"
    r"|\\begin\s*\{(?P<begin>[^{}]*)\}"
    r"|\\end\s*\{(?P<end>[^{}]*)\}"
    r"|(?P<double_dollar>\$\$)"
)

_GROUP_KINDS = {
    "line_break": MarkupKind.LINE_BREAK,
    "bracket_open": MarkupKind.BRACKET_OPEN,
    "bracket_close": MarkupKind.BRACKET_CLOSE,
    "begin": MarkupKind.BEGIN_ENV,
    "end": MarkupKind.END_ENV,
    "double_dollar": MarkupKind.DOUBLE_DOLLAR,
}


def scan_markup(text: str) -> Iterator[MarkupEvent]:
    """Yield markup events left to right in a single pass over ``text``.

    Each call starts a fresh scan; the generator holds no state between calls.
    """
    for match in TOKEN_PATTERN.finditer(text):
        group = match.lastgroup
        if group == "escaped":
            continue
        kind = _GROUP_KINDS[group]
        name = None
        if kind is MarkupKind.BEGIN_ENV or kind is MarkupKind.END_ENV:
            name = match.group(group).strip()
        yield MarkupEvent(kind=kind, position=match.start(), name=name)
