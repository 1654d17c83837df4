"""
Text normalization utilities for LaTeX sources.

Removes comments before any counting happens and extracts the abstract
body for inspection.
"""

import re
from typing import Optional


class CommentStripper:
    """Removes ``%`` comments from LaTeX source text."""

    # An unescaped percent sign: preceded by an even number of backslashes,
    # so ``\%`` is literal while ``\\%`` is a line break followed by a comment.
    COMMENT_PATTERN = re.compile(r'(?<!\\)((?:\\\\)*)%[^\r\n]*')

    def strip_comments(self, text: str) -> str:
        """Drop every comment up to, but not including, its line terminator."""
        if not text:
            return text
        return self.COMMENT_PATTERN.sub(r'\1', text)


class AbstractExtractor:
    """Locates the ``abstract`` environment in a cleaned source."""

    ABSTRACT_PATTERN = re.compile(r'\\begin\{abstract\}(.*?)\\end\{abstract\}', re.DOTALL)

    def extract(self, text: str) -> Optional[str]:
        """Return the abstract body, or ``None`` when the document has none."""
        match = self.ABSTRACT_PATTERN.search(text)
        if match is None:
            return None
        return match.group(1)


def strip_tex_comments(text: Optional[str]) -> str:
    """Convenience function returning ``text`` with all comments removed.

    Args:
        text: Raw LaTeX source, or ``None``

    Returns:
        Source text without comments; line terminators are kept
    """
    if text is None:
        return ""
    return CommentStripper().strip_comments(text)
