"""Run the external ``texcount`` tool and read its summary."""
from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from tex_length.utils.errors import FatalIOError, FatalMismatchError
from tex_length.utils.logger import get_logger

LOGGER = get_logger(__name__)

TEXCOUNT_EXECUTABLE = "texcount"
# Sum weights: text, headers, captions, inline formulas. Display formulas are
# left out of the sum and priced per line by the equation counter.
TEXCOUNT_FLAGS: Sequence[str] = ("-utf8", "-sum=1,1,1,0,0,1,0")
SUM_COUNT_PATTERN = re.compile(r"Sum\scount:\s(\d+)")


@dataclass(frozen=True, slots=True)
class TexcountResult:
    """Captured texcount output and the parsed summary count."""

    output: str
    sum_count: int


def parse_sum_count(output: str) -> int:
    """Return the integer of the ``Sum count:`` line."""
    match = SUM_COUNT_PATTERN.search(output)
    if match is None:
        raise FatalMismatchError("texcount output has no 'Sum count:' line")
    return int(match.group(1))


class TexcountRunner:
    """Synchronous wrapper around the texcount command line."""

    def __init__(self, executable: str = TEXCOUNT_EXECUTABLE, flags: Sequence[str] = TEXCOUNT_FLAGS) -> None:
        self._executable = executable
        self._flags = list(flags)

    def command(self, tex_path: Path) -> List[str]:
        return [self._executable, str(tex_path), *self._flags]

    def run(self, tex_path: Path) -> TexcountResult:
        command = self.command(tex_path)
        LOGGER.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(command, capture_output=True, text=True, encoding="utf-8", errors="replace", check=False)
        except OSError as exc:
            raise FatalIOError(f"Could not run {self._executable}: {exc}") from exc
        if completed.returncode != 0:
            LOGGER.warning("%s exited with status %d: %s", self._executable, completed.returncode, completed.stderr.strip())
        return TexcountResult(output=completed.stdout, sum_count=parse_sum_count(completed.stdout))
