"""Loaded manuscript inputs after comment removal."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class Manuscript:
    """LaTeX source and the compiler log produced from it."""

    base_path: Path
    source: str
    log: str
    abstract: Optional[str] = None

    @property
    def tex_path(self) -> Path:
        return self.base_path.with_name(self.base_path.name + ".tex")

    @property
    def log_path(self) -> Path:
        return self.base_path.with_name(self.base_path.name + ".log")
