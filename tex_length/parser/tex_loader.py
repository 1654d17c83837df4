"""Manuscript loader responsible for reading the LaTeX source and its compiler log."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from tex_length.model.manuscript_model import Manuscript
from tex_length.utils.errors import FatalIOError, MissingInputError
from tex_length.utils.logger import get_logger
from tex_length.utils.text_normalizer import AbstractExtractor, strip_tex_comments

LOGGER = get_logger(__name__)

TEX_SUFFIX = ".tex"
LOG_SUFFIX = ".log"
SOURCE_ENCODING = "utf-8"


def resolve_base_path(file_name: Union[str, Path]) -> Path:
    """Strip the last extension, so ``paper``, ``paper.tex`` and ``paper.log`` agree."""
    path = Path(file_name)
    if path.suffix:
        return path.with_suffix("")
    return path


def load_manuscript(file_name: Union[str, Path]) -> Manuscript:
    """Read ``<base>.tex`` and ``<base>.log`` and strip comments from the source."""
    base_path = resolve_base_path(file_name)
    tex_path = base_path.with_name(base_path.name + TEX_SUFFIX)
    log_path = base_path.with_name(base_path.name + LOG_SUFFIX)

    if not tex_path.exists():
        raise MissingInputError(f"The file {tex_path} doesn't exist")

    raw_source = _read_text(tex_path, f"File {tex_path} not found.")
    log_text = _read_text(log_path, f"File {log_path} not found. Please compile the {TEX_SUFFIX} file")
    LOGGER.debug("Loaded %d source and %d log characters for %s", len(raw_source), len(log_text), base_path.name)

    source = strip_tex_comments(raw_source)
    abstract = AbstractExtractor().extract(source)
    if abstract is not None:
        LOGGER.debug("Abstract spans %d characters", len(abstract))

    return Manuscript(base_path=base_path, source=source, log=log_text, abstract=abstract)


def _read_text(path: Path, message: str) -> str:
    try:
        with path.open("r", encoding=SOURCE_ENCODING, errors="replace") as handle:
            return handle.read()
    except OSError as exc:
        raise FatalIOError(message) from exc
