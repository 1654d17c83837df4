"""Central logging configuration for the length estimator.

Library modules log through :func:`get_logger`. The command line calls
:func:`configure_diagnostics` so that fatal problems reach the console as a
single ``ERROR: ...`` line instead of the timestamped debugging format.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "tex_length"
DIAGNOSTIC_FORMAT = "%(levelname)s: %(message)s"
_DEFAULT_LEVEL = logging.WARNING


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    return logger


def configure_diagnostics(level: int = _DEFAULT_LEVEL) -> logging.Logger:
    """Route package warnings and errors to stderr as plain diagnostics."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(handler, StderrHandler) for handler in logger.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
