"""Exception hierarchy shared by the loader, parsers and command line."""
from __future__ import annotations


class LengthCountError(Exception):
    """Base class for every error raised while estimating a manuscript length."""


class ReportedError(LengthCountError):
    """Problems that are reported to the user before a clean exit."""


class UsageError(ReportedError):
    """No manuscript name was supplied on the command line."""


class MissingInputError(ReportedError):
    """The manuscript source file does not exist."""


class FatalError(LengthCountError):
    """Problems that abort the run without producing a report."""


class FatalIOError(FatalError):
    """The compiler log is missing or an input could not be read."""


class FatalMismatchError(FatalError):
    """Document figures, log images or collaborator output do not line up."""
