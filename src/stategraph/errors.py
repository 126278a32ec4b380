"""Exception types raised by stategraph."""

from pathlib import Path


class StategraphError(Exception):
    """Base class for stategraph errors."""
    pass


class MalformedAutomatonError(StategraphError):
    """Raised when an automaton breaks a structural contract.

    The only case is an intermediate automaton with an edge from the start
    pseudo-state to the terminal pseudo-state or to a decision. It points at
    a bug in whatever built the automaton and is never handled internally.
    """
    pass


class ExportWriteError(StategraphError):
    """Raised when rendered diagram text cannot be written."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write diagram to {path}: {cause}")


class AutomatonDocumentError(StategraphError):
    """Raised when an automaton document cannot be read or validated."""
    pass
