"""Exception types raised by lazycd components.

Listing failures are recoverable and surface as a status message.
Output failures are fatal and end the process with a non-zero status.
"""

from __future__ import annotations

import enum
from pathlib import Path


class LazycdError(Exception):
    """Base class for all lazycd errors."""


class ListingErrorKind(enum.Enum):
    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    NOT_A_DIRECTORY = "not a directory"
    OTHER_IO = "I/O error"


class ListingError(LazycdError):
    """A directory could not be enumerated."""

    def __init__(self, path: Path, kind: ListingErrorKind, detail: str = "") -> None:
        self.path = path
        self.kind = kind
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        text = f"{self.path}: {self.kind.value}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return text

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> ListingError:
        """Classify an ``OSError`` raised while scanning ``path``."""
        if isinstance(exc, FileNotFoundError):
            kind = ListingErrorKind.NOT_FOUND
        elif isinstance(exc, PermissionError):
            kind = ListingErrorKind.PERMISSION_DENIED
        elif isinstance(exc, NotADirectoryError):
            kind = ListingErrorKind.NOT_A_DIRECTORY
        else:
            kind = ListingErrorKind.OTHER_IO
        detail = "" if kind is not ListingErrorKind.OTHER_IO else (exc.strerror or str(exc))
        return cls(path, kind, detail)


class OutputWriteError(LazycdError):
    """The selected path could not be written to the output file."""

    def __init__(self, output_path: Path, exc: OSError) -> None:
        self.output_path = output_path
        self.reason = exc.strerror or str(exc)
        super().__init__(f"cannot write selection to {output_path}: {self.reason}")


__all__ = [
    "LazycdError",
    "ListingErrorKind",
    "ListingError",
    "OutputWriteError",
]
