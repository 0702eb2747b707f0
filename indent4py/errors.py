from __future__ import annotations

from typing import Any


class Indent4pyError(Exception):
    """Base type for all exceptions raised by indent4py."""


class MissingArgumentError(Indent4pyError, TypeError):
    """Raised when a required argument is None."""


class NegativeIndentationLevelError(Indent4pyError, ValueError):
    """Raised when requesting an indentation at a level below zero."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(f"Indentation level may not be negative: {level}")


class WriterCloseError(Indent4pyError, OSError):
    """Raised when the delegate of a writer fails to close with an error that is neither I/O nor runtime related."""

    def __init__(self, writer: Any, error: Exception) -> None:
        self.writer = writer
        self.error = error
        super().__init__(f"Could not close {writer!r}: {error}")
