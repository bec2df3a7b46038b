"""Exception hierarchy shared by the editor layers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class EditorError(RuntimeError):
    """Base class for every recoverable editor failure."""


class WordValidationError(EditorError, ValueError):
    """Raised when a word cannot be stored in the document."""

    def __init__(self, message: str, *, word: Optional[str] = None) -> None:
        super().__init__(message)
        self.word = word


class PersistenceError(EditorError):
    """Raised when a document file cannot be read or written."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "EditorError",
    "PersistenceError",
    "WordValidationError",
]
