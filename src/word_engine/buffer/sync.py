"""Read-only snapshots handed to display adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DocumentState(str, Enum):
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


@dataclass(frozen=True, slots=True)
class EditorStatus:
    word_count: int
    undo_count: int
    undo_capacity: int
    redo_count: int = 0

    def render(self) -> str:
        return (
            f"WORDS: {self.word_count} | "
            f"UNDO: {self.undo_count}/{self.undo_capacity}"
        )


@dataclass(slots=True)
class DocumentMirror:
    """Host-friendly snapshot describing the current document."""

    words: tuple[str, ...]
    status: EditorStatus
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return " ".join(self.words)
