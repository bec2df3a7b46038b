"""Editing session combining a word document with its undo history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import ContextManager, Iterable, List, Optional

from word_engine.config import EditorConfig
from word_engine.errors import PersistenceError, WordValidationError
from word_engine.runtime import telemetry
from word_engine.runtime.telemetry import SpanHandle
from word_engine.storage import load_words, save_words
from word_engine.storage.persistence import PathLike

from .document import WordDocument
from .history import EditAction, UndoHistory
from .sync import DocumentMirror, DocumentState, EditorStatus
from .validation import ensure_word


class Editor:
    """Owns one document and its history; every edit goes through here.

    Edits mutate the document first and record the resulting action second.
    Loading replaces the words without recording anything and drops all
    history.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        *,
        name: str = "default",
        document: Optional[WordDocument] = None,
        history: Optional[UndoHistory] = None,
    ) -> None:
        self.name = name
        self.config = config or EditorConfig()
        self.document = document if document is not None else WordDocument()
        self.history = (
            history
            if history is not None
            else UndoHistory(self.config.max_undo, logger_name="word_engine.history")
        )

    @classmethod
    def from_text(
        cls, text: str, *, config: Optional[EditorConfig] = None, name: str = "default"
    ) -> "Editor":
        editor = cls(config, name=name)
        editor.seed(text)
        return editor

    @property
    def state(self) -> DocumentState:
        if self.document.is_empty:
            return DocumentState.EMPTY
        return DocumentState.NON_EMPTY

    def words(self) -> tuple[str, ...]:
        return tuple(self.document.words())

    def insert_word(self, word: str, position: int) -> int:
        """Insert ``word`` and record it; returns where it landed."""

        self._validate(word)
        with Transaction(self, "insert_word") as tx:
            landed = self.document.insert_at(word, position)
            tx.record(self.history.record_insert(word, landed))
        return landed

    def delete_word(self, position: int) -> Optional[str]:
        with Transaction(self, "delete_word") as tx:
            removed = self.document.delete_at(position)
            if removed is None:
                tx.handle.add_metadata("status", "invalid_position")
                return None
            tx.record(self.history.record_delete(removed, position))
        return removed

    def undo(self) -> bool:
        with Transaction(self, "undo") as tx:
            done = self.history.undo(self.document)
            tx.handle.add_metadata("status", "ok" if done else "empty")
        return done

    def redo(self) -> bool:
        with Transaction(self, "redo") as tx:
            done = self.history.redo(self.document)
            tx.handle.add_metadata("status", "ok" if done else "empty")
        return done

    def seed(self, text: str) -> int:
        """Append every whitespace separated token of ``text``, recording each."""

        tokens = text.split()
        for token in tokens:
            self._validate(token)
        with Transaction(self, "seed") as tx:
            for token in tokens:
                self.document.insert_at(token, self.document.length + 1)
                tx.record(self.history.record_insert(token, self.document.length))
        return len(tokens)

    def replace_words(self, words: Iterable[str]) -> int:
        """Replace every word without recording history, then drop all history."""

        incoming: List[str] = list(words)
        for word in incoming:
            self._validate(word)
        with Transaction(self, "replace_words"):
            self.document.clear()
            self.history.clear()
            for word in incoming:
                self.document.insert_at(word, self.document.length + 1)
        return len(incoming)

    def save(self, path: PathLike) -> None:
        try:
            save_words(path, self.document.words())
        except PersistenceError as exc:
            telemetry.record_event(
                "file.save_failed",
                level="error",
                data={"path": str(path), "reason": str(exc)},
            )
            raise
        telemetry.record_event(
            "file.save", data={"path": str(path), "words": self.document.length}
        )

    def load(self, path: PathLike) -> int:
        try:
            count = self.replace_words(load_words(path))
        except WordValidationError as exc:
            telemetry.record_event(
                "file.load_failed",
                level="error",
                data={"path": str(path), "reason": str(exc)},
            )
            raise PersistenceError(
                f"Cannot load '{path}': {exc} ({exc.word!r})", path=Path(path)
            ) from exc
        except PersistenceError as exc:
            telemetry.record_event(
                "file.load_failed",
                level="error",
                data={"path": str(path), "reason": str(exc)},
            )
            raise
        telemetry.record_event("file.load", data={"path": str(path), "words": count})
        return count

    def status(self) -> EditorStatus:
        return EditorStatus(
            word_count=self.document.length,
            undo_count=self.history.undo_count,
            undo_capacity=self.history.capacity,
            redo_count=self.history.redo_count,
        )

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> DocumentMirror:
        return DocumentMirror(
            words=self.words(),
            status=self.status(),
            version=self.document.version,
            attributes=dict(attributes or {}),
        )

    def close(self) -> None:
        self.document.clear()
        self.history.clear()

    def _validate(self, word: str) -> None:
        ensure_word(word, max_length=self.config.max_word_length)


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, editor: Editor, label: str) -> None:
        self.editor = editor
        self.label = label
        self.recorded: List[EditAction] = []
        self._span_cm: Optional[ContextManager[SpanHandle]] = None
        self._handle: Optional[SpanHandle] = None

    @property
    def handle(self) -> SpanHandle:
        if self._handle is None:
            raise RuntimeError("Transaction is not active")
        return self._handle

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"editor::{self.label}",
            component=True,
            metadata={"editor": self.editor.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def record(self, action: EditAction) -> None:
        self.recorded.append(action)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._handle is not None:
            self._handle.add_metadata("actions", len(self.recorded))
            self._handle.add_metadata("words", self.editor.document.length)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Editor", "Transaction"]
