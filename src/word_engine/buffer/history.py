"""Undo/redo history replayed against a ``WordDocument``."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Optional, Sequence

from word_engine.runtime import telemetry

from .document import WordDocument


class ActionKind(str, Enum):
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class EditAction:
    """One completed edit.

    ``INSERT`` records the word that was inserted and where, so the inverse
    is a delete at ``position``. ``DELETE`` records the removed word and its
    old position, so the inverse re-inserts it there.
    """

    kind: ActionKind
    word: str
    position: int


class ActionStack:
    """LIFO of ``EditAction`` with an optional capacity.

    A bounded stack evicts its oldest entry to make room; it never rejects a
    push.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: Deque[EditAction] = deque()

    def push(self, action: EditAction) -> Optional[EditAction]:
        """Push ``action`` and return whatever was evicted to make room."""

        evicted = None
        if self.capacity is not None and len(self._items) >= self.capacity:
            evicted = self._items.popleft()
        self._items.append(action)
        return evicted

    def pop(self) -> Optional[EditAction]:
        if not self._items:
            return None
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def entries(self) -> Sequence[EditAction]:
        """Oldest first, top of stack last."""

        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class UndoHistory:
    """Bounded undo stack plus unbounded redo stack.

    Recording a fresh edit clears redo. ``undo`` moves an action to redo
    without eviction; ``redo`` moves it back through the same bounded push a
    fresh edit uses.
    """

    def __init__(self, capacity: int = 5, *, logger_name: str | None = None) -> None:
        self._undo = ActionStack(capacity)
        self._redo = ActionStack()
        self._logger_name = logger_name

    @property
    def capacity(self) -> int:
        return self._undo.capacity or 0

    @property
    def undo_count(self) -> int:
        return len(self._undo)

    @property
    def redo_count(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo_entries(self) -> Sequence[EditAction]:
        return self._undo.entries()

    def redo_entries(self) -> Sequence[EditAction]:
        return self._redo.entries()

    def record_insert(self, word: str, position: int) -> EditAction:
        return self._record(EditAction(ActionKind.INSERT, word, position))

    def record_delete(self, word: str, position: int) -> EditAction:
        return self._record(EditAction(ActionKind.DELETE, word, position))

    def undo(self, document: WordDocument) -> bool:
        action = self._undo.pop()
        if action is None:
            return False
        if action.kind is ActionKind.INSERT:
            # Positional inverse: whatever sits at ``position`` goes.
            applied = document.delete_at(action.position) is not None
        else:
            document.insert_at(action.word, action.position)
            applied = True
        self._redo.push(action)
        self._report("history.undo", action, applied)
        return True

    def redo(self, document: WordDocument) -> bool:
        action = self._redo.pop()
        if action is None:
            return False
        if action.kind is ActionKind.INSERT:
            document.insert_at(action.word, action.position)
            applied = True
        else:
            applied = document.delete_at(action.position) is not None
        self._push_undo(action)
        self._report("history.redo", action, applied)
        return True

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def _record(self, action: EditAction) -> EditAction:
        self._push_undo(action)
        self._redo.clear()
        return action

    def _push_undo(self, action: EditAction) -> None:
        evicted = self._undo.push(action)
        if evicted is not None:
            telemetry.record_event(
                "history.evict",
                level="debug",
                data={"kind": evicted.kind.value, "position": evicted.position},
                logger_name=self._logger_name,
            )

    def _report(self, event: str, action: EditAction, applied: bool) -> None:
        telemetry.record_event(
            event,
            level="debug" if applied else "warning",
            data={
                "kind": action.kind.value,
                "word": action.word,
                "position": action.position,
                "applied": applied,
            },
            logger_name=self._logger_name,
        )


__all__ = ["ActionKind", "ActionStack", "EditAction", "UndoHistory"]
