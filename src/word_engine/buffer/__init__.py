"""Word document, undo/redo history, and the editing session tying them."""

from .document import WordDocument
from .editor import Editor, Transaction
from .history import ActionKind, ActionStack, EditAction, UndoHistory
from .sync import DocumentMirror, DocumentState, EditorStatus
from .validation import ensure_word

__all__ = [
    "WordDocument",
    "Editor",
    "Transaction",
    "ActionKind",
    "ActionStack",
    "EditAction",
    "UndoHistory",
    "DocumentMirror",
    "DocumentState",
    "EditorStatus",
    "ensure_word",
]
