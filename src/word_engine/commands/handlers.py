"""Command handlers behind the editor's single-key commands."""

from __future__ import annotations

from word_engine.errors import PersistenceError
from word_engine.keymaps import ResolutionMatch

from .base import CommandContext, CommandResult


def undo_edit(context: CommandContext, match: ResolutionMatch) -> CommandResult:
    del match
    if not context.editor.undo():
        return CommandResult(
            consumed=True, status="nothing_to_undo", message="Nothing to undo."
        )
    context.bus.emit("history.undo", context.editor.status())
    return CommandResult(consumed=True, status="undo")


def redo_edit(context: CommandContext, match: ResolutionMatch) -> CommandResult:
    del match
    if not context.editor.redo():
        return CommandResult(
            consumed=True, status="nothing_to_redo", message="Nothing to redo."
        )
    context.bus.emit("history.redo", context.editor.status())
    return CommandResult(consumed=True, status="redo")


def exit_session(context: CommandContext, match: ResolutionMatch) -> CommandResult:
    del match
    context.bus.emit("session.exit", context.editor.status())
    return CommandResult(
        consumed=True, status="exit", message="Exiting editor.", exit_requested=True
    )


def save_document(context: CommandContext, match: ResolutionMatch) -> CommandResult:
    del match
    path = context.path_provider("save")
    if not path:
        return CommandResult(consumed=True, status="save_cancelled")
    try:
        context.editor.save(path)
    except PersistenceError as exc:
        return CommandResult(consumed=True, status="save_failed", message=str(exc))
    context.bus.emit("file.save", {"path": path})
    return CommandResult(
        consumed=True, status="saved", message="File saved successfully."
    )


def load_document(context: CommandContext, match: ResolutionMatch) -> CommandResult:
    del match
    path = context.path_provider("load")
    if not path:
        return CommandResult(consumed=True, status="load_cancelled")
    try:
        count = context.editor.load(path)
    except PersistenceError as exc:
        return CommandResult(consumed=True, status="load_failed", message=str(exc))
    context.bus.emit("file.load", {"path": path, "words": count})
    return CommandResult(
        consumed=True,
        status="loaded",
        message="File loaded. Undo history cleared.",
    )


__all__ = [
    "undo_edit",
    "redo_edit",
    "exit_session",
    "save_document",
    "load_document",
]
