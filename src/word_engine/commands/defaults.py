"""Built-in commands and the keys they are bound to."""

from __future__ import annotations

from typing import Iterable, Sequence

from word_engine.keymaps import ActionRef, Binding, KeymapRegistry, KeyStroke

from . import handlers

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="history.undo",
        handler=handlers.undo_edit,
        description="Undo the most recent edit",
    ),
    ActionRef(
        id="history.redo",
        handler=handlers.redo_edit,
        description="Redo the most recently undone edit",
    ),
    ActionRef(
        id="session.exit",
        handler=handlers.exit_session,
        description="Leave the editor",
    ),
    ActionRef(
        id="file.save",
        handler=handlers.save_document,
        description="Save the document to a file",
    ),
    ActionRef(
        id="file.load",
        handler=handlers.load_document,
        description="Load a document and clear history",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="undo.ctrl_z",
        stroke=KeyStroke("z", ("ctrl",)),
        action_id="history.undo",
        description="Undo",
    ),
    Binding(
        id="redo.ctrl_y",
        stroke=KeyStroke("y", ("ctrl",)),
        action_id="history.redo",
        description="Redo",
    ),
    Binding(
        id="exit.escape",
        stroke=KeyStroke("escape"),
        action_id="session.exit",
        description="Exit",
    ),
    Binding(
        id="save.s",
        stroke=KeyStroke("s"),
        action_id="file.save",
        description="Save",
    ),
    Binding(
        id="load.l",
        stroke=KeyStroke("l"),
        action_id="file.load",
        description="Load",
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in commands and their default keys."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
