from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from word_engine.buffer import Editor
from word_engine.commands import (
    CommandContext,
    CommandDispatcher,
    EventBus,
    KeyInput,
)
from word_engine.config import EditorConfig


def make_dispatcher(
    text: str = "",
    *,
    path: Optional[Path] = None,
    max_undo: int = 5,
) -> CommandDispatcher:
    editor = Editor(EditorConfig(max_undo=max_undo))
    if text:
        editor.seed(text)
    context = CommandContext(
        editor=editor,
        bus=EventBus(),
        path_provider=lambda _purpose: str(path) if path else None,
    )
    return CommandDispatcher(context)


def test_ctrl_z_and_ctrl_y_drive_history() -> None:
    dispatcher = make_dispatcher("a b c")
    editor = dispatcher.context.editor

    undone = dispatcher.handle_key(KeyInput(key="z", modifiers=("ctrl",)))
    assert undone.status == "undo"
    assert editor.words() == ("a", "b")

    redone = dispatcher.handle_key(KeyInput(key="ctrl+y"))
    assert redone.status == "redo"
    assert editor.words() == ("a", "b", "c")


def test_raw_control_bytes_dispatch() -> None:
    dispatcher = make_dispatcher("a b")

    result = dispatcher.handle_key(KeyInput(key="\x1a"))

    assert result.status == "undo"
    assert dispatcher.context.editor.words() == ("a",)


def test_empty_history_reports_nothing_to_do() -> None:
    dispatcher = make_dispatcher()

    undo = dispatcher.handle_key(KeyInput(key="ctrl+z"))
    redo = dispatcher.handle_key(KeyInput(key="ctrl+y"))

    assert undo.consumed and undo.status == "nothing_to_undo"
    assert redo.consumed and redo.status == "nothing_to_redo"
    assert dispatcher.running


def test_unbound_key_is_not_consumed() -> None:
    dispatcher = make_dispatcher("a")

    result = dispatcher.handle_key(KeyInput(key="q"))

    assert result.consumed is False
    assert result.status == "unbound"
    assert result.message == "q"


def test_escape_requests_exit_and_stops_dispatch() -> None:
    dispatcher = make_dispatcher("a b")
    events: List[object] = []
    dispatcher.context.bus.subscribe("session.exit", events.append)

    result = dispatcher.handle_key(KeyInput(key="ESC"))

    assert result.exit_requested is True
    assert not dispatcher.running
    assert len(events) == 1
    assert dispatcher.handle_key(KeyInput(key="ctrl+z")).status == "closed"


def test_save_then_load_through_keys(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    dispatcher = make_dispatcher("hello brave new world", path=target)

    saved = dispatcher.handle_key(KeyInput(key="s", text="s"))
    assert saved.status == "saved"
    assert target.read_text(encoding="utf-8") == "hello brave new world\n"

    dispatcher.handle_key(KeyInput(key="ctrl+z"))
    loaded = dispatcher.handle_key(KeyInput(key="l", text="l"))

    editor = dispatcher.context.editor
    assert loaded.status == "loaded"
    assert editor.words() == ("hello", "brave", "new", "world")
    assert editor.history.undo_count == 0
    assert editor.history.redo_count == 0


def test_load_failure_is_reported_not_raised(tmp_path: Path) -> None:
    dispatcher = make_dispatcher("a b", path=tmp_path / "missing.txt")

    result = dispatcher.handle_key(KeyInput(key="l"))

    assert result.status == "load_failed"
    assert result.message
    assert dispatcher.context.editor.words() == ("a", "b")
    assert dispatcher.running


def test_save_failure_is_reported(tmp_path: Path) -> None:
    dispatcher = make_dispatcher("a", path=tmp_path / "no-such-dir" / "doc.txt")

    result = dispatcher.handle_key(KeyInput(key="s"))

    assert result.status == "save_failed"


def test_save_and_load_cancel_without_path() -> None:
    dispatcher = make_dispatcher("a")

    assert dispatcher.handle_key(KeyInput(key="s")).status == "save_cancelled"
    assert dispatcher.handle_key(KeyInput(key="l")).status == "load_cancelled"
    assert dispatcher.context.editor.words() == ("a",)


def test_submit_text_seeds_document() -> None:
    dispatcher = make_dispatcher()
    seeded: List[object] = []
    dispatcher.context.bus.subscribe("document.seed", seeded.append)

    result = dispatcher.submit_text("one two")

    assert result.status == "seeded"
    assert dispatcher.context.editor.status().undo_count == 2
    assert seeded == [{"words": 2}]


def test_submit_text_rejects_overlong_words() -> None:
    dispatcher = make_dispatcher()

    result = dispatcher.submit_text("z" * 80)

    assert result.status == "input_rejected"
    assert dispatcher.context.editor.document.is_empty


def test_close_ends_session_and_clears_state() -> None:
    dispatcher = make_dispatcher("a b c")

    dispatcher.close()

    editor = dispatcher.context.editor
    assert not dispatcher.running
    assert editor.document.is_empty
    assert editor.history.undo_count == 0
    assert dispatcher.submit_text("again").status == "closed"
