from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

from word_engine.adapters.textual import TextualEditorAdapter, TextualUIHooks
from word_engine.adapters.textual.app import _parse_args, create_session
from word_engine.buffer import DocumentMirror
from word_engine.commands import CommandDispatcher
from word_engine.config import EditorConfig


def make_dispatcher(file_path: str | None = None) -> CommandDispatcher:
    return create_session(EditorConfig(), file_path=file_path)


def test_adapter_updates_document_and_status() -> None:
    dispatcher = make_dispatcher()
    mirrors: List[DocumentMirror] = []
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_document=mirrors.append,
        update_status=statuses.append,
    )
    adapter = TextualEditorAdapter(dispatcher, hooks)

    adapter.submit_text("a b c")
    adapter.handle_textual_key("ctrl+z")

    assert mirrors[0].text == ""
    assert mirrors[-1].text == "a b"
    assert mirrors[-1].status.render() == "WORDS: 2 | UNDO: 2/5"
    assert statuses == ["3 words", "undo"]


def test_adapter_reports_empty_history_message() -> None:
    dispatcher = make_dispatcher()
    statuses: List[str] = []
    hooks = TextualUIHooks(
        update_document=lambda mirror: None,
        update_status=statuses.append,
    )
    adapter = TextualEditorAdapter(dispatcher, hooks)

    adapter.handle_textual_key("ctrl+y")

    assert statuses == ["Nothing to redo."]


def test_adapter_relays_bus_events(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    dispatcher = make_dispatcher(str(target))
    events: List[Dict[str, Any]] = []
    hooks = TextualUIHooks(
        update_document=lambda mirror: None,
        handle_event=lambda name, payload: events.append(
            {"name": name, "payload": payload}
        ),
    )
    adapter = TextualEditorAdapter(dispatcher, hooks)

    adapter.submit_text("x y")
    adapter.handle_textual_key("s", text="s")
    adapter.handle_textual_key("l", text="l")

    names = [event["name"] for event in events]
    assert names == ["document.seed", "file.save", "file.load"]
    assert events[-1]["payload"] == {"path": str(target), "words": 2}


def test_adapter_exit_key_requests_exit() -> None:
    dispatcher = make_dispatcher()
    hooks = TextualUIHooks(update_document=lambda mirror: None)
    adapter = TextualEditorAdapter(dispatcher, hooks)

    result = adapter.handle_textual_key("escape")

    assert result.exit_requested
    assert not dispatcher.running


def test_adapter_emits_log_lines() -> None:
    dispatcher = make_dispatcher()
    logs: List[str] = []
    hooks = TextualUIHooks(
        update_document=lambda mirror: None,
        log=logs.append,
    )
    adapter = TextualEditorAdapter(dispatcher, hooks)

    adapter.handle_textual_key("z", modifiers=("CTRL",))

    assert any(line.startswith("key ->") for line in logs)
    assert any("status='nothing_to_undo'" in line for line in logs)


def test_cli_accepts_positive_max_undo() -> None:
    args = _parse_args(["--max-undo", "3"])

    assert args.max_undo == 3


@pytest.mark.parametrize("raw", ["0", "-3", "many"])
def test_cli_rejects_invalid_max_undo(
    raw: str, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _parse_args(["--max-undo", raw])

    assert excinfo.value.code == 2
    assert "--max-undo" in capsys.readouterr().err
