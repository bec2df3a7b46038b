from __future__ import annotations

from contextlib import nullcontext
from typing import Any, Dict, List, Optional, Tuple

import pytest

from word_engine.buffer import Editor
from word_engine.runtime import telemetry


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: List[Tuple[str, str, Dict[str, str]]] = []
        self.context: Dict[str, str] = {}
        self.components: List[str] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    def track_component(self, name: str) -> Any:
        self.components.append(name)
        return nullcontext()

    def profile(self, name: str) -> Any:
        return nullcontext()

    def debug_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("debug", message, dict(pairs)))

    def info_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("info", message, dict(pairs)))

    def warning_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("warning", message, dict(pairs)))

    def error_with(self, message: str, pairs: List[Tuple[str, str]]) -> None:
        self.lines.append(("error", message, dict(pairs)))

    def spans(self, message: str) -> List[Dict[str, str]]:
        return [data for _, line, data in self.lines if line == message]


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()

    def fake_get_logger(name: Optional[str] = None) -> RecordingLogger:
        return logger

    monkeypatch.setattr(telemetry, "get_logger", fake_get_logger)
    return logger


def test_span_reports_handle_metadata_on_success(
    recorder: RecordingLogger,
) -> None:
    with telemetry.span(
        "demo", component=True, metadata={"editor": "e1"}
    ) as handle:
        assert recorder.context == {"editor": "e1"}
        handle.add_metadata("status", "ok")

    assert recorder.context == {}
    assert recorder.components == ["demo"]
    assert recorder.spans("span::done") == [
        {"span": "demo", "component": "demo", "editor": "e1", "status": "ok"}
    ]


def test_span_reports_failure_and_reraises(recorder: RecordingLogger) -> None:
    with pytest.raises(KeyError):
        with telemetry.span("broken", metadata={"n": 3}):
            raise KeyError("gone")

    assert recorder.context == {}
    assert recorder.spans("span::done") == []
    (failure,) = recorder.spans("span::fail")
    assert failure["span"] == "broken"
    assert failure["n"] == "3"
    assert "gone" in failure["reason"]


def test_editor_transactions_report_outcome(recorder: RecordingLogger) -> None:
    editor = Editor()
    editor.seed("a b")

    editor.undo()
    editor.redo()
    editor.redo()
    editor.delete_word(9)

    done = {
        (data["span"], data.get("status")): data
        for data in recorder.spans("span::done")
        if data["span"].startswith("editor::")
    }
    assert done[("editor::seed", None)]["actions"] == "2"
    assert done[("editor::undo", "ok")]["words"] == "1"
    assert done[("editor::redo", "ok")]["words"] == "2"
    assert ("editor::redo", "empty") in done
    assert done[("editor::delete_word", "invalid_position")]["actions"] == "0"


def test_record_event_rejects_unknown_level(recorder: RecordingLogger) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("x", level="loud")

    telemetry.record_event("x", level="WARNING", data={"k": 1})

    assert recorder.lines[-1] == ("warning", "event::x", {"event": "x", "k": "1"})
