"""Executable Textual app hosting the word editor."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, Input, Static

from word_engine.buffer import DocumentMirror, Editor
from word_engine.commands import CommandContext, CommandDispatcher, EventBus
from word_engine.config import EditorConfig
from word_engine.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

BANNER = "Ctrl+Z Undo | Ctrl+Y Redo | ESC Exit | s Save | l Load"


def create_session(
    config: EditorConfig | None = None,
    *,
    file_path: str | None = None,
) -> CommandDispatcher:
    """Build a dispatcher around a fresh editor with the default keymap."""

    editor = Editor(config or EditorConfig.from_env())
    context = CommandContext(
        editor=editor,
        bus=EventBus(),
        path_provider=lambda _purpose: file_path,
    )
    return CommandDispatcher(context)


@dataclass
class UIState:
    document_text: str = ""
    status_text: str = ""
    message_text: str = ""


class WordEngineApp(App[None]):
    """Textual front end: type a line, then edit it with the command keys."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-input {
		margin: 0 1;
	}

	#document-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#message-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: EditorConfig | None = None,
        file_path: str | None = None,
        initial_text: str | None = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._config = config
        self._file_path = file_path
        self._initial_text = initial_text
        self.dispatcher: CommandDispatcher | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._input_widget: Input | None = None
        self._document_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._input_widget = Input(
            placeholder="Paste or type text, then press ENTER", id="text-input"
        )
        yield self._input_widget
        with Vertical(id="document-area"):
            self._document_widget = Static("", id="document-view")
            yield self._document_widget
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static(BANNER, id="message-line")
        yield self._status_widget
        yield self._message_widget
        yield Footer()

    def on_mount(self) -> None:
        self.dispatcher = create_session(self._config, file_path=self._file_path)
        hooks = TextualUIHooks(
            update_document=self._update_document,
            update_status=self._update_message,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.dispatcher, hooks)
        if self._initial_text:
            self.adapter.submit_text(self._initial_text)
            self._finish_input()
        elif self._input_widget:
            self._input_widget.focus()

    def on_unmount(self) -> None:
        if self.dispatcher and self.dispatcher.running:
            self.dispatcher.close()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        result = self.adapter.submit_text(event.value)
        if result.status == "seeded":
            self._finish_input()
        event.stop()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or isinstance(self.focused, Input):
            return
        result = self.adapter.handle_textual_key(event.key, text=event.character)
        if result.consumed:
            event.stop()
        if result.exit_requested:
            if self.dispatcher:
                self.dispatcher.close()
            self.exit()

    def _finish_input(self) -> None:
        if self._input_widget:
            self._input_widget.display = False
        self.set_focus(None)

    def _update_document(self, mirror: DocumentMirror) -> None:
        self._state.document_text = mirror.text
        self._state.status_text = mirror.status.render()
        if self._document_widget:
            self._document_widget.update(self._state.document_text)
        if self._status_widget:
            self._status_widget.update(self._state.status_text)

    def _update_message(self, message: str) -> None:
        self._state.message_text = message
        if self._message_widget:
            self._message_widget.update(message)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "file.save" and isinstance(payload, dict):
            self.sub_title = f"saved {payload.get('path')}"
        elif name == "file.load" and isinstance(payload, dict):
            self.sub_title = str(payload.get("path"))

    def _log_line(self, line: str) -> None:
        self.log(line)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the word editor.")
    parser.add_argument(
        "--file",
        default=telemetry.env_value("FILE"),
        help="File used by the save (s) and load (l) commands",
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Initial text; skips the input line when given",
    )
    parser.add_argument(
        "--max-undo",
        type=_positive_int,
        default=None,
        help="Undo history capacity (default: WORD_ENGINE_MAX_UNDO or 5)",
    )
    parser.add_argument(
        "--log-preset",
        default="quiet",
        choices=("development", "production", "quiet"),
        help="Telemetry preset while the app runs (default: quiet)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    config = EditorConfig.from_env().with_overrides(max_undo=args.max_undo)
    file_path = str(Path(args.file).expanduser()) if args.file else None
    app = WordEngineApp(config=config, file_path=file_path, initial_text=args.text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
