"""Textual adapter that wires CommandDispatcher events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from word_engine.buffer import DocumentMirror
from word_engine.commands import CommandDispatcher, CommandResult, KeyInput

BUS_EVENTS = (
    "history.undo",
    "history.redo",
    "file.save",
    "file.load",
    "document.seed",
    "session.exit",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_document: Callable[[DocumentMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges CommandDispatcher + bus events to a Textual-friendly surface."""

    def __init__(self, dispatcher: CommandDispatcher, hooks: TextualUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_document()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> CommandResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.dispatcher.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            exit_requested=result.exit_requested or None,
        )
        return result

    def submit_text(self, text: str) -> CommandResult:
        self._log_state("input ->", length=len(text))
        result = self.dispatcher.submit_text(text)
        self._after_result(result)
        return result

    def _after_result(self, result: CommandResult) -> None:
        if result.consumed:
            self.hooks.update_status(result.message or result.status)
        self._refresh_document()

    def _subscribe_events(self) -> None:
        bus = self.dispatcher.context.bus
        for event in BUS_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_document(self) -> None:
        self.hooks.update_document(self.dispatcher.context.editor.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        editor = self.dispatcher.context.editor
        status = editor.status()
        return {
            "editor": editor.name,
            "words": status.word_count,
            "undo": status.undo_count,
            "redo": status.redo_count,
            "version": editor.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
