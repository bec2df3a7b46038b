"""Key dispatcher turning key presses into editor commands."""

from __future__ import annotations

from word_engine.errors import WordValidationError
from word_engine.keymaps import KeymapRegistry, KeyStroke, ResolutionMatch
from word_engine.runtime import telemetry

from .base import CommandContext, CommandResult, KeyInput
from .defaults import load_default_keymaps


def key_to_stroke(key: KeyInput) -> KeyStroke:
    stroke = KeyStroke.parse(key.key)
    if not key.modifiers:
        return stroke
    return KeyStroke(stroke.key, stroke.modifiers + tuple(key.modifiers))


class CommandDispatcher:
    """Resolves keys against the registry and runs the bound command.

    One dispatcher drives one editor session. After a command requests an
    exit, further keys are ignored until the session is closed.
    """

    def __init__(
        self,
        context: CommandContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self.logger_name = "word_engine.commands"
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="word_engine.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def handle_key(self, key: KeyInput) -> CommandResult:
        if not self._running:
            return CommandResult(consumed=False, status="closed")
        stroke = key_to_stroke(key)
        with telemetry.span(
            name="commands::dispatch",
            logger_name=self.logger_name,
            component=True,
            metadata={"key": stroke.token},
        ) as handle:
            match = self.keymap_registry.resolve(stroke)
            if match is None:
                handle.add_metadata("status", "unbound")
                return CommandResult(
                    consumed=False, status="unbound", message=stroke.token
                )
            handle.add_metadata("binding_id", match.binding.id)
            result = self._execute_match(match)
            handle.add_metadata("status", result.status)
        if result.exit_requested:
            self._running = False
        return result

    def submit_text(self, text: str) -> CommandResult:
        """Seed the document with a line of typed or pasted text."""

        if not self._running:
            return CommandResult(consumed=False, status="closed")
        try:
            added = self.context.editor.seed(text)
        except WordValidationError as exc:
            telemetry.record_event(
                "input.rejected",
                level="warning",
                data={"reason": str(exc), "word": exc.word},
                logger_name=self.logger_name,
            )
            return CommandResult(
                consumed=True, status="input_rejected", message=str(exc)
            )
        self.context.bus.emit("document.seed", {"words": added})
        return CommandResult(consumed=True, status="seeded", message=f"{added} words")

    def close(self) -> None:
        """End the session: the document and both histories are released."""

        self._running = False
        self.context.editor.close()
        telemetry.record_event(
            "session.close",
            data={"editor": self.context.editor.name},
            logger_name=self.logger_name,
        )

    def _execute_match(self, match: ResolutionMatch) -> CommandResult:
        with telemetry.span(
            "commands::execute",
            logger_name=self.logger_name,
            component="commands",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, CommandResult):
            return outcome
        return CommandResult(consumed=True)


__all__ = ["CommandDispatcher", "key_to_stroke"]
