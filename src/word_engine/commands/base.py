"""Shared types every command handler receives or returns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from word_engine.buffer import Editor

PathProvider = Callable[[str], Optional[str]]


def _no_path(purpose: str) -> Optional[str]:
    del purpose
    return None


@dataclass(slots=True)
class KeyInput:
    """Normalized key event handed to the dispatcher."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class CommandResult:
    """Outcome of one dispatched key."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    exit_requested: bool = False


class EventBus:
    """Minimal event bus letting commands publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class CommandContext:
    """Services every command handler can reach.

    ``path_provider`` is asked for a file name whenever a save or load runs;
    it receives ``"save"`` or ``"load"`` and returns ``None`` to cancel.
    """

    editor: Editor
    bus: EventBus = field(default_factory=EventBus)
    path_provider: PathProvider = _no_path
    extras: Dict[str, object] = field(default_factory=dict)


__all__ = [
    "CommandContext",
    "CommandResult",
    "EventBus",
    "KeyInput",
    "PathProvider",
]
