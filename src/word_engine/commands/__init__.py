"""Single-key editor commands and their dispatcher."""

from .base import CommandContext, CommandResult, EventBus, KeyInput, PathProvider
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps
from .dispatcher import CommandDispatcher, key_to_stroke

__all__ = [
    "CommandContext",
    "CommandResult",
    "EventBus",
    "KeyInput",
    "PathProvider",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
    "CommandDispatcher",
    "key_to_stroke",
]
