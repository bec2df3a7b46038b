"""Word-level editor core with bounded undo/redo history."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "config",
    "errors",
    "keymaps",
    "runtime",
    "storage",
]

__version__ = "0.1.0"
