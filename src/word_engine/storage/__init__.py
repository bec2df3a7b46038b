"""Reading and writing document files."""

from .persistence import load_words, save_words

__all__ = ["load_words", "save_words"]
