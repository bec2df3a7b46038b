"""Validation helpers shared across buffer services."""

from __future__ import annotations

from word_engine.errors import WordValidationError


def ensure_word(word: str, *, max_length: int) -> str:
    if not isinstance(word, str):
        raise WordValidationError("Words must be strings", word=None)
    if not word:
        raise WordValidationError("Words cannot be empty", word=word)
    if any(char.isspace() for char in word):
        raise WordValidationError("Words cannot contain whitespace", word=word)
    if len(word) > max_length:
        raise WordValidationError(
            f"Word longer than {max_length} characters", word=word
        )
    return word
