"""Positional word storage for word_engine sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence


@dataclass(slots=True)
class WordDocument:
    """Ordered word sequence addressed by 1-based positions.

    Position ``1`` is the first word and ``length + 1`` means "append".
    Positions are indices, not stored fields: inserting or deleting shifts
    every later word by one.
    """

    _words: List[str] = field(default_factory=list)
    version: int = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordDocument":
        return cls(_words=list(words))

    def insert_at(self, word: str, position: int) -> int:
        """Insert ``word`` before the word at ``position``.

        ``position <= 1`` prepends and anything past the end appends. Returns
        the position the word now occupies.
        """

        index = min(max(position, 1), len(self._words) + 1) - 1
        self._words.insert(index, word)
        self.version += 1
        return index + 1

    def delete_at(self, position: int) -> Optional[str]:
        """Remove and return the word at ``position``.

        Returns ``None`` and leaves the document untouched when ``position``
        does not address an existing word.
        """

        if not self.contains(position):
            return None
        removed = self._words.pop(position - 1)
        self.version += 1
        return removed

    def contains(self, position: int) -> bool:
        return 1 <= position <= len(self._words)

    def word_at(self, position: int) -> Optional[str]:
        if not self.contains(position):
            return None
        return self._words[position - 1]

    def clear(self) -> None:
        if self._words:
            self._words.clear()
            self.version += 1

    def words(self) -> Sequence[str]:
        """Return the current words without exposing internal mutability."""

        return tuple(self._words)

    @property
    def length(self) -> int:
        return len(self._words)

    @property
    def is_empty(self) -> bool:
        return not self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._words))
