"""Editor limits, resolved from defaults, environment, or explicit overrides."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from word_engine.runtime.telemetry import env_value

DEFAULT_MAX_UNDO = 5
DEFAULT_MAX_WORD_LENGTH = 49


def _env_int(name: str, fallback: int) -> int:
    """Positive integer from the environment, else ``fallback``."""

    value = env_value(name)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= 1 else fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Capacity of the undo history and the longest storable word."""

    max_undo: int = DEFAULT_MAX_UNDO
    max_word_length: int = DEFAULT_MAX_WORD_LENGTH

    def __post_init__(self) -> None:
        if self.max_undo < 1:
            raise ValueError("max_undo must be at least 1")
        if self.max_word_length < 1:
            raise ValueError("max_word_length must be at least 1")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        """Read ``WORD_ENGINE_MAX_UNDO`` / ``WORD_ENGINE_MAX_WORD_LENGTH``.

        Malformed or non-positive values fall back to the defaults.
        """

        return cls(
            max_undo=_env_int("MAX_UNDO", DEFAULT_MAX_UNDO),
            max_word_length=_env_int("MAX_WORD_LENGTH", DEFAULT_MAX_WORD_LENGTH),
        )

    def with_overrides(
        self,
        *,
        max_undo: Optional[int] = None,
        max_word_length: Optional[int] = None,
    ) -> "EditorConfig":
        changes = {}
        if max_undo is not None:
            changes["max_undo"] = max_undo
        if max_word_length is not None:
            changes["max_word_length"] = max_word_length
        return replace(self, **changes)


__all__ = ["EditorConfig", "DEFAULT_MAX_UNDO", "DEFAULT_MAX_WORD_LENGTH"]
