"""Dataclasses describing key bindings and the commands they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

# Raw terminal bytes for the classic console editor keys.
CONTROL_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "\x1a": "ctrl+z",
        "\x19": "ctrl+y",
        "\x1b": "escape",
        "esc": "escape",
        "<esc>": "escape",
    }
)


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def _normalize_key(key: str) -> str:
    # Single characters stay case sensitive ("s" is not "S").
    return key if len(key) == 1 else key.lower()


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", _normalize_key(self.key))
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, raw: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+z"``-style text or a raw control byte."""

        if not raw:
            raise ValueError("key cannot be empty")
        alias = CONTROL_ALIASES.get(raw if len(raw) == 1 else raw.lower())
        text = alias or raw
        if text == "+" or "+" not in text:
            return cls(text)
        *modifiers, key = text.split("+")
        if not key:
            raise ValueError(f"Malformed key '{raw}'")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke with a registered action."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")
        if isinstance(self.stroke, str):
            object.__setattr__(self, "stroke", KeyStroke.parse(self.stroke))

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "CONTROL_ALIASES",
    "KeyStroke",
    "ActionRef",
    "Binding",
]
