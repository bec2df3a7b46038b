"""Plain-text document files: whitespace separated words, no escaping."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

from word_engine.errors import PersistenceError
from word_engine.runtime.telemetry import span

PathLike = Union[str, "os.PathLike[str]"]

ENCODING = "utf-8"


def _file_mode(target: Path) -> int:
    """Mode for the saved file: the existing one, or the umask default."""

    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_words(path: PathLike, words: Iterable[str]) -> Path:
    """Write ``words`` space separated to ``path``.

    The file is written next to its target and renamed into place, so a
    failed save leaves any previous file untouched.
    """

    target = Path(path)
    payload = " ".join(words) + "\n"
    with span(
        "storage::save",
        component="storage",
        metadata={"path": str(target)},
    ):
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", dir=target.parent
            )
            with os.fdopen(fd, "w", encoding=ENCODING) as handle:
                handle.write(payload)
            os.chmod(tmp_name, _file_mode(target))
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(
                f"Cannot save file '{target}': {exc.strerror or exc}", path=target
            ) from exc
    return target


def load_words(path: PathLike) -> List[str]:
    """Read the whitespace delimited words stored in ``path``."""

    target = Path(path)
    with span(
        "storage::load",
        component="storage",
        metadata={"path": str(target)},
    ):
        try:
            text = target.read_text(encoding=ENCODING)
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            raise PersistenceError(
                f"Cannot open file '{target}': {reason}", path=target
            ) from exc
    return text.split()


__all__ = ["save_words", "load_words"]
