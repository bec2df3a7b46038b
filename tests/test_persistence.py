from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from word_engine.errors import PersistenceError
from word_engine.storage import load_words, save_words


def test_save_writes_space_separated_words(tmp_path: Path) -> None:
    target = tmp_path / "out.txt"

    save_words(target, ["alpha", "beta", "gamma"])

    assert target.read_text(encoding="utf-8") == "alpha beta gamma\n"
    assert [p.name for p in tmp_path.iterdir()] == ["out.txt"]


def test_load_splits_on_any_whitespace(tmp_path: Path) -> None:
    target = tmp_path / "in.txt"
    target.write_text("  one\ttwo\n\nthree   four ", encoding="utf-8")

    assert load_words(target) == ["one", "two", "three", "four"]


def test_load_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"

    with pytest.raises(PersistenceError) as excinfo:
        load_words(missing)

    assert excinfo.value.path == missing


def test_save_into_missing_directory_writes_nothing(tmp_path: Path) -> None:
    target = tmp_path / "absent" / "out.txt"

    with pytest.raises(PersistenceError):
        save_words(target, ["a"])

    assert not target.parent.exists()


def test_failed_save_keeps_previous_file(tmp_path: Path) -> None:
    target = tmp_path / "dir-target"
    target.mkdir()

    with pytest.raises(PersistenceError):
        save_words(target, ["a", "b"])

    assert target.is_dir()
    assert list(tmp_path.iterdir()) == [target]


def test_empty_document_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"

    save_words(target, [])

    assert load_words(target) == []


posix_only = pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")


@posix_only
@pytest.mark.parametrize("mode", [0o644, 0o640])
def test_save_keeps_existing_file_mode(tmp_path: Path, mode: int) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("old\n", encoding="utf-8")
    target.chmod(mode)

    save_words(target, ["new"])

    assert stat.S_IMODE(target.stat().st_mode) == mode
    assert target.read_text(encoding="utf-8") == "new\n"


@posix_only
def test_save_new_file_uses_umask_default(tmp_path: Path) -> None:
    target = tmp_path / "fresh.txt"
    previous = os.umask(0o022)
    try:
        save_words(target, ["a"])
    finally:
        os.umask(previous)

    assert stat.S_IMODE(target.stat().st_mode) == 0o644
