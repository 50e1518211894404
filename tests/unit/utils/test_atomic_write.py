from __future__ import annotations

from pathlib import Path

import pytest

from transedit.core.utils import deep_merge
from transedit.core.utils.io import atomic_write, read_text, write_text


def test_write_text_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "strings.i18n.json"
    target.write_text("old", encoding="utf-8")

    write_text(target, "new\n")

    assert read_text(target) == "new\n"


def test_write_text_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "strings.json"
    write_text(target, "{}")
    assert target.exists()


def test_failed_write_keeps_the_original_and_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "strings.i18n.json"
    target.write_text("original", encoding="utf-8")

    def _explode(f) -> None:
        f.write("partial")
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        atomic_write(target, _explode)

    assert target.read_text(encoding="utf-8") == "original"
    assert [p.name for p in tmp_path.iterdir()] == ["strings.i18n.json"]


def test_line_endings_are_preserved(tmp_path: Path) -> None:
    target = tmp_path / "crlf.txt"
    write_text(target, "a\r\nb\r\n")
    assert read_text(target) == "a\r\nb\r\n"


def test_read_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text(tmp_path / "missing.json")


def test_deep_merge_overrides_nested_values() -> None:
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = deep_merge(base, {"a": {"c": 20}, "e": 5})

    assert merged == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}
