"""Resolved project configuration."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from transedit.core.locale import Locale
from transedit.core.formats.types import FileType


@dataclass(frozen=True)
class EditConfig:
    """Settings shared by every file of a translation project."""

    file_type: FileType
    base_locale: Locale
    namespaces: bool = False
    input_directory: Path = Path("i18n")
    input_file_pattern: str = ".i18n.json"


__all__ = ["EditConfig"]
