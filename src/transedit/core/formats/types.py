"""Supported translation file types."""
from __future__ import annotations

from enum import Enum

from transedit.core.exceptions import UsageError


class FileType(str, Enum):
    JSON = "json"
    YAML = "yaml"
    CSV = "csv"

    @classmethod
    def from_name(cls, name: str) -> "FileType":
        """Resolve a type name or file extension (``.yml`` counts as YAML)."""
        key = str(name or "").strip().lower().lstrip(".")
        if key == "yml":
            key = "yaml"
        for member in cls:
            if member.value == key:
                return member
        expected = ", ".join(m.value for m in cls)
        raise UsageError(
            f"Unknown file type: {name!r}. Expected: {expected}",
            context={"file_type": str(name)},
        )


__all__ = ["FileType"]
