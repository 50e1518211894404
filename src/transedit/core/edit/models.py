"""Edit operations and their structured results."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from transedit.core.exceptions import UsageError


class EditOperation(str, Enum):
    ADD = "add"  # transedit edit add fr greetings.hello "Bonjour"
    MOVE = "move"  # transedit edit move loginPage authPage
    COPY = "copy"  # transedit edit copy loginPage authPage
    DELETE = "delete"  # transedit edit delete loginPage.title
    OUTDATED = "outdated"  # transedit edit outdated loginPage.title

    @classmethod
    def names(cls) -> str:
        return ", ".join(op.value for op in cls)

    @classmethod
    def from_name(cls, name: Optional[str]) -> "EditOperation":
        if not name:
            raise UsageError(f"Missing operation. Expected: {cls.names()}")
        for op in cls:
            if op.value == name:
                return op
        raise UsageError(
            f"Invalid operation. Expected: {cls.names()}",
            context={"operation": name},
        )


class ActionKind(str, Enum):
    RENAME = "rename"
    DELETE = "delete"
    ADD = "add"
    FLAG = "flag"
    NOT_FOUND = "not-found"
    NO_DESTINATION = "no-destination"


@dataclass(frozen=True)
class FileAction:
    """One thing that happened (or did not) to one file."""

    path: Path
    kind: ActionKind
    key: str
    locale: str
    detail: str = ""

    @property
    def modified(self) -> bool:
        return self.kind in (ActionKind.RENAME, ActionKind.DELETE, ActionKind.ADD, ActionKind.FLAG)

    def describe(self) -> str:
        if self.kind is ActionKind.RENAME:
            return f'[{self.path}] Rename "{self.key}" -> "{self.detail}"'
        if self.kind is ActionKind.DELETE:
            return f'[{self.path}] Delete "{self.key}"'
        if self.kind is ActionKind.ADD:
            return f'[{self.path}] Add "{self.key}"'
        if self.kind is ActionKind.FLAG:
            return f'[{self.path}] Flag "{self.key}" as outdated <{self.locale}>'
        if self.kind is ActionKind.NO_DESTINATION:
            return f'[{self.path}] Keep "{self.key}": no destination file for <{self.locale}>'
        return f'[{self.path}] "{self.key}" not found'

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "action": self.kind.value,
            "key": self.key,
            "locale": self.locale,
            "detail": self.detail,
        }


@dataclass
class EditResult:
    operation: EditOperation
    path: str
    destination: Optional[str] = None
    rename: Optional[bool] = None
    actions: List[FileAction] = field(default_factory=list)

    def record(self, action: FileAction) -> None:
        self.actions.append(action)

    @property
    def found(self) -> bool:
        """Whether any file was modified."""
        return any(a.modified for a in self.actions)

    @property
    def touched_files(self) -> List[Path]:
        seen: List[Path] = []
        for action in self.actions:
            if action.modified and action.path not in seen:
                seen.append(action.path)
        return seen

    def summary(self) -> str:
        if self.operation in (EditOperation.MOVE, EditOperation.COPY) and not self.found:
            return "No origin values found."
        if not self.found:
            return "Nothing changed."
        count = len(self.touched_files)
        return f"Updated {count} file{'s' if count != 1 else ''}."

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation.value,
            "path": self.path,
            "destination": self.destination,
            "rename": self.rename,
            "found": self.found,
            "files": [str(p) for p in self.touched_files],
            "actions": [a.to_dict() for a in self.actions],
        }


__all__ = ["EditOperation", "ActionKind", "FileAction", "EditResult"]
