"""Cross-file edit operations (add, move, copy, delete, outdated)."""
from __future__ import annotations

from .engine import OPERATIONS, EditEngine, is_rename, run_edit
from .models import ActionKind, EditOperation, EditResult, FileAction

__all__ = [
    "EditEngine",
    "run_edit",
    "is_rename",
    "OPERATIONS",
    "EditOperation",
    "ActionKind",
    "FileAction",
    "EditResult",
]
