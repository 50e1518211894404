from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from transedit.core.utils.io import ensure_parent_dir

_TRANSEDIT_HANDLER: logging.Handler | None = None
_CONFIGURED_TARGET: str | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Configure the ``transedit`` logger hierarchy.

    Logs go to ``log_path`` when given, otherwise to stderr (stdout stays
    reserved for command output). Idempotent per target: calling again with
    the same target only adjusts the level.
    """
    global _TRANSEDIT_HANDLER, _CONFIGURED_TARGET

    root = logging.getLogger("transedit")
    root.setLevel(_level_from_name(level))

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    if _CONFIGURED_TARGET == target and _TRANSEDIT_HANDLER is not None:
        _TRANSEDIT_HANDLER.setLevel(_level_from_name(level))
        return

    if _TRANSEDIT_HANDLER is not None:
        root.removeHandler(_TRANSEDIT_HANDLER)
        _TRANSEDIT_HANDLER.close()
        _TRANSEDIT_HANDLER = None

    handler: logging.Handler
    if log_path:
        ensure_parent_dir(Path(target))
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _TRANSEDIT_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _TRANSEDIT_HANDLER, _CONFIGURED_TARGET
    if _TRANSEDIT_HANDLER is not None:
        logging.getLogger("transedit").removeHandler(_TRANSEDIT_HANDLER)
        _TRANSEDIT_HANDLER.close()
    _TRANSEDIT_HANDLER = None
    _CONFIGURED_TARGET = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
