"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from transedit.core.config import load_config
from transedit.core.edit import OPERATIONS, EditOperation, EditResult, run_edit
from transedit.core.exceptions import TranseditError
from transedit.core.files import FileCollection
from transedit.core.stdlib_logging import configure_stdlib_logging

from ._output import OutputFormatter

logger = logging.getLogger(__name__)


def get_repo_root(args: argparse.Namespace) -> Path:
    """Project root from ``--repo-root``, else the current directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd()


def load_collection(args: argparse.Namespace) -> FileCollection:
    """Load the project config and discover its translation files."""
    repo_root = get_repo_root(args)
    config_path: Optional[Path] = Path(args.config) if getattr(args, "config", None) else None
    config = load_config(repo_root, config_path)
    return FileCollection.discover(config, repo_root)


def render_result(formatter: OutputFormatter, result: EditResult) -> None:
    if formatter.json_mode:
        formatter.success(result.to_dict(), result.summary())
        return
    if result.operation is EditOperation.MOVE:
        formatter.text(
            f"Operation: {result.path} -> {result.destination} (rename: {str(result.rename).lower()})"
        )
        formatter.text("")
    elif result.operation is EditOperation.COPY:
        formatter.text(f"Operation: {result.path} -> {result.destination}")
        formatter.text("")
    for action in result.actions:
        if action.modified:
            formatter.text(action.describe())
    formatter.text(result.summary())


def run_edit_command(args: argparse.Namespace, arguments: Sequence[str]) -> int:
    """Run one edit operation for a CLI command and render its outcome."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    configure_stdlib_logging(level="DEBUG" if getattr(args, "verbose", False) else "WARNING")

    try:
        operation = EditOperation.from_name(arguments[0] if arguments else None)
        formatter.text(OPERATIONS[operation])
        formatter.text("")
        collection = load_collection(args)
        result = run_edit(collection, arguments)
    except TranseditError as exc:
        formatter.error(exc, error_code=exc.__class__.__name__)
        return 1

    render_result(formatter, result)
    return 0


__all__ = ["get_repo_root", "load_collection", "render_result", "run_edit_command"]
