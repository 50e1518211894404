"""I/O utilities for transedit.

This package provides safe file operations:
- Core: atomic writes, directory management, text I/O
- YAML: read/parse/dump helpers
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_parent_dir,
    read_text,
    write_text,
)
from .yaml import (
    dump_yaml_string,
    parse_yaml_string,
    read_yaml,
)

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
    # yaml
    "read_yaml",
    "parse_yaml_string",
    "dump_yaml_string",
]
