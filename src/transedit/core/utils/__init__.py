"""Utility helpers for transedit core.

- io/: file I/O (atomic writes, text, YAML)
- merge: deep merge for layered configuration
"""
from __future__ import annotations

from .merge import deep_merge

__all__ = ["deep_merge"]
