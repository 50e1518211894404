"""transedit configuration.

Usage:
    from transedit.core.config import load_config

    config = load_config(repo_root=Path("/path/to/project"))
    config.base_locale.language_tag
"""
from __future__ import annotations

from .model import EditConfig
from .loader import build_config, load_config, load_config_data, validate_config_data

__all__ = [
    "EditConfig",
    "build_config",
    "load_config",
    "load_config_data",
    "validate_config_data",
]
