"""Key modifiers.

Translation keys may carry modifiers in a trailing parenthesised list, e.g.
``title(rich)`` or ``welcome(rich, OUTDATED)``. The base name (text before
the parenthesis) is what paths address.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple


class NodeModifiers:
    OUTDATED = "OUTDATED"


def split_key(key: str) -> Tuple[str, Dict[str, Optional[str]]]:
    """Split ``key`` into its base name and modifier mapping.

    >>> split_key("title(rich, param=name)")
    ('title', {'rich': None, 'param': 'name'})
    """
    if not key.endswith(")") or "(" not in key:
        return key, {}
    base, _, rest = key.partition("(")
    modifiers: Dict[str, Optional[str]] = {}
    for part in rest[:-1].split(","):
        part = part.strip()
        if not part:
            continue
        name, sep, value = part.partition("=")
        modifiers[name.strip()] = value.strip() if sep else None
    return base, modifiers


def base_name(key: str) -> str:
    return split_key(key)[0]


def with_modifier(key: str, modifier: str, value: Optional[str] = None) -> str:
    """Return ``key`` with ``modifier`` appended; no-op if already present."""
    _, existing = split_key(key)
    if modifier in existing:
        return key
    text = f"{modifier}={value}" if value is not None else modifier
    if existing:
        return f"{key[:-1]}, {text})"
    return f"{key}({text})"


__all__ = ["NodeModifiers", "split_key", "base_name", "with_modifier"]
