"""Node kinds for decoded translation trees.

Decoders hand back plain ``dict``/``list``/scalar structures (exactly what
``json`` and ``yaml.safe_load`` produce). Every accessor operation classifies
a node once with :func:`node_kind` and dispatches on the resulting tag.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

Scalar = Union[str, int, float, bool, None]
Tree = Union[Scalar, List[Any], Dict[str, Any]]
TreeMap = Dict[str, Any]


class NodeKind(Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def node_kind(node: Any) -> NodeKind:
    """Return the tag of ``node``."""
    if isinstance(node, dict):
        return NodeKind.MAPPING
    if isinstance(node, list):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def empty_container(kind: NodeKind) -> Union[List[Any], Dict[str, Any]]:
    if kind is NodeKind.SEQUENCE:
        return []
    if kind is NodeKind.MAPPING:
        return {}
    raise ValueError(f"No container for node kind: {kind.value}")


__all__ = ["Scalar", "Tree", "TreeMap", "NodeKind", "node_kind", "empty_container"]
