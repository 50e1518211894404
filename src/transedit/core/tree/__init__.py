"""Translation tree model and path-addressed accessors.

- nodes: node kinds of decoded trees
- path: dotted key-path addresses
- accessor: get / add / delete / update by path
- modifiers: key modifier helpers (e.g. the OUTDATED flag)
"""
from __future__ import annotations

from .accessor import add_item_to_map, delete_entry, get_value_at_path, update_entry
from .modifiers import NodeModifiers, base_name, split_key, with_modifier
from .nodes import NodeKind, Tree, TreeMap, node_kind
from .path import PathAddress, Segment

__all__ = [
    # nodes
    "NodeKind",
    "Tree",
    "TreeMap",
    "node_kind",
    # path
    "PathAddress",
    "Segment",
    # accessor
    "get_value_at_path",
    "add_item_to_map",
    "delete_entry",
    "update_entry",
    # modifiers
    "NodeModifiers",
    "base_name",
    "split_key",
    "with_modifier",
]
