"""Path-addressed access to translation trees.

All operations share :func:`_walk`, which resolves the container holding the
last path segment and hands it to a leaf action (read, insert, delete or
replace). Trees are mutated in place.

Missing paths are a normal outcome: reads return ``None`` and deletes/updates
return ``False``. Only inserts raise, and only when an existing node has a
kind that cannot hold the requested path (:class:`TreeTypeError`).
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, Union

from transedit.core.exceptions import TreeTypeError
from transedit.core.tree.modifiers import base_name
from transedit.core.tree.nodes import NodeKind, Tree, TreeMap, empty_container, node_kind
from transedit.core.tree.path import PathAddress, Segment

PathLike = Union[str, PathAddress]
UpdateFn = Callable[[str, Any], Tuple[str, Any]]
LeafAction = Callable[[Any, Segment], Any]

_MISSING = object()


def _as_address(path: PathLike) -> PathAddress:
    if isinstance(path, PathAddress):
        return path
    return PathAddress.parse(path)


def _find_key(mapping: TreeMap, text: str) -> Optional[Any]:
    """Return the key of ``mapping`` addressed by ``text``.

    An exact match wins; otherwise the first key whose base name (without
    modifiers) equals ``text``.
    """
    if text in mapping:
        return text
    for key in mapping:
        if str(key) == text or base_name(str(key)) == text:
            return key
    return None


def _descend(node: Any, segment: Segment) -> Any:
    kind = node_kind(node)
    if kind is NodeKind.MAPPING:
        key = _find_key(node, segment.text)
        return _MISSING if key is None else node[key]
    if kind is NodeKind.SEQUENCE:
        if segment.is_index and segment.index < len(node):
            return node[segment.index]
        return _MISSING
    return _MISSING


def _descend_or_create(node: Any, segment: Segment, following: Segment, path: PathAddress) -> Any:
    wanted = NodeKind.SEQUENCE if following.is_index else NodeKind.MAPPING
    kind = node_kind(node)

    if kind is NodeKind.MAPPING:
        key = _find_key(node, segment.text)
        if key is None:
            key = segment.text
            node[key] = empty_container(wanted)
        child = node[key]
    elif kind is NodeKind.SEQUENCE:
        if not segment.is_index:
            raise TreeTypeError(
                f'Cannot add "{path}": "{segment}" is not a list index.',
                context={"path": str(path), "segment": segment.text},
            )
        if segment.index < len(node):
            child = node[segment.index]
        else:
            child = empty_container(wanted)
            node.append(child)
    else:
        raise TreeTypeError(
            f'Cannot add "{path}": "{segment}" is not a container.',
            context={"path": str(path), "segment": segment.text},
        )

    child_kind = node_kind(child)
    # A mapping may be addressed with numeric keys; a list only with indices.
    if child_kind is NodeKind.SCALAR or (
        child_kind is NodeKind.SEQUENCE and wanted is NodeKind.MAPPING
    ):
        raise TreeTypeError(
            f'Cannot add "{path}": "{segment}" holds a {child_kind.value}, '
            f"expected a {wanted.value}.",
            context={"path": str(path), "segment": segment.text},
        )
    return child


def _walk(tree: Tree, path: PathAddress, leaf: LeafAction, *, create: bool = False) -> Any:
    """Resolve the parent of ``path`` and apply ``leaf`` to it.

    Returns ``_MISSING`` when an intermediate segment does not resolve
    (only possible when ``create`` is False).
    """
    node: Any = tree
    segments = path.segments
    for i, segment in enumerate(segments[:-1]):
        if create:
            node = _descend_or_create(node, segment, segments[i + 1], path)
        else:
            node = _descend(node, segment)
            if node is _MISSING:
                return _MISSING
    return leaf(node, path.last)


def get_value_at_path(tree: Tree, path: PathLike) -> Optional[Tree]:
    """Return the node at ``path`` or ``None`` if it does not resolve."""
    address = _as_address(path)
    value = _walk(tree, address, _descend)
    return None if value is _MISSING else value


def add_item_to_map(tree: Tree, path: PathLike, item: Tree) -> None:
    """Insert ``item`` at ``path``, creating intermediate containers.

    An index segment at or beyond the end of a list appends; gaps are not
    validated here (see the CSV decoder).

    Raises:
        TreeTypeError: If an existing node cannot hold the path.
    """
    address = _as_address(path)
    if node_kind(tree) is not NodeKind.MAPPING:
        raise TreeTypeError(
            f'Cannot add "{address}": root is not a mapping.',
            context={"path": str(address)},
        )

    def _insert(node: Any, segment: Segment) -> None:
        kind = node_kind(node)
        if kind is NodeKind.MAPPING:
            key = _find_key(node, segment.text)
            node[segment.text if key is None else key] = item
        elif kind is NodeKind.SEQUENCE and segment.is_index:
            if segment.index < len(node):
                node[segment.index] = item
            else:
                node.append(item)
        else:
            raise TreeTypeError(
                f'Cannot add "{address}": parent of "{segment}" is a {kind.value}.',
                context={"path": str(address), "segment": segment.text},
            )

    _walk(tree, address, _insert, create=True)


def delete_entry(tree: Tree, path: PathLike) -> bool:
    """Remove the entry at ``path``; return False if it does not exist."""
    address = _as_address(path)

    def _delete(node: Any, segment: Segment) -> bool:
        kind = node_kind(node)
        if kind is NodeKind.MAPPING:
            key = _find_key(node, segment.text)
            if key is None:
                return False
            del node[key]
            return True
        if kind is NodeKind.SEQUENCE and segment.is_index and segment.index < len(node):
            del node[segment.index]
            return True
        return False

    return _walk(tree, address, _delete) is True


def update_entry(tree: Tree, path: PathLike, update: UpdateFn) -> bool:
    """Replace the key/value pair at ``path`` with ``update(key, value)``.

    Mapping order is preserved: the new pair takes the old pair's position.
    For list elements the key is the index and cannot change. Returns False
    if ``path`` does not exist or ``update`` renames a list element.
    """
    address = _as_address(path)

    def _replace(node: Any, segment: Segment) -> bool:
        kind = node_kind(node)
        if kind is NodeKind.MAPPING:
            key = _find_key(node, segment.text)
            if key is None:
                return False
            new_key, new_value = update(str(key), node[key])
            items = [
                (new_key, new_value) if k == key else (k, v)
                for k, v in node.items()
                if k == key or k != new_key
            ]
            node.clear()
            node.update(items)
            return True
        if kind is NodeKind.SEQUENCE and segment.is_index and segment.index < len(node):
            new_key, new_value = update(segment.text, node[segment.index])
            if new_key != segment.text:
                return False
            node[segment.index] = new_value
            return True
        return False

    return _walk(tree, address, _replace) is True


__all__ = [
    "PathLike",
    "UpdateFn",
    "get_value_at_path",
    "add_item_to_map",
    "delete_entry",
    "update_entry",
]
