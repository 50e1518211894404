"""Cross-file edit operations.

Each operation is one sequential pass over a :class:`FileCollection`. Every
touched file is read, mutated and written exactly once; trees never outlive
the file touch. Paths are parsed (and namespace-checked) before any file is
read, so usage errors never leave a half-edited project behind.

Operations return an :class:`EditResult`; rendering progress is left to the
caller.
"""
from __future__ import annotations

import copy
import logging
from typing import Dict, Optional, Sequence, Tuple, Union

from transedit.core.exceptions import UsageError
from transedit.core.files.collection import FileCollection
from transedit.core.files.record import FileRecord
from transedit.core.formats.registry import CodecRegistry, default_codecs
from transedit.core.locale import Locale
from transedit.core.tree.accessor import (
    add_item_to_map,
    delete_entry,
    get_value_at_path,
    update_entry,
)
from transedit.core.tree.modifiers import NodeModifiers, with_modifier
from transedit.core.tree.nodes import Tree, TreeMap
from transedit.core.tree.path import PathAddress

from .models import ActionKind, EditOperation, EditResult, FileAction

logger = logging.getLogger(__name__)


def is_rename(origin: PathAddress, destination: PathAddress, namespaces: bool) -> bool:
    """Whether moving ``origin`` to ``destination`` only changes the leaf key.

    True iff both have the same length, share the namespace segment (when
    namespaces are enabled) and all segments but the last are equal.
    """
    if len(origin) != len(destination):
        return False
    if namespaces and origin.namespace != destination.namespace:
        return False
    return origin.parent == destination.parent


class EditEngine:
    """Applies edit operations to every matching file of a collection."""

    def __init__(self, collection: FileCollection, codecs: Optional[CodecRegistry] = None) -> None:
        self.collection = collection
        self.config = collection.config
        self.codecs = codecs or default_codecs()
        if not self.codecs.is_editable(self.config.file_type):
            raise UsageError(
                f"{self.config.file_type.value} is not supported. "
                f"Supported: {self.codecs.supported_names()}",
                context={"file_type": self.config.file_type.value},
            )

    # ---------------------------------------------------------------- helpers

    def _localize(self, address: PathAddress) -> Tuple[Optional[str], PathAddress]:
        """Split a logical path into (namespace, path inside the file)."""
        if self.config.namespaces:
            return address.namespace, address.strip_namespace()
        return None, address

    def _parse(self, path: str) -> Tuple[PathAddress, Optional[str], PathAddress]:
        address = PathAddress.parse(path)
        namespace, local = self._localize(address)
        return address, namespace, local

    def _read(self, record: FileRecord) -> TreeMap:
        return record.read_and_parse(self.codecs)

    def _write(self, record: FileRecord, tree: TreeMap) -> None:
        record.write(self.codecs, tree)

    def _action(
        self,
        result: EditResult,
        record: FileRecord,
        kind: ActionKind,
        key: str,
        detail: str = "",
    ) -> None:
        action = FileAction(
            path=record.path,
            kind=kind,
            key=key,
            locale=record.locale.language_tag,
            detail=detail,
        )
        result.record(action)
        if action.modified:
            logger.info(action.describe())
        else:
            logger.debug(action.describe())

    # ------------------------------------------------------------- operations

    def move(self, origin: str, destination: str) -> EditResult:
        """Move ``origin`` to ``destination`` in every file that has it.

        A rename (only the leaf key changes) updates the key in place. Any
        other move deletes the entry and inserts it into each file of the
        same locale in the destination namespace. Entries without a
        destination file are left untouched.
        """
        origin_addr, origin_ns, origin_local = self._parse(origin)
        dest_addr, dest_ns, dest_local = self._parse(destination)
        rename = is_rename(origin_addr, dest_addr, self.config.namespaces)
        result = EditResult(
            EditOperation.MOVE, str(origin_addr), destination=str(dest_addr), rename=rename
        )
        logger.info("Operation: %s -> %s (rename: %s)", origin_addr, dest_addr, rename)

        for orig_file in list(self.collection.select(namespace=origin_ns)):
            orig_tree = self._read(orig_file)
            value = get_value_at_path(orig_tree, origin_local)
            if value is None:
                self._action(result, orig_file, ActionKind.NOT_FOUND, str(origin_addr))
                continue

            if rename:
                new_key = dest_local.last.text
                if not update_entry(orig_tree, origin_local, lambda key, current: (new_key, current)):
                    # List elements keep their index.
                    self._action(result, orig_file, ActionKind.NOT_FOUND, str(origin_addr))
                    continue
                self._write(orig_file, orig_tree)
                self._action(
                    result, orig_file, ActionKind.RENAME, str(origin_addr), str(dest_addr)
                )
                continue

            targets = list(self.collection.select(namespace=dest_ns, locale=orig_file.locale))
            if not targets:
                self._action(result, orig_file, ActionKind.NO_DESTINATION, str(origin_addr))
                continue

            delete_entry(orig_tree, origin_local)
            self._action(result, orig_file, ActionKind.DELETE, str(origin_addr))
            if orig_file in targets:
                add_item_to_map(orig_tree, dest_local, copy.deepcopy(value))
                self._action(result, orig_file, ActionKind.ADD, str(dest_addr))
            self._write(orig_file, orig_tree)

            for dest_file in targets:
                if dest_file == orig_file:
                    continue
                self._insert_into(result, dest_file, dest_addr, dest_local, value)

        if not result.found:
            logger.info("No origin values found.")
        return result

    def copy(self, origin: str, destination: str) -> EditResult:
        """Copy ``origin`` into every same-locale file of the destination namespace.

        Origin files are never modified (unless they are also a destination);
        each destination receives its own deep copy of the value.
        """
        origin_addr, origin_ns, origin_local = self._parse(origin)
        dest_addr, dest_ns, dest_local = self._parse(destination)
        result = EditResult(EditOperation.COPY, str(origin_addr), destination=str(dest_addr))
        logger.info("Operation: %s -> %s", origin_addr, dest_addr)

        for orig_file in list(self.collection.select(namespace=origin_ns)):
            value = get_value_at_path(self._read(orig_file), origin_local)
            if value is None:
                self._action(result, orig_file, ActionKind.NOT_FOUND, str(origin_addr))
                continue

            targets = list(self.collection.select(namespace=dest_ns, locale=orig_file.locale))
            if not targets:
                self._action(result, orig_file, ActionKind.NO_DESTINATION, str(origin_addr))
            for dest_file in targets:
                self._insert_into(result, dest_file, dest_addr, dest_local, value)

        if not result.found:
            logger.info("No origin values found.")
        return result

    def delete(self, path: str) -> EditResult:
        """Delete ``path`` from every file of its namespace.

        Files without the entry are reported as not found and left untouched.
        """
        address, namespace, local = self._parse(path)
        result = EditResult(EditOperation.DELETE, str(address))

        for record in list(self.collection.select(namespace=namespace)):
            tree = self._read(record)
            if not delete_entry(tree, local):
                self._action(result, record, ActionKind.NOT_FOUND, str(address))
                continue
            self._write(record, tree)
            self._action(result, record, ActionKind.DELETE, str(address))
        return result

    def outdated(self, path: str) -> EditResult:
        """Flag ``path`` as outdated in every non-base-locale file of its namespace."""
        address, namespace, local = self._parse(path)
        result = EditResult(EditOperation.OUTDATED, str(address))
        base_locale = self.config.base_locale

        for record in list(self.collection.select(namespace=namespace)):
            if record.locale == base_locale:
                continue
            tree = self._read(record)
            updated = update_entry(
                tree,
                local,
                lambda key, value: (with_modifier(key, NodeModifiers.OUTDATED), value),
            )
            if not updated:
                self._action(result, record, ActionKind.NOT_FOUND, str(address))
                continue
            self._write(record, tree)
            self._action(result, record, ActionKind.FLAG, str(address))
        return result

    def add(self, locale: Union[str, Locale], path: str, value: Tree) -> EditResult:
        """Insert ``value`` at ``path`` in every file of ``locale`` in the path's namespace."""
        target_locale = locale if isinstance(locale, Locale) else Locale.from_string(locale)
        address, namespace, local = self._parse(path)
        result = EditResult(EditOperation.ADD, str(address))

        records = list(self.collection.select(namespace=namespace, locale=target_locale))
        if not records:
            logger.info("No files found for <%s>.", target_locale.language_tag)
        for record in records:
            self._insert_into(result, record, address, local, value)
        return result

    def _insert_into(
        self,
        result: EditResult,
        record: FileRecord,
        address: PathAddress,
        local: PathAddress,
        value: Tree,
    ) -> None:
        tree = self._read(record)
        add_item_to_map(tree, local, copy.deepcopy(value))
        self._write(record, tree)
        self._action(result, record, ActionKind.ADD, str(address))


def _argument(position: int, arguments: Sequence[str]) -> Optional[str]:
    if position < len(arguments):
        return arguments[position]
    return None


def run_edit(
    collection: FileCollection,
    arguments: Sequence[str],
    codecs: Optional[CodecRegistry] = None,
) -> EditResult:
    """Run ``<operation> <path> [destination|value...]`` against ``collection``.

    ``add`` takes ``<locale> <path> <value>``.

    Raises:
        UsageError: Before any file is touched, for unsupported file types,
            unknown operations and missing or malformed arguments.
    """
    engine = EditEngine(collection, codecs)
    operation = EditOperation.from_name(_argument(0, arguments))

    if operation is EditOperation.ADD:
        if len(arguments) < 4:
            raise UsageError(
                "Missing arguments. Expected: add <locale> <namespace.path.to.key> <value>"
            )
        return engine.add(arguments[1], arguments[2], arguments[3])

    path = _argument(1, arguments)
    if not path:
        raise UsageError("Missing path.")

    if operation in (EditOperation.MOVE, EditOperation.COPY):
        destination = _argument(2, arguments)
        if not destination:
            raise UsageError("Missing destination path.")
        if operation is EditOperation.MOVE:
            return engine.move(path, destination)
        return engine.copy(path, destination)

    if operation is EditOperation.DELETE:
        return engine.delete(path)
    return engine.outdated(path)


OPERATIONS: Dict[EditOperation, str] = {
    EditOperation.ADD: "Adding translation...",
    EditOperation.MOVE: "Moving translations...",
    EditOperation.COPY: "Copying translations...",
    EditOperation.DELETE: "Deleting translations...",
    EditOperation.OUTDATED: "Adding outdated flags...",
}

__all__ = ["is_rename", "EditEngine", "run_edit", "OPERATIONS"]
