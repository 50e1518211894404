"""CSV translation files.

A CSV file is a flat table of ``(path, value)`` rows. With a header row whose
first cell is ``key`` each further column is a locale::

    key,en,de
    onboarding.pages.0.title,First Page,Erste Seite
    onboarding.pages.1.title,Second Page,Zweite Seite

and the decoded tree is ``{"en": {...}, "de": {...}}``. Without a header, or
with a ``key,value`` header, each row is ``path,value`` and the decoded tree
is the translation tree itself.

Rows are inserted in file order. A list index may only be used once every
smaller index of the same list exists; otherwise decoding fails, since
reordering would hide an authoring mistake.
"""
from __future__ import annotations

import csv
import io
from typing import Dict, List, Sequence

from transedit.core.exceptions import DecodeError, PathSyntaxError
from transedit.core.tree.accessor import add_item_to_map, get_value_at_path
from transedit.core.tree.nodes import NodeKind, TreeMap, node_kind
from transedit.core.tree.path import PathAddress

HEADER_KEY = "key"
VALUE_HEADER = "value"


def _check_indices(tree: TreeMap, address: PathAddress) -> None:
    """Reject ``address`` if one of its list indices would leave a gap."""
    for i, segment in enumerate(address.segments):
        # The root is a mapping, so a leading digit is a plain key.
        if i == 0 or not segment.is_index:
            continue
        container = get_value_at_path(tree, PathAddress(address.segments[:i]))
        if node_kind(container) is NodeKind.MAPPING:
            continue
        length = len(container) if node_kind(container) is NodeKind.SEQUENCE else 0
        if segment.index > length:
            raise DecodeError(
                f'The leaf "{address}" cannot be added because there are missing indices.',
                context={"leaf": str(address), "index": segment.index, "length": length},
            )


def _insert_row(tree: TreeMap, raw_path: str, value: str, line: int) -> None:
    try:
        address = PathAddress.parse(raw_path)
    except PathSyntaxError as exc:
        raise DecodeError(f"Line {line}: {exc}", context={"line": line}) from exc
    _check_indices(tree, address)
    add_item_to_map(tree, address, value)


class CsvDecoder:
    """Builds translation trees from flat CSV rows."""

    def decode(self, raw: str) -> TreeMap:
        rows = self._read_rows(raw)
        if not rows:
            return {}

        header = rows[0]
        if header[0].strip().lower() != HEADER_KEY:
            return self._decode_single(rows)

        locales = [cell.strip() for cell in header[1:]]
        if [tag.lower() for tag in locales] == [VALUE_HEADER]:
            return self._decode_single(rows[1:], first_line=2)
        if not locales or any(not tag for tag in locales):
            raise DecodeError("CSV header must name a locale for every value column.")

        result: Dict[str, TreeMap] = {tag: {} for tag in locales}
        for line, row in enumerate(rows[1:], start=2):
            path = row[0].strip()
            for col, tag in enumerate(locales, start=1):
                if col >= len(row) or row[col] == "":
                    continue
                _insert_row(result[tag], path, row[col], line)
        return dict(result)

    def _decode_single(self, rows: Sequence[List[str]], first_line: int = 1) -> TreeMap:
        tree: TreeMap = {}
        for line, row in enumerate(rows, start=first_line):
            if len(row) < 2:
                raise DecodeError(
                    f"Line {line}: expected <path>,<value>.",
                    context={"line": line},
                )
            _insert_row(tree, row[0].strip(), row[1], line)
        return tree

    @staticmethod
    def _read_rows(raw: str) -> List[List[str]]:
        try:
            reader = csv.reader(io.StringIO(raw, newline=""))
            return [row for row in reader if row and any(cell.strip() for cell in row)]
        except csv.Error as exc:
            raise DecodeError(f"Invalid CSV: {exc}") from exc


__all__ = ["HEADER_KEY", "VALUE_HEADER", "CsvDecoder"]
