"""JSON translation files."""
from __future__ import annotations

import json

from transedit.core.exceptions import DecodeError
from transedit.core.tree.nodes import TreeMap


class JsonDecoder:
    def decode(self, raw: str) -> TreeMap:
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"JSON root must be an object, got {type(data).__name__}")
        return data


class JsonEncoder:
    def __init__(self, indent: int = 2, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def encode(self, tree: TreeMap) -> str:
        return json.dumps(tree, indent=self.indent, ensure_ascii=self.ensure_ascii) + "\n"


__all__ = ["JsonDecoder", "JsonEncoder"]
