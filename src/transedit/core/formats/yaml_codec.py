"""YAML translation files (PyYAML safe loader/dumper)."""
from __future__ import annotations

import yaml

from transedit.core.exceptions import DecodeError
from transedit.core.tree.nodes import TreeMap
from transedit.core.utils.io import dump_yaml_string, parse_yaml_string


class YamlDecoder:
    def decode(self, raw: str) -> TreeMap:
        try:
            data = parse_yaml_string(raw, default={})
        except yaml.YAMLError as exc:
            raise DecodeError(f"Invalid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"YAML root must be a mapping, got {type(data).__name__}")
        return data


class YamlEncoder:
    def encode(self, tree: TreeMap) -> str:
        # Translation files keep their authored key order.
        return dump_yaml_string(tree, sort_keys=False)


__all__ = ["YamlDecoder", "YamlEncoder"]
