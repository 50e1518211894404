"""Throwaway translation projects for tests."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from transedit.core.config import load_config
from transedit.core.files import FileCollection

from .io_utils import read_json, read_yaml, write_json, write_yaml


class TranslationProject:
    """A project root with a transedit.yaml and an ``i18n/`` directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.input_dir = self.root / "i18n"
        self.input_dir.mkdir(parents=True, exist_ok=True)

    def configure(self, **settings: Any) -> Dict[str, Any]:
        data = {"input_directory": "i18n", **settings}
        write_yaml(self.root / "transedit.yaml", data)
        return data

    def path(self, name: str) -> Path:
        return self.input_dir / name

    def write(self, name: str, data: Any) -> Path:
        target = self.path(name)
        if target.suffix in (".yaml", ".yml"):
            write_yaml(target, data)
        else:
            write_json(target, data)
        return target

    def read(self, name: str) -> Any:
        target = self.path(name)
        if target.suffix in (".yaml", ".yml"):
            return read_yaml(target)
        return read_json(target)

    def raw(self, name: str) -> str:
        return self.path(name).read_text(encoding="utf-8")

    def collection(self, config_path: Optional[Path] = None) -> FileCollection:
        config = load_config(self.root, config_path, environ={})
        return FileCollection.discover(config, self.root)
