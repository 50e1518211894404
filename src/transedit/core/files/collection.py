"""The set of translation files of one project."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from transedit.core.config.model import EditConfig
from transedit.core.exceptions import ConfigError, UsageError
from transedit.core.locale import Locale

from .record import FileRecord

logger = logging.getLogger(__name__)

# <base>_<locale> where base is optional (e.g. "strings_de-CH", "widgets_en", "fr")
_STEM_RE = re.compile(
    r"^(?:(?P<base>[\w-]*?)_)?"
    r"(?P<locale>[a-z]{2,3}(?:[-_][A-Za-z]{4})?(?:[-_](?:[A-Za-z]{2}|\d{3}))?)$"
)


def _parse_locale(text: str) -> Optional[Locale]:
    try:
        return Locale.from_string(text)
    except UsageError:
        return None


class FileCollection:
    """Ordered translation files sharing one :class:`EditConfig`.

    With namespaces enabled every record must name its namespace.
    """

    def __init__(self, config: EditConfig, files: Iterable[FileRecord]) -> None:
        self.config = config
        self.files: Tuple[FileRecord, ...] = tuple(files)
        if config.namespaces:
            missing = [str(f.path) for f in self.files if not f.namespace]
            if missing:
                raise ConfigError(
                    "Namespaces are enabled but some files have no namespace.",
                    context={"files": missing},
                )

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def matches_namespace(self, record: FileRecord, namespace: Optional[str]) -> bool:
        if not self.config.namespaces:
            return True
        return record.namespace == namespace

    def select(
        self,
        *,
        namespace: Optional[str] = None,
        locale: Optional[Locale] = None,
    ) -> Iterator[FileRecord]:
        """Yield files matching ``namespace`` (if namespaces are on) and ``locale``."""
        for record in self.files:
            if not self.matches_namespace(record, namespace):
                continue
            if locale is not None and record.locale != locale:
                continue
            yield record

    @classmethod
    def discover(cls, config: EditConfig, root: Path) -> "FileCollection":
        """Scan ``root / config.input_directory`` for translation files.

        File names follow ``<base>_<locale><pattern>``; a file without a
        locale suffix belongs to the base locale, and a file inside a
        directory named after a locale belongs to that locale. With
        namespaces enabled ``<base>`` is the namespace.
        """
        directory = (Path(root) / config.input_directory).resolve()
        if not directory.is_dir():
            raise ConfigError(
                f"Input directory not found: {directory}",
                context={"input_directory": str(directory)},
            )

        pattern = config.input_file_pattern
        records = []
        for path in sorted(directory.rglob(f"*{pattern}")):
            if not path.is_file():
                continue
            record = cls._record_for(config, directory, path, path.name[: -len(pattern)])
            if record is None:
                logger.warning("Skipping %s: cannot determine its namespace", path)
                continue
            records.append(record)

        logger.debug("Discovered %d translation files in %s", len(records), directory)
        return cls(config, records)

    @staticmethod
    def _record_for(
        config: EditConfig, directory: Path, path: Path, stem: str
    ) -> Optional[FileRecord]:
        base: Optional[str] = stem
        locale: Optional[Locale] = None
        dir_locale = _parse_locale(path.parent.name) if path.parent != directory else None

        match = _STEM_RE.match(stem)
        # With namespaces a stem without "_<locale>" is a namespace ("ui", "de/ui").
        if match is not None and (match.group("base") or not config.namespaces):
            base = match.group("base")
            locale = _parse_locale(match.group("locale"))
        if locale is None:
            base = stem
            locale = dir_locale or config.base_locale

        namespace = base or None
        if config.namespaces and namespace is None:
            return None
        return FileRecord(
            path=path,
            locale=locale,
            namespace=namespace if config.namespaces else None,
            file_type=config.file_type,
        )


__all__ = ["FileCollection"]
