"""One physical translation file."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from transedit.core.exceptions import DecodeError
from transedit.core.formats.registry import CodecRegistry
from transedit.core.formats.types import FileType
from transedit.core.locale import Locale
from transedit.core.tree.nodes import TreeMap
from transedit.core.utils.io import read_text, write_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileRecord:
    """Identity of a translation file.

    The record never caches the file's tree: every :meth:`read_and_parse`
    reads the file again.
    """

    path: Path
    locale: Locale
    namespace: Optional[str]
    file_type: FileType

    def read_and_parse(self, codecs: CodecRegistry) -> TreeMap:
        """Read the file and decode it with the codec for its type.

        Raises:
            DecodeError: If the content is malformed (names the file).
        """
        decoder = codecs.decoder_for(self.file_type)
        try:
            tree = decoder.decode(read_text(self.path))
        except UnicodeDecodeError as exc:
            raise DecodeError(f"{self.path}: not valid UTF-8: {exc}", path=str(self.path)) from exc
        except DecodeError as exc:
            raise DecodeError(f"{self.path}: {exc}", path=str(self.path), context=exc.context) from exc
        logger.debug("Read %s (%s)", self.path, self.file_type.value)
        return tree

    def write(self, codecs: CodecRegistry, content: TreeMap) -> None:
        write_file_of_type(codecs, self.file_type, self.path, content)


def write_file_of_type(
    codecs: CodecRegistry,
    file_type: FileType,
    path: Path,
    content: TreeMap,
) -> None:
    """Serialize ``content`` and replace the file at ``path``.

    The whole file is encoded in memory before anything is written; the
    replacement itself is atomic.
    """
    text = codecs.encoder_for(file_type).encode(content)
    write_text(path, text)
    logger.debug("Wrote %s (%s)", path, file_type.value)


__all__ = ["FileRecord", "write_file_of_type"]
