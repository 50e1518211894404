"""Codec capability table.

Maps each :class:`FileType` to its decoder and, for editable types, its
encoder. The table is built explicitly and passed to file records and the
edit engine.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Protocol, Tuple

from transedit.core.exceptions import UsageError
from transedit.core.tree.nodes import TreeMap

from .csv_codec import CsvDecoder
from .json_codec import JsonDecoder, JsonEncoder
from .types import FileType
from .yaml_codec import YamlDecoder, YamlEncoder


class Decoder(Protocol):
    def decode(self, raw: str) -> TreeMap: ...


class Encoder(Protocol):
    def encode(self, tree: TreeMap) -> str: ...


@dataclass(frozen=True)
class Codec:
    decoder: Decoder
    encoder: Optional[Encoder] = None


class CodecRegistry:
    """Lookup of codecs by file type."""

    def __init__(self, codecs: Mapping[FileType, Codec]) -> None:
        self._codecs: Dict[FileType, Codec] = dict(codecs)

    def decoder_for(self, file_type: FileType) -> Decoder:
        codec = self._codecs.get(file_type)
        if codec is None:
            raise UsageError(
                f"No decoder registered for {file_type.value}.",
                context={"file_type": file_type.value},
            )
        return codec.decoder

    def encoder_for(self, file_type: FileType) -> Encoder:
        codec = self._codecs.get(file_type)
        if codec is None or codec.encoder is None:
            raise UsageError(
                f"{file_type.value} is not supported. Supported: {self.supported_names()}",
                context={"file_type": file_type.value},
            )
        return codec.encoder

    def editable_types(self) -> Tuple[FileType, ...]:
        return tuple(t for t, c in self._codecs.items() if c.encoder is not None)

    def is_editable(self, file_type: FileType) -> bool:
        return file_type in self.editable_types()

    def supported_names(self) -> str:
        return ", ".join(t.value for t in self.editable_types())


def default_codecs() -> CodecRegistry:
    """Return the standard table: JSON and YAML read/write, CSV read-only."""
    return CodecRegistry(
        {
            FileType.JSON: Codec(JsonDecoder(), JsonEncoder()),
            FileType.YAML: Codec(YamlDecoder(), YamlEncoder()),
            FileType.CSV: Codec(CsvDecoder()),
        }
    )


__all__ = ["Decoder", "Encoder", "Codec", "CodecRegistry", "default_codecs"]
