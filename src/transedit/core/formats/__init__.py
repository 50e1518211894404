"""Translation file formats.

Decoders turn raw file text into a translation tree; encoders turn a tree
back into text. CSV is decode-only.
"""
from __future__ import annotations

from .csv_codec import CsvDecoder
from .json_codec import JsonDecoder, JsonEncoder
from .registry import Codec, CodecRegistry, default_codecs
from .types import FileType
from .yaml_codec import YamlDecoder, YamlEncoder

__all__ = [
    "FileType",
    "Codec",
    "CodecRegistry",
    "default_codecs",
    "CsvDecoder",
    "JsonDecoder",
    "JsonEncoder",
    "YamlDecoder",
    "YamlEncoder",
]
