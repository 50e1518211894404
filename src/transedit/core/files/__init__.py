"""Translation files: locales, file records and project file collections."""
from __future__ import annotations

from transedit.core.locale import Locale
from .record import FileRecord, write_file_of_type
from .collection import FileCollection

__all__ = ["Locale", "FileRecord", "FileCollection", "write_file_of_type"]
