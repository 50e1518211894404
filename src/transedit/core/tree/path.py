"""Dotted key-path addresses.

A path such as ``onboarding.pages.0.title`` is parsed once into a
:class:`PathAddress`. All-digit segments address list positions; every other
segment is a mapping key.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from transedit.core.exceptions import PathSyntaxError

SEPARATOR = "."


@dataclass(frozen=True)
class Segment:
    """One path segment, either a mapping key or a list index."""

    text: str
    index: Optional[int] = None

    @classmethod
    def parse(cls, text: str) -> "Segment":
        if text.isascii() and text.isdigit():
            return cls(text=text, index=int(text))
        return cls(text=text)

    @property
    def is_index(self) -> bool:
        return self.index is not None

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class PathAddress:
    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, text: str) -> "PathAddress":
        """Parse ``text`` into an address.

        Raises:
            PathSyntaxError: If the path is empty or has an empty segment.
        """
        raw = str(text or "").strip()
        if not raw:
            raise PathSyntaxError("Missing path.")
        parts = raw.split(SEPARATOR)
        if any(not p for p in parts):
            raise PathSyntaxError(
                f'Invalid path "{raw}": empty segment.',
                context={"path": raw},
            )
        return cls(tuple(Segment.parse(p) for p in parts))

    @classmethod
    def from_segments(cls, parts: Iterable[str]) -> "PathAddress":
        return cls(tuple(Segment.parse(str(p)) for p in parts))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __str__(self) -> str:
        return SEPARATOR.join(s.text for s in self.segments)

    @property
    def last(self) -> Segment:
        return self.segments[-1]

    @property
    def parent(self) -> "PathAddress":
        return PathAddress(self.segments[:-1])

    @property
    def namespace(self) -> str:
        """First segment, read as a namespace name."""
        return self.segments[0].text

    def strip_namespace(self) -> "PathAddress":
        """Return the address relative to the namespace's own file.

        Raises:
            PathSyntaxError: If nothing remains after the namespace segment.
        """
        if len(self.segments) <= 1:
            raise PathSyntaxError(
                "Missing namespace + path. Expected: myNamespace.my.path.to.key",
                context={"path": str(self)},
            )
        return PathAddress(self.segments[1:])

    def with_last(self, text: str) -> "PathAddress":
        return PathAddress(self.segments[:-1] + (Segment.parse(text),))


__all__ = ["SEPARATOR", "Segment", "PathAddress"]
