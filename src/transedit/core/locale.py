"""Locale identifiers."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from transedit.core.exceptions import UsageError

_LOCALE_RE = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[-_](?P<script>[A-Za-z]{4}))?"
    r"(?:[-_](?P<country>[A-Za-z]{2}|\d{3}))?$"
)


@dataclass(frozen=True)
class Locale:
    """Immutable language tag such as ``en``, ``de-CH`` or ``zh-Hant-TW``.

    ``de_CH`` is accepted and normalized to ``de-CH``. Equality is an exact
    match of the tag parts.
    """

    language: str
    script: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_string(cls, tag: str) -> "Locale":
        match = _LOCALE_RE.match(str(tag or "").strip())
        if match is None:
            raise UsageError(
                f"Invalid locale: {tag!r}. Expected a language tag like en or de-CH.",
                context={"locale": str(tag)},
            )
        return cls(
            language=match.group("language"),
            script=match.group("script"),
            country=match.group("country"),
        )

    @property
    def language_tag(self) -> str:
        return "-".join(p for p in (self.language, self.script, self.country) if p)

    def __str__(self) -> str:
        return self.language_tag


__all__ = ["Locale"]
