from __future__ import annotations

from typing import Any, Dict, Mapping


class TranseditError(Exception):
    """Base exception for transedit."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class UsageError(TranseditError, ValueError):
    """Raised before any file I/O when a command is invoked incorrectly."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TranseditError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class PathSyntaxError(UsageError):
    """Raised when a dotted key-path cannot be parsed."""


class ConfigError(UsageError):
    """Raised when the project configuration is missing or invalid."""


class DecodeError(TranseditError, ValueError):
    """Raised when a translation file cannot be decoded into a tree."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path:
            ctx["path"] = path
        TranseditError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class TreeTypeError(TranseditError, TypeError):
    """Raised when an insert conflicts with the type of an existing node."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        TranseditError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


__all__ = [
    "TranseditError",
    "UsageError",
    "PathSyntaxError",
    "ConfigError",
    "DecodeError",
    "TreeTypeError",
]
