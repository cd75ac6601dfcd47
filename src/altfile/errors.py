"""Custom exception types raised by altfile."""

from __future__ import annotations

from .kinds import TargetKind


class ConversionError(RuntimeError):
    """Raised when a path cannot be converted to an alternate file."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidPathError(ConversionError):
    """Raised when the final path segment has no file extension."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid path: {path}. Path must contain a valid filename.")


class UnsupportedConversionError(ConversionError):
    """Raised in strict mode when no rule applies to the path."""

    def __init__(self, path: str, kind: TargetKind) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"Cannot convert {path} to {kind.value} type")


class ConfigurationError(RuntimeError):
    """Raised when a configuration file cannot be read or validated."""
