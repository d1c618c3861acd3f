from __future__ import annotations

from typing import Any, List, Optional


class PrimordiaError(Exception):
    """Base error for primordia domain exceptions."""


class UnsupportedVariant(PrimordiaError):
    """Raised when an item variant has no identifier or draw rule."""

    def __init__(self, item_type: Any, operation: str) -> None:
        super().__init__(f"{operation} is not supported for {item_type!r}")
        self.item_type = item_type
        self.operation = operation


class InvalidOperation(PrimordiaError):
    """Raised when an operation cannot be performed in current state."""


class DataValidationError(PrimordiaError):
    """Raised when a bundled or user supplied data file fails validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in getattr(e, "path", [])) or "<root>"
            parts.append(f" - at {path}: {getattr(e, 'message', e)}")
        return "\n".join(parts)


__all__ = [
    "PrimordiaError",
    "UnsupportedVariant",
    "InvalidOperation",
    "DataValidationError",
]
