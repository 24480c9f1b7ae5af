"""Exceptions raised at the public API boundary."""

from __future__ import annotations


class PBSTError(ValueError):
    """Base class for contract violations reported by pbst."""


class InvalidTraversalModeError(PBSTError):
    def __init__(self, mode: object, supported: tuple[str, ...]) -> None:
        super().__init__(
            f"Unsupported traversal mode {mode!r}. Expected one of {supported}."
        )
        self.mode = mode
        self.supported = supported


class EmptyTreeError(PBSTError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires a non-empty tree.")
        self.operation = operation


__all__ = ["PBSTError", "InvalidTraversalModeError", "EmptyTreeError"]
