"""Domain errors raised by maze construction, loading and generation."""

from __future__ import annotations

from typing import Any, Optional


class MazeError(Exception):
    """Base error for labyrinth domain exceptions."""


class ValidationError(MazeError, ValueError):
    """Raised when a grid or its endpoints fail validation at construction."""


class InvalidBoundaryError(ValidationError):
    """Raised when the entrance or exit is out of bounds or on a wall."""

    def __init__(self, which: str, coordinate: Any, reason: str) -> None:
        super().__init__(f"Invalid {which} {coordinate}: {reason}")
        self.which = which
        self.coordinate = coordinate
        self.reason = reason


class MazeFormatError(ValidationError):
    """Raised when a textual maze layout cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        if line is not None and column is not None:
            message = f"{message} at line {line}, column {column}"
        elif line is not None:
            message = f"{message} at line {line}"
        super().__init__(message)
        self.line = line
        self.column = column


class GenerationError(MazeError, RuntimeError):
    """Raised when the generator cannot place a usable entrance or exit."""


__all__ = [
    "MazeError",
    "ValidationError",
    "InvalidBoundaryError",
    "MazeFormatError",
    "GenerationError",
]
