"""Custom exception hierarchy for puzzle construction."""

from __future__ import annotations

from typing import Optional


class WordFindError(Exception):
    """Base exception for puzzle failures."""


class InvalidInputError(WordFindError):
    """Raised when the word list is empty or contains empty words."""


class PlacementConflictError(WordFindError):
    """Raised when a commit would leave the grid or overwrite a different letter."""


class GridFrozenError(WordFindError):
    """Raised when writing to a grid that has already been returned to a caller."""


class ConstructionError(WordFindError):
    """Raised when no valid grid could be built within the attempt and growth caps."""

    def __init__(self, message: str, width: Optional[int] = None, height: Optional[int] = None) -> None:
        super().__init__(message)
        self.width = width
        self.height = height


class LaxExhaustedError(ConstructionError):
    """Raised when no combination of dropped words rescued a lax build."""


class FillError(ConstructionError):
    """Raised when secret letters do not match the blanks left in the grid."""


class ValidationError(ConstructionError):
    """Raised when the finished grid fails the integrity checks."""
