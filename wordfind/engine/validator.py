"""Deterministic integrity checks for finished puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import ALL_ORIENTATIONS, Orientation
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .grid import PuzzleGrid
from .solver import solve


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over the final grid."""

    def __init__(self, orientations: Sequence[Orientation] = ALL_ORIENTATIONS) -> None:
        self.orientations = tuple(orientations)

    def validate(
        self, grid: PuzzleGrid, words: Sequence[str], require_full: bool = False
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_words_present(grid, words)
            if require_full:
                self._check_no_blanks(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_words_present(self, grid: PuzzleGrid, words: Sequence[str]) -> None:
        missing = solve(grid, words, self.orientations).not_found
        if missing:
            raise ValidationError(
                f"Words missing from grid: {', '.join(missing)}",
                width=grid.width,
                height=grid.height,
            )

    def _check_no_blanks(self, grid: PuzzleGrid) -> None:
        empty = grid.count_empty()
        if empty:
            raise ValidationError(
                f"{empty} cells left empty after filling blanks",
                width=grid.width,
                height=grid.height,
            )
