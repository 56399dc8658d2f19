"""Grid representation and placement helpers."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Orientation, descriptor
from ..core.exceptions import GridFrozenError, PlacementConflictError


EMPTY_MARKERS = ("", " ", None)


class PuzzleGrid:
    """A ``height x width`` grid of single letters; ``None`` marks an empty cell.

    Coordinates follow the puzzle convention: ``x`` is the column and ``y`` the
    row, so ``letter_at(x, y)`` reads ``cells[y][x]``.
    """

    def __init__(self, height: int, width: int) -> None:
        if height < 1 or width < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.height = height
        self.width = width
        self.cells: List[List[Optional[str]]] = [[None] * width for _ in range(height)]
        self._frozen = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> PuzzleGrid:
        """Load an existing grid; ``""``, ``" "`` and ``None`` are read as empty."""

        if not rows or not rows[0]:
            raise ValueError("Cannot load an empty grid")
        width = len(rows[0])
        grid = cls(len(rows), width)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
            grid.cells[y] = [None if cell in EMPTY_MARKERS else cell for cell in row]
        return grid

    # ------------------------------------------------------------------
    # Read path
    # ------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def letter_at(self, x: int, y: int) -> Optional[str]:
        return self.cells[y][x]

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell is None:
                    yield x, y

    def count_empty(self) -> int:
        return sum(1 for _ in self.empty_cells())

    def calc_overlap(
        self,
        word: str,
        x: int,
        y: int,
        orientation: Orientation,
        fold_case: bool = False,
    ) -> int:
        """Count letters of ``word`` already present along ``orientation``.

        Returns -1 when any cell holds a different letter. A placement lying
        entirely on top of existing letters is still accepted.
        """

        step = descriptor(orientation).step
        overlap = 0
        for i, letter in enumerate(word):
            nx, ny = step(x, y, i)
            square = self.cells[ny][nx]
            if square is None:
                continue
            if square == letter or (fold_case and square.casefold() == letter.casefold()):
                overlap += 1
            else:
                return -1
        return overlap

    # ------------------------------------------------------------------
    # Commit path
    # ------------------------------------------------------------------
    def place_word(self, word: str, x: int, y: int, orientation: Orientation) -> None:
        if self._frozen:
            raise GridFrozenError("Grid is frozen and can no longer be modified")
        rule = descriptor(orientation)
        if not self.contains(x, y) or not rule.fits(x, y, self.height, self.width, len(word)):
            raise PlacementConflictError(
                f"'{word}' does not fit at ({x},{y}) going {rule.orientation.value}"
            )
        if self.calc_overlap(word, x, y, rule.orientation) < 0:
            raise PlacementConflictError(f"Letter conflict placing '{word}' at ({x},{y})")

        for i, letter in enumerate(word):
            nx, ny = rule.step(x, y, i)
            self.cells[ny][nx] = letter

    def set_letter(self, x: int, y: int, letter: str) -> None:
        """Write a single filler letter into an empty cell."""

        if self._frozen:
            raise GridFrozenError("Grid is frozen and can no longer be modified")
        if self.cells[y][x] is not None:
            raise PlacementConflictError(f"Cell ({x},{y}) already holds '{self.cells[y][x]}'")
        self.cells[y][x] = letter

    def freeze(self) -> None:
        self._frozen = True

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def rows(self) -> List[List[str]]:
        return [[cell or "" for cell in row] for row in self.cells]

    def __repr__(self) -> str:
        return f"PuzzleGrid(height={self.height}, width={self.width})"
