"""Locate words inside an already built grid."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.constants import ALL_ORIENTATIONS, Orientation
from ..core.models import PlacementRecord, SolveResult
from .grid import PuzzleGrid
from .placement import SearchOptions, find_best_locations


GridLike = Union[PuzzleGrid, Sequence[Sequence[Optional[str]]]]


def solve(
    grid: GridLike,
    words: Sequence[str],
    orientations: Sequence[Orientation] = ALL_ORIENTATIONS,
) -> SolveResult:
    """Report the placement of each word that appears letter-for-letter in ``grid``.

    The search reuses the placement scan with overlap maximization: a word is
    found only when its best location overlaps on every letter. Matching is
    case-insensitive and the grid is never modified.
    """

    if not isinstance(grid, PuzzleGrid):
        grid = PuzzleGrid.from_rows(grid)

    options = SearchOptions(
        orientations=tuple(Orientation(o) for o in orientations),
        prefer_overlap=True,
        fold_case=True,
    )
    result = SolveResult()
    for word in words:
        if not word:
            result.not_found.append(word)
            continue
        locations = find_best_locations(grid, options, word)
        if locations and locations[0].overlap == len(word):
            best = locations[0]
            result.found.append(
                PlacementRecord(best.x, best.y, best.orientation, word, best.overlap)
            )
        else:
            result.not_found.append(word)
    return result
