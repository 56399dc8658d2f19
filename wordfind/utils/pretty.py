"""Pretty-print helpers for puzzle grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.models import SolveResult
    from ..engine.grid import PuzzleGrid


EMPTY_SYMBOL = "."


def format_grid(grid: PuzzleGrid) -> str:
    width = grid.width
    header_cells = [f"{x:>2}" for x in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for y in range(grid.height):
        row_cells = [grid.letter_at(x, y) or EMPTY_SYMBOL for x in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def print_puzzle_stats(
    grid: PuzzleGrid,
    solution: Optional[SolveResult] = None,
    *,
    stream=None,
) -> None:
    """Print grid + size, blank and solution stats for a finished puzzle."""

    stream = stream or sys.stdout
    print(format_grid(grid), file=stream)

    total_cells = grid.height * grid.width
    empty_cells = grid.count_empty()
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({total_cells} cells)", file=stream)
    if empty_cells:
        print(f"  Empty squares: {empty_cells}", file=stream)

    if solution is None:
        return

    print(file=stream)
    print("--- Words ---", file=stream)
    for record in solution.found:
        print(
            f"  {record.word:<16} ({record.x},{record.y}) {record.orientation.value}",
            file=stream,
        )
    if solution.not_found:
        print(f"  Not found:     {', '.join(solution.not_found)}", file=stream)
