"""Word-search puzzle builder and solver.

This package exposes the public API surface via:

- ``wordfind.engine.builder``: ``build``, ``build_lax`` and ``PuzzleBuilder``
  which place words into a grid, growing it until everything fits.
- ``wordfind.engine.solver.solve``: locates words inside an existing grid.
- ``wordfind.data.alphabets.letters_for``: per-language letters for blank cells.
"""

from .core.constants import ALL_ORIENTATIONS, Orientation
from .core.exceptions import (ConstructionError, InvalidInputError,
                              LaxExhaustedError, WordFindError)
from .core.models import PlacementRecord, SolveResult
from .data.alphabets import DEFAULT_LETTERS, letters_for
from .engine.builder import PuzzleBuilder, PuzzleConfig, build, build_lax
from .engine.grid import PuzzleGrid
from .engine.solver import solve

__all__ = [
    "ALL_ORIENTATIONS",
    "ConstructionError",
    "DEFAULT_LETTERS",
    "InvalidInputError",
    "LaxExhaustedError",
    "Orientation",
    "PlacementRecord",
    "PuzzleBuilder",
    "PuzzleConfig",
    "PuzzleGrid",
    "SolveResult",
    "WordFindError",
    "build",
    "build_lax",
    "letters_for",
    "solve",
]

__version__ = "0.1.0"
