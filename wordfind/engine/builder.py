"""Puzzle construction orchestration.

Words are placed longest first into a fresh grid. A failed placement throws
the whole attempt away; after ``max_attempts`` failures the grid grows by one
row and one column, up to ``max_grid_growth`` times. Lax mode additionally
retries with words removed, up to ``allowed_missing_words`` of them.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..core.constants import ALL_ORIENTATIONS, Orientation
from ..core.exceptions import (ConstructionError, FillError, InvalidInputError,
                               LaxExhaustedError, ValidationError)
from ..core.models import LaxOutcome, SolveResult
from ..data.alphabets import AlphabetProvider, letters_for
from ..utils.logger import get_logger
from .grid import PuzzleGrid
from .placement import SearchOptions, place_word_in_puzzle
from .solver import solve
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class PuzzleConfig:
    height: Optional[int] = None
    width: Optional[int] = None
    orientations: Sequence[Union[Orientation, str]] = ALL_ORIENTATIONS
    # True: random letters, False: leave empty, str: secret letters written into blanks
    fill_blanks: Union[bool, str] = True
    allow_extra_blanks: bool = True
    allowed_missing_words: int = 0
    max_attempts: int = 3
    max_grid_growth: int = 10
    prefer_overlap: bool = True
    language: str = "EN"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        try:
            self.orientations = tuple(Orientation(o) for o in self.orientations)
        except ValueError as exc:
            raise ValueError(f"Unknown orientation: {exc}") from exc
        if not self.orientations:
            raise ValueError("At least one orientation is required")
        for name in ("height", "width"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.max_grid_growth < 0:
            raise ValueError("max_grid_growth cannot be negative")
        if self.allowed_missing_words < 0:
            raise ValueError("allowed_missing_words cannot be negative")

    def to_search_options(self) -> SearchOptions:
        return SearchOptions(orientations=self.orientations, prefer_overlap=self.prefer_overlap)

    def initial_size(self, words: Sequence[str]) -> Tuple[int, int]:
        """Return ``(height, width)``, defaulting each to the longest word length."""

        longest = max(len(word) for word in words)
        return self.height or longest, self.width or longest


class PuzzleBuilder:
    """Builds word-search grids and solves them."""

    def __init__(
        self,
        config: Optional[PuzzleConfig] = None,
        rng: Optional[random.Random] = None,
        alphabet_provider: Optional[AlphabetProvider] = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.alphabet_provider = alphabet_provider or letters_for
        self.search_options = self.config.to_search_options()
        self.validator = PuzzleValidator(self.config.orientations)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def new_puzzle(self, words: Sequence[str]) -> PuzzleGrid:
        word_list = self._prepare_words(words)
        height, width = self.config.initial_size(word_list)
        attempts = 0
        growths = 0
        grid: Optional[PuzzleGrid] = None

        while grid is None:
            while grid is None and attempts < self.config.max_attempts:
                attempts += 1
                grid = self.fill_puzzle(word_list, height, width)
                if grid is None:
                    LOGGER.debug("Attempt %s/%s at %sx%s failed", attempts, self.config.max_attempts, width, height)

            if grid is None:
                growths += 1
                if growths > self.config.max_grid_growth:
                    raise ConstructionError(
                        f"No valid {width}x{height} grid found and not allowed to grow more",
                        width=width,
                        height=height,
                    )
                LOGGER.info(
                    "No valid %sx%s grid found after %s attempts, trying with bigger grid",
                    width,
                    height,
                    attempts,
                )
                height += 1
                width += 1
                attempts = 0

        self._fill_blanks(grid)
        validation = self.validator.validate(
            grid, word_list, require_full=self.config.fill_blanks is True
        )
        if not validation.ok:
            raise ValidationError(
                "; ".join(validation.messages), width=grid.width, height=grid.height
            )
        grid.freeze()
        return grid

    def new_puzzle_lax(self, words: Sequence[str]) -> LaxOutcome:
        """Build the puzzle, dropping up to ``allowed_missing_words`` words if needed.

        Branches are explored depth-first in the order a recursive search
        removing ``words[0]``, ``words[1]``, ... would visit them.
        """

        word_list = list(words)
        try:
            return LaxOutcome(grid=self.new_puzzle(word_list))
        except (FillError, ValidationError):
            raise
        except ConstructionError as exc:
            original = exc

        budget = self.config.allowed_missing_words
        if budget <= 0:
            raise original

        pending = list(reversed(self._removals(word_list, [], budget)))
        tried = {tuple(word_list)}
        while pending:
            remaining, dropped, left = pending.pop()
            key = tuple(remaining)
            if key in tried:
                continue
            tried.add(key)
            try:
                grid = self.new_puzzle(remaining)
            except (FillError, ValidationError):
                raise
            except ConstructionError as exc:
                LOGGER.debug("Build without %s failed: %s", dropped, exc)
                if left > 0:
                    pending.extend(reversed(self._removals(remaining, dropped, left)))
                continue
            LOGGER.info("Solution found without word(s) %s", ", ".join(repr(w) for w in dropped))
            return LaxOutcome(grid=grid, dropped_words=dropped)

        raise LaxExhaustedError(
            f"Dropping up to {budget} word(s) did not rescue the build: {original}",
            width=original.width,
            height=original.height,
        ) from original

    def solve(self, grid: PuzzleGrid, words: Sequence[str]) -> SolveResult:
        return solve(grid, words, self.config.orientations)

    # ------------------------------------------------------------------
    # Single attempt
    # ------------------------------------------------------------------
    def fill_puzzle(self, words: Sequence[str], height: int, width: int) -> Optional[PuzzleGrid]:
        """Place every word into a fresh grid, or return None on the first failure."""

        grid = PuzzleGrid(height, width)
        for word in words:
            if not place_word_in_puzzle(grid, self.search_options, word, self.rng):
                return None
        return grid

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _prepare_words(words: Sequence[str]) -> List[str]:
        if not words:
            raise InvalidInputError("No words provided")
        if any(not word for word in words):
            raise InvalidInputError("Word list contains an empty word")
        # Longest words first fit best; sorted() keeps ties in input order.
        return sorted(words, key=len, reverse=True)

    @staticmethod
    def _removals(
        words: List[str], dropped: List[str], budget: int
    ) -> List[Tuple[List[str], List[str], int]]:
        if len(words) < 2:
            return []
        return [
            (words[:i] + words[i + 1:], dropped + [words[i]], budget - 1)
            for i in range(len(words))
        ]

    def _fill_blanks(self, grid: PuzzleGrid) -> None:
        fill = self.config.fill_blanks
        if isinstance(fill, str):
            self._fill_secret_letters(grid, fill)
            return
        if not fill:
            return
        letters = self.alphabet_provider(self.config.language)
        if not letters:
            raise FillError(
                f"No fill letters available for language '{self.config.language}'",
                width=grid.width,
                height=grid.height,
            )
        for x, y in list(grid.empty_cells()):
            grid.set_letter(x, y, self.rng.choice(letters))

    def _fill_secret_letters(self, grid: PuzzleGrid, secret: str) -> None:
        letters = [char for char in secret if not char.isspace()]
        blanks = list(grid.empty_cells())
        if len(letters) > len(blanks):
            raise FillError(
                f"{len(letters) - len(blanks)} secret letters do not fit in the "
                f"{len(blanks)} blank cells",
                width=grid.width,
                height=grid.height,
            )
        for (x, y), letter in zip(blanks, letters):
            grid.set_letter(x, y, letter)
        missing = len(blanks) - len(letters)
        if missing and not self.config.allow_extra_blanks:
            raise FillError(
                f"{missing} extra letters were missing to fill the grid",
                width=grid.width,
                height=grid.height,
            )


def build(
    words: Sequence[str],
    config: Optional[PuzzleConfig] = None,
    rng: Optional[random.Random] = None,
    alphabet_provider: Optional[AlphabetProvider] = None,
) -> PuzzleGrid:
    """Build a grid containing every word or raise :class:`ConstructionError`."""

    return PuzzleBuilder(config, rng=rng, alphabet_provider=alphabet_provider).new_puzzle(words)


def build_lax(
    words: Sequence[str],
    config: Optional[PuzzleConfig] = None,
    rng: Optional[random.Random] = None,
    alphabet_provider: Optional[AlphabetProvider] = None,
) -> PuzzleGrid:
    """Like :func:`build` but tolerates ``config.allowed_missing_words`` dropped words."""

    builder = PuzzleBuilder(config, rng=rng, alphabet_provider=alphabet_provider)
    return builder.new_puzzle_lax(words).grid
