"""Placement engine: candidate search and overlap-driven word placement.

The scan walks every allowed orientation over the grid in row-major order.
Origins where the word cannot fit are skipped using the orientation's
scan-skip rule, so most out-of-bounds starts are never visited.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import ALL_ORIENTATIONS, ORIENTATION_TABLE, Orientation
from ..core.models import CandidateLocation
from ..utils.logger import get_logger
from .grid import PuzzleGrid


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SearchOptions:
    """Options consumed by :func:`find_best_locations`."""

    orientations: Sequence[Orientation] = ALL_ORIENTATIONS
    prefer_overlap: bool = True
    fold_case: bool = False


def find_best_locations(
    grid: PuzzleGrid, options: SearchOptions, word: str
) -> List[CandidateLocation]:
    """Return every location where ``word`` fits.

    With ``prefer_overlap`` only the locations sharing the most letters with
    words already in the grid are kept.
    """

    height, width = grid.height, grid.width
    length = len(word)
    locations: List[CandidateLocation] = []
    max_overlap = 0

    for orientation in options.orientations:
        rule = ORIENTATION_TABLE[Orientation(orientation)]
        x, y = 0, 0
        while y < height:
            if x >= width:
                x, y = 0, y + 1
                continue
            if not rule.fits(x, y, height, width, length):
                x, y = rule.skip(x, y, length, height, width)
                continue

            overlap = grid.calc_overlap(word, x, y, rule.orientation, fold_case=options.fold_case)
            if overlap >= max_overlap or (not options.prefer_overlap and overlap > -1):
                max_overlap = overlap
                locations.append(CandidateLocation(x, y, rule.orientation, overlap))

            x += 1
            if x >= width:
                x, y = 0, y + 1

    if options.prefer_overlap:
        return [location for location in locations if location.overlap >= max_overlap]
    return locations


def place_word_in_puzzle(
    grid: PuzzleGrid, options: SearchOptions, word: str, rng: random.Random
) -> bool:
    """Commit ``word`` at a random best location; False when it fits nowhere."""

    locations = find_best_locations(grid, options, word)
    if not locations:
        LOGGER.debug("No location left for '%s' in %sx%s grid", word, grid.width, grid.height)
        return False

    chosen = locations[rng.randrange(len(locations))]
    grid.place_word(word, chosen.x, chosen.y, chosen.orientation)
    return True
