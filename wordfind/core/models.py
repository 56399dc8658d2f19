"""Data models shared by the placement engine, builder and solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

from .constants import Orientation, descriptor

if TYPE_CHECKING:
    from ..engine.grid import PuzzleGrid


@dataclass
class CandidateLocation:
    """A proposed placement; ``overlap`` counts letters already present."""

    x: int
    y: int
    orientation: Orientation
    overlap: int


@dataclass
class PlacementRecord:
    """Where a solved word lies in the grid."""

    x: int
    y: int
    orientation: Orientation
    word: str
    overlap: int

    @property
    def cells(self) -> List[Tuple[int, int]]:
        step = descriptor(self.orientation).step
        return [step(self.x, self.y, i) for i in range(len(self.word))]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "x": self.x,
            "y": self.y,
            "orientation": self.orientation.value,
            "cells": [list(cell) for cell in self.cells],
        }


@dataclass
class SolveResult:
    found: List[PlacementRecord] = field(default_factory=list)
    not_found: List[str] = field(default_factory=list)


@dataclass
class LaxOutcome:
    grid: PuzzleGrid
    dropped_words: List[str] = field(default_factory=list)
