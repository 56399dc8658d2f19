"""Orientations and the descriptor table driving the placement scan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple


class Orientation(str, Enum):
    """The eight directions a word may be written in."""

    HORIZONTAL = "horizontal"
    HORIZONTAL_BACK = "horizontalBack"
    VERTICAL = "vertical"
    VERTICAL_UP = "verticalUp"
    DIAGONAL = "diagonal"
    DIAGONAL_BACK = "diagonalBack"
    DIAGONAL_UP = "diagonalUp"
    DIAGONAL_UP_BACK = "diagonalUpBack"


# skip(x, y, length, height, width) -> next origin worth checking
SkipFn = Callable[[int, int, int, int, int], Tuple[int, int]]


@dataclass(frozen=True)
class OrientationDescriptor:
    """Step vector, feasibility predicate and scan-skip rule for one orientation."""

    orientation: Orientation
    dx: int
    dy: int
    skip: SkipFn

    def step(self, x: int, y: int, i: int) -> Tuple[int, int]:
        return x + self.dx * i, y + self.dy * i

    def fits(self, x: int, y: int, height: int, width: int, length: int) -> bool:
        """Return True when a word of ``length`` starting at (x, y) stays inside the grid."""

        if self.dx > 0 and width < x + length:
            return False
        if self.dx < 0 and x + 1 < length:
            return False
        if self.dy > 0 and height < y + length:
            return False
        if self.dy < 0 and y + 1 < length:
            return False
        return True


ORIENTATION_TABLE: Dict[Orientation, OrientationDescriptor] = {
    Orientation.HORIZONTAL: OrientationDescriptor(
        Orientation.HORIZONTAL, 1, 0,
        lambda x, y, l, h, w: (0, y + 1),
    ),
    Orientation.HORIZONTAL_BACK: OrientationDescriptor(
        Orientation.HORIZONTAL_BACK, -1, 0,
        lambda x, y, l, h, w: (l - 1, y),
    ),
    # Every row below an infeasible one is infeasible too, so stop scanning.
    Orientation.VERTICAL: OrientationDescriptor(
        Orientation.VERTICAL, 0, 1,
        lambda x, y, l, h, w: (0, h),
    ),
    Orientation.VERTICAL_UP: OrientationDescriptor(
        Orientation.VERTICAL_UP, 0, -1,
        lambda x, y, l, h, w: (0, l - 1),
    ),
    Orientation.DIAGONAL: OrientationDescriptor(
        Orientation.DIAGONAL, 1, 1,
        lambda x, y, l, h, w: (0, y + 1),
    ),
    Orientation.DIAGONAL_BACK: OrientationDescriptor(
        Orientation.DIAGONAL_BACK, -1, 1,
        lambda x, y, l, h, w: (l - 1, y + 1 if x >= l - 1 else y),
    ),
    Orientation.DIAGONAL_UP: OrientationDescriptor(
        Orientation.DIAGONAL_UP, 1, -1,
        lambda x, y, l, h, w: (0, l - 1 if y < l - 1 else y + 1),
    ),
    Orientation.DIAGONAL_UP_BACK: OrientationDescriptor(
        Orientation.DIAGONAL_UP_BACK, -1, -1,
        lambda x, y, l, h, w: (l - 1, y + 1 if x >= l - 1 else y),
    ),
}

ALL_ORIENTATIONS: Tuple[Orientation, ...] = tuple(Orientation)


def descriptor(orientation: Orientation | str) -> OrientationDescriptor:
    return ORIENTATION_TABLE[Orientation(orientation)]
