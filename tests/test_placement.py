import random
import unittest

from wordfind.core.constants import Orientation
from wordfind.engine.grid import PuzzleGrid
from wordfind.engine.placement import SearchOptions, find_best_locations, place_word_in_puzzle


class FirstChoiceRandom(random.Random):
    """Always picks the first candidate location."""

    def randrange(self, *args, **kwargs) -> int:
        return 0


def positions(locations):
    return [(loc.x, loc.y, loc.orientation, loc.overlap) for loc in locations]


class FindBestLocationsTests(unittest.TestCase):
    def test_empty_grid_lists_every_feasible_origin(self) -> None:
        grid = PuzzleGrid(5, 5)
        locations = find_best_locations(grid, SearchOptions(), "hello")
        # 5 per straight orientation, one per diagonal
        self.assertEqual(len(locations), 24)
        self.assertTrue(all(loc.overlap == 0 for loc in locations))

    def test_horizontal_origins_are_first_column_only(self) -> None:
        grid = PuzzleGrid(5, 5)
        options = SearchOptions(orientations=(Orientation.HORIZONTAL,))
        locations = find_best_locations(grid, options, "hello")
        self.assertEqual([(loc.x, loc.y) for loc in locations], [(0, y) for y in range(5)])

    def test_vertical_up_origins_are_last_row_only(self) -> None:
        grid = PuzzleGrid(5, 5)
        options = SearchOptions(orientations=(Orientation.VERTICAL_UP,))
        locations = find_best_locations(grid, options, "hello")
        self.assertEqual([(loc.x, loc.y) for loc in locations], [(x, 4) for x in range(5)])

    def test_scan_is_row_major(self) -> None:
        grid = PuzzleGrid(3, 3)
        options = SearchOptions(orientations=(Orientation.HORIZONTAL_BACK,))
        locations = find_best_locations(grid, options, "ab")
        self.assertEqual(
            [(loc.x, loc.y) for loc in locations],
            [(1, 0), (2, 0), (1, 1), (2, 1), (1, 2), (2, 2)],
        )

    def test_vertical_scan_covers_tall_grids(self) -> None:
        grid = PuzzleGrid(120, 1)
        options = SearchOptions(orientations=(Orientation.VERTICAL,))
        locations = find_best_locations(grid, options, "abc")
        self.assertEqual(len(locations), 118)
        self.assertEqual(locations[-1].y, 117)

    def test_word_longer_than_grid_has_no_location(self) -> None:
        grid = PuzzleGrid(3, 3)
        self.assertEqual(find_best_locations(grid, SearchOptions(), "banana"), [])

    def test_conflicting_cells_are_excluded(self) -> None:
        grid = PuzzleGrid(3, 3)
        grid.place_word("cat", 0, 0, Orientation.HORIZONTAL)
        options = SearchOptions(orientations=(Orientation.HORIZONTAL,))
        locations = find_best_locations(grid, options, "dog")
        self.assertEqual([(loc.x, loc.y) for loc in locations], [(0, 1), (0, 2)])

    def test_prefer_overlap_keeps_only_best(self) -> None:
        grid = PuzzleGrid(3, 3)
        grid.place_word("cat", 0, 0, Orientation.HORIZONTAL)
        options = SearchOptions(orientations=(Orientation.HORIZONTAL, Orientation.VERTICAL))
        locations = find_best_locations(grid, options, "car")
        self.assertEqual(positions(locations), [(0, 0, Orientation.VERTICAL, 1)])

    def test_without_prefer_overlap_keeps_every_fit(self) -> None:
        grid = PuzzleGrid(3, 3)
        grid.place_word("cat", 0, 0, Orientation.HORIZONTAL)
        options = SearchOptions(
            orientations=(Orientation.HORIZONTAL, Orientation.VERTICAL), prefer_overlap=False
        )
        locations = find_best_locations(grid, options, "car")
        self.assertEqual(
            positions(locations),
            [
                (0, 1, Orientation.HORIZONTAL, 0),
                (0, 2, Orientation.HORIZONTAL, 0),
                (0, 0, Orientation.VERTICAL, 1),
            ],
        )

    def test_full_overlap_is_accepted(self) -> None:
        grid = PuzzleGrid(1, 5)
        grid.place_word("cater", 0, 0, Orientation.HORIZONTAL)
        options = SearchOptions(orientations=(Orientation.HORIZONTAL,))
        locations = find_best_locations(grid, options, "cat")
        self.assertEqual(positions(locations), [(0, 0, Orientation.HORIZONTAL, 3)])


class PlaceWordInPuzzleTests(unittest.TestCase):
    def test_places_at_chosen_location(self) -> None:
        grid = PuzzleGrid(3, 3)
        placed = place_word_in_puzzle(grid, SearchOptions(), "cat", FirstChoiceRandom())
        self.assertTrue(placed)
        self.assertEqual(grid.rows()[0], ["c", "a", "t"])

    def test_returns_false_when_word_does_not_fit(self) -> None:
        grid = PuzzleGrid(3, 3)
        placed = place_word_in_puzzle(grid, SearchOptions(), "banana", random.Random(1))
        self.assertFalse(placed)
        self.assertEqual(grid.count_empty(), 9)

    def test_random_choice_stays_within_candidates(self) -> None:
        options = SearchOptions(orientations=(Orientation.DIAGONAL,))
        for seed in range(10):
            grid = PuzzleGrid(4, 4)
            self.assertTrue(place_word_in_puzzle(grid, options, "abc", random.Random(seed)))
            self.assertEqual(grid.count_empty(), 13)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
