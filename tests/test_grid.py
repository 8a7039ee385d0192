import unittest

import numpy as np

from labyrinth import Coordinate, Grid, InvalidBoundaryError, ValidationError
from labyrinth.grid import PASSABLE, WALL


EXAMPLE_CELLS = [
    [0, 1, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 1, 1, 1, 0],
    [0, 1, 0, 0, 0],
]


class CoordinateTests(unittest.TestCase):
    def test_structural_equality_and_hash(self) -> None:
        self.assertEqual(Coordinate(2, 3), Coordinate(2, 3))
        self.assertEqual(len({Coordinate(2, 3), Coordinate(2, 3), Coordinate(3, 2)}), 2)

    def test_of_accepts_pairs(self) -> None:
        self.assertEqual(Coordinate.of((4, 1)), Coordinate(4, 1))
        self.assertEqual(Coordinate.of([0, 0]), Coordinate(0, 0))
        with self.assertRaises(TypeError):
            Coordinate.of((1, 2, 3))

    def test_neighbors_order_is_left_right_up_down(self) -> None:
        self.assertEqual(
            list(Coordinate(1, 1).neighbors()),
            [Coordinate(0, 1), Coordinate(2, 1), Coordinate(1, 0), Coordinate(1, 2)],
        )


class GridCreateTests(unittest.TestCase):
    def test_create_exposes_accessors(self) -> None:
        grid = Grid.create(EXAMPLE_CELLS, (0, 0), (4, 4))
        self.assertEqual(grid.width, 5)
        self.assertEqual(grid.height, 5)
        self.assertEqual(grid.entrance, Coordinate(0, 0))
        self.assertEqual(grid.exit, Coordinate(4, 4))
        self.assertEqual(grid.to_list(), EXAMPLE_CELLS)
        self.assertEqual(grid.passable_count(), 17)

    def test_rejects_entrance_out_of_bounds(self) -> None:
        with self.assertRaises(InvalidBoundaryError) as ctx:
            Grid.create(EXAMPLE_CELLS, (-1, 0), (4, 4))
        self.assertEqual(ctx.exception.which, "entrance")

    def test_rejects_exit_on_wall_even_when_entrance_is_valid(self) -> None:
        with self.assertRaises(InvalidBoundaryError) as ctx:
            Grid.create(EXAMPLE_CELLS, (0, 0), (1, 0))
        self.assertEqual(ctx.exception.which, "exit")
        self.assertEqual(ctx.exception.coordinate, Coordinate(1, 0))

    def test_rejects_exit_out_of_bounds(self) -> None:
        with self.assertRaises(InvalidBoundaryError) as ctx:
            Grid.create(EXAMPLE_CELLS, (0, 0), (5, 4))
        self.assertEqual(ctx.exception.which, "exit")

    def test_boundary_error_is_a_validation_error(self) -> None:
        with self.assertRaises(ValidationError):
            Grid.create(EXAMPLE_CELLS, (1, 0), (4, 4))

    def test_rejects_ragged_rows(self) -> None:
        with self.assertRaises(ValidationError):
            Grid.create([[0, 0, 0], [0, 0]], (0, 0), (1, 1))

    def test_rejects_grids_smaller_than_two_by_two(self) -> None:
        with self.assertRaises(ValidationError):
            Grid.create([[0, 0, 0]], (0, 0), (2, 0))
        with self.assertRaises(ValidationError):
            Grid.create([[0], [0]], (0, 0), (0, 1))

    def test_rejects_unknown_cell_values(self) -> None:
        with self.assertRaises(ValidationError):
            Grid.create([[0, 2], [0, 0]], (0, 0), (1, 1))

    def test_copies_and_freezes_cells(self) -> None:
        cells = [row[:] for row in EXAMPLE_CELLS]
        grid = Grid.create(cells, (0, 0), (4, 4))
        cells[0][0] = WALL
        self.assertTrue(grid.is_valid_move((0, 0)))
        with self.assertRaises(ValueError):
            grid.cells[0, 0] = WALL

    def test_cells_view_cannot_be_made_writable(self) -> None:
        grid = Grid.create([[0, 0], [0, 0]], (0, 0), (1, 1))
        view = grid.cells
        with self.assertRaises(ValueError):
            view.flags.writeable = True
        self.assertTrue(grid.is_valid_move(grid.exit))

    def test_rejects_flat_list(self) -> None:
        with self.assertRaises(ValidationError):
            Grid.create([0, 1, 0], (0, 0), (2, 0))
        with self.assertRaises(ValidationError):
            Grid.create(np.array([0, 1, 0]), (0, 0), (2, 0))

    def test_direct_construction_is_refused(self) -> None:
        with self.assertRaises(TypeError):
            Grid(np.zeros((2, 2), dtype=np.uint8), Coordinate(-1, 0), Coordinate(1, 1))

    def test_accepts_numpy_arrays(self) -> None:
        array = np.array(EXAMPLE_CELLS, dtype=np.int32)
        grid = Grid.create(array, (0, 0), (4, 4))
        self.assertEqual(grid, Grid.create(EXAMPLE_CELLS, (0, 0), (4, 4)))


class IsValidMoveTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.create(EXAMPLE_CELLS, (0, 0), (4, 4))

    def test_outside_bounds_is_invalid(self) -> None:
        w, h = self.grid.width, self.grid.height
        for coord in ((-1, 0), (w, 0), (0, -1), (0, h)):
            with self.subTest(coord=coord):
                self.assertFalse(self.grid.is_valid_move(coord))
                self.assertFalse(self.grid.in_bounds(coord))

    def test_walls_are_invalid_and_passages_valid(self) -> None:
        self.assertFalse(self.grid.is_valid_move(Coordinate(1, 0)))
        self.assertTrue(self.grid.is_valid_move(Coordinate(2, 0)))
        self.assertEqual(self.grid.cells[0, 2], PASSABLE)


if __name__ == "__main__":
    unittest.main()
