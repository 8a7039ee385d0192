import unittest

from labyrinth import Grid, MazeEvaluator, solve


EXAMPLE_CELLS = [
    [0, 1, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0],
    [0, 1, 1, 1, 0],
    [0, 1, 0, 0, 0],
]


class MazeEvaluatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.create(EXAMPLE_CELLS, (0, 0), (4, 4))
        self.evaluator = MazeEvaluator(self.grid)

    def test_solver_path_is_optimal(self) -> None:
        result = self.evaluator.evaluate(solve(self.grid))
        self.assertTrue(result.is_valid_solution)
        self.assertTrue(result.is_optimal)
        self.assertEqual(result.length, 12)
        self.assertEqual(result.optimal_length, 12)
        self.assertEqual(result.message, "Path is a shortest route from entrance to exit.")

    def test_detour_is_valid_but_not_optimal(self) -> None:
        detour = [(0, 0), (0, 1), (0, 2), (0, 3), (0, 2)] + [
            (1, 2), (2, 2), (2, 1), (2, 0), (3, 0), (4, 0), (4, 1), (4, 2), (4, 3), (4, 4)
        ]
        result = self.evaluator.evaluate(detour)
        self.assertTrue(result.is_valid_solution)
        self.assertFalse(result.is_optimal)
        self.assertEqual(result.length, 14)

    def test_path_through_wall_is_flagged(self) -> None:
        result = self.evaluator.evaluate([(0, 0), (1, 0), (2, 0)])
        self.assertTrue(result.stray_in_walls)
        self.assertFalse(result.is_valid_solution)
        self.assertEqual(result.message, "Path crosses walls or leaves the grid.")

    def test_jump_is_not_connected(self) -> None:
        result = self.evaluator.evaluate([(0, 0), (0, 1), (0, 2), (2, 2), (4, 4)])
        self.assertFalse(result.connected)
        self.assertTrue(result.starts_at_entrance)
        self.assertTrue(result.touches_goal)
        self.assertEqual(result.message, "Path is not continuous from entrance to exit.")

    def test_path_that_stops_short(self) -> None:
        result = self.evaluator.evaluate([(0, 0), (0, 1)])
        self.assertFalse(result.touches_goal)
        self.assertEqual(result.message, "Path does not reach the exit.")

    def test_empty_path(self) -> None:
        result = self.evaluator.evaluate([])
        self.assertFalse(result.is_valid_solution)
        self.assertEqual(result.message, "No path provided.")

    def test_unsolvable_grid_has_no_optimal_length(self) -> None:
        evaluator = MazeEvaluator(Grid.create([[0, 1], [1, 0]], (0, 0), (1, 1)))
        self.assertIsNone(evaluator.optimal_length)

    def test_to_dict_is_json_ready(self) -> None:
        payload = self.evaluator.evaluate(solve(self.grid)).to_dict()
        self.assertEqual(payload["length"], 12)
        self.assertTrue(payload["is_optimal"])
        self.assertEqual(
            set(payload),
            {
                "starts_at_entrance",
                "touches_goal",
                "connected",
                "stray_in_walls",
                "length",
                "optimal_length",
                "is_valid_solution",
                "is_optimal",
                "message",
            },
        )


if __name__ == "__main__":
    unittest.main()
