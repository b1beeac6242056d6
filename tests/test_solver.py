import unittest

from mazelab import (
    CellState,
    Grid,
    MazeEvaluator,
    MazeSolver,
    NoPathFoundError,
    SolverStateError,
    generate,
    reset_marks,
    solve,
)


def _hand_built(open_connectors):
    grid = Grid.create(5, 5)
    for room in grid.rooms():
        grid.set_cell_state(*room, CellState.OPEN)
    for cell in open_connectors:
        grid.set_cell_state(*cell, CellState.OPEN)
    return grid


class MazeSolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.evaluator = MazeEvaluator()

    def test_generated_mazes_are_solved(self) -> None:
        for rows, cols in ((3, 3), (5, 5), (7, 15), (21, 21), (40, 30)):
            for seed in (0, 3):
                with self.subTest(rows=rows, cols=cols, seed=seed):
                    grid = generate(rows, cols, seed)
                    path = solve(grid)
                    result = self.evaluator.evaluate_path(grid, path)
                    self.assertTrue(result.is_valid, result.message)

    def test_on_path_cells_are_exactly_the_returned_path(self) -> None:
        grid = generate(25, 25, 17)
        path = solve(grid)
        self.assertEqual(set(grid.cells_in_state(CellState.ON_PATH)), set(path))

    def test_walls_are_never_touched(self) -> None:
        grid = generate(15, 15, 4)
        walls_before = set(grid.cells_in_state(CellState.WALL))
        solve(grid)
        self.assertEqual(set(grid.cells_in_state(CellState.WALL)), walls_before)

    def test_five_by_five_scenario(self) -> None:
        grid = generate(5, 5, 42)
        path = solve(grid)
        self.assertEqual(path[0], (1, 1))
        self.assertEqual(path[-1], (3, 3))
        self.assertTrue(3 <= len(path) <= 5)

    def test_single_room_maze(self) -> None:
        grid = generate(3, 3, 0)
        self.assertEqual(solve(grid), [(1, 1)])
        self.assertIs(grid.cell_state(1, 1), CellState.ON_PATH)

    def test_neighbours_tried_right_up_down_left(self) -> None:
        grid = _hand_built([(1, 2), (2, 3), (2, 1)])
        self.assertEqual(solve(grid), [(1, 1), (1, 2), (1, 3), (2, 3), (3, 3)])
        self.assertEqual(list(grid.cells_in_state(CellState.DEAD)), [])

    def test_dead_ends_are_marked_on_backtrack(self) -> None:
        grid = _hand_built([(1, 2), (2, 1), (3, 2)])
        changes = []
        path = MazeSolver(observer=changes.append).solve(grid)

        self.assertEqual(path, [(1, 1), (2, 1), (3, 1), (3, 2), (3, 3)])
        self.assertEqual(set(grid.cells_in_state(CellState.DEAD)), {(1, 2), (1, 3)})
        self.assertEqual(
            [(change.cell, change.state) for change in changes],
            [
                ((1, 1), CellState.ON_PATH),
                ((1, 2), CellState.ON_PATH),
                ((1, 3), CellState.ON_PATH),
                ((1, 3), CellState.DEAD),
                ((1, 2), CellState.DEAD),
                ((2, 1), CellState.ON_PATH),
                ((3, 1), CellState.ON_PATH),
                ((3, 2), CellState.ON_PATH),
                ((3, 3), CellState.ON_PATH),
            ],
        )

    def test_disconnected_exit_raises(self) -> None:
        grid = _hand_built([(1, 2), (2, 1)])
        with self.assertRaises(NoPathFoundError) as ctx:
            solve(grid)
        self.assertEqual(ctx.exception.entrance, (1, 1))
        self.assertEqual(ctx.exception.exit, (3, 3))
        self.assertEqual(list(grid.cells_in_state(CellState.ON_PATH)), [])
        self.assertEqual(
            set(grid.cells_in_state(CellState.DEAD)),
            {(1, 1), (1, 2), (1, 3), (2, 1), (3, 1)},
        )

    def test_ungenerated_grid_raises(self) -> None:
        with self.assertRaises(NoPathFoundError):
            solve(Grid.create(7, 7))

    def test_roomless_grid_raises(self) -> None:
        with self.assertRaises(NoPathFoundError):
            solve(generate(1, 9, 0))

    def test_second_solve_requires_reset(self) -> None:
        grid = generate(21, 21, 9)
        first = solve(grid)
        with self.assertRaises(SolverStateError):
            solve(grid)
        self.assertGreaterEqual(reset_marks(grid), len(first))
        self.assertEqual(list(grid.cells_in_state(CellState.ON_PATH)), [])
        self.assertEqual(solve(grid), first)

    def test_single_stepping_exposes_the_frontier(self) -> None:
        grid = generate(21, 21, 6)
        steps = MazeSolver().iter_steps(grid)
        first = next(steps)
        self.assertEqual(first.cell, (1, 1))
        self.assertIs(first.state, CellState.ON_PATH)
        self.assertIs(grid.cell_state(1, 1), CellState.ON_PATH)

        for _ in range(5):
            next(steps)
        path = None
        while path is None:
            try:
                change = next(steps)
            except StopIteration as done:
                path = done.value
            else:
                self.assertIs(grid.cell_state(change.row, change.col), change.state)
        self.assertEqual(path[-1], grid.exit)

    def test_large_maze_does_not_hit_recursion_limit(self) -> None:
        grid = generate(101, 101, 2024)
        path = solve(grid)
        self.assertTrue(self.evaluator.evaluate_path(grid, path).is_valid)


if __name__ == "__main__":
    unittest.main()
