"""Depth-first backtracking solver for carved mazes."""

from __future__ import annotations

import logging
from typing import Generator, List, Tuple

from ..base import AbstractMazeSolver, CellChange
from ..errors import NoPathFoundError, SolverStateError
from ..grid import Cell, CellState, Grid

logger = logging.getLogger(__name__)

# right, up, down, left
NEIGHBOR_ORDER: Tuple[Tuple[int, int], ...] = ((0, 1), (-1, 0), (1, 0), (0, -1))


class MazeSolver(AbstractMazeSolver):
    """Walk from the entrance to the exit, backtracking out of dead ends.

    Cells on the current route are marked ``ON_PATH``. When every open
    neighbour of a cell has been tried without reaching the exit, the cell is
    demoted to ``DEAD`` as the search backs out of it. The first route found is
    returned; it is not necessarily the shortest one.

    The search keeps its own stack of ``[cell, next neighbour index]`` frames,
    so the maze size is not limited by the interpreter's recursion limit.
    """

    def iter_steps(self, grid: Grid) -> Generator[CellChange, None, List[Cell]]:
        self._check_unmarked(grid)
        entrance, goal = grid.entrance, grid.exit
        if not grid.in_bounds(*entrance) or grid.cell_state(*entrance) != CellState.OPEN:
            raise NoPathFoundError(entrance, goal)

        yield self._apply(grid, entrance[0], entrance[1], CellState.ON_PATH)
        if entrance == goal:
            return [entrance]

        stack: List[List] = [[entrance, 0]]
        visited = 1
        while stack:
            frame = stack[-1]
            (row, col), index = frame
            next_cell = None
            while index < len(NEIGHBOR_ORDER):
                dr, dc = NEIGHBOR_ORDER[index]
                index += 1
                nr, nc = row + dr, col + dc
                if grid.in_bounds(nr, nc) and grid.cell_state(nr, nc) == CellState.OPEN:
                    next_cell = (nr, nc)
                    break
            frame[1] = index

            if next_cell is None:
                stack.pop()
                yield self._apply(grid, row, col, CellState.DEAD)
                continue

            visited += 1
            yield self._apply(grid, next_cell[0], next_cell[1], CellState.ON_PATH)
            if next_cell == goal:
                path = [cell for cell, _ in stack]
                path.append(next_cell)
                logger.debug("Reached %s after visiting %d cells; path has %d", goal, visited, len(path))
                return path
            stack.append([next_cell, 0])

        logger.debug("Exhausted %d cells without reaching %s", visited, goal)
        raise NoPathFoundError(entrance, goal)

    @staticmethod
    def _check_unmarked(grid: Grid) -> None:
        for state in (CellState.ON_PATH, CellState.DEAD):
            if next(grid.cells_in_state(state), None) is not None:
                raise SolverStateError(
                    "Grid already carries solver marks; call reset_marks() before solving again"
                )


def solve(grid: Grid) -> List[Cell]:
    """Return the path from entrance to exit, marking the grid along the way."""

    return MazeSolver().solve(grid)


def reset_marks(grid: Grid) -> int:
    """Turn every ``ON_PATH`` and ``DEAD`` cell back into ``OPEN``; return how many changed."""

    marked = list(grid.cells_in_state(CellState.ON_PATH))
    marked.extend(grid.cells_in_state(CellState.DEAD))
    for row, col in marked:
        grid.set_cell_state(row, col, CellState.OPEN)
    return len(marked)


__all__ = ["MazeSolver", "NEIGHBOR_ORDER", "reset_marks", "solve"]
