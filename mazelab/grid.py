"""Cell matrix shared by the maze generator, solver and renderers."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterator, Tuple

import numpy as np

from .errors import InvalidDimensionError, OutOfBoundsError

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class CellState(IntEnum):
    OPEN = 0
    WALL = 1
    ON_PATH = 2
    DEAD = 3


_GLYPHS = {
    CellState.OPEN: " ",
    CellState.WALL: "#",
    CellState.ON_PATH: "*",
    CellState.DEAD: ".",
}


class Grid:
    """A rows x cols matrix of cell states with odd dimensions.

    Cells at (odd, odd) are rooms, cells at (even, even) are always walls, and
    cells with exactly one odd coordinate sit between two rooms and may be
    opened by a generator. The outer border is made of walls.
    """

    def __init__(self, rows: int, cols: int) -> None:
        for value in (rows, cols):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Grid dimensions must be integers, got {value!r}")
        if rows <= 0 or cols <= 0:
            raise InvalidDimensionError(rows, cols)
        self._rows = int(rows) if rows % 2 == 1 else int(rows) + 1
        self._cols = int(cols) if cols % 2 == 1 else int(cols) + 1
        self._cells = np.full((self._rows, self._cols), CellState.WALL, dtype=np.int8)
        logger.debug("Allocated %dx%d grid (requested %dx%d)", self._rows, self._cols, rows, cols)

    @classmethod
    def create(cls, rows: int, cols: int) -> "Grid":
        """Allocate an all-wall grid, bumping even dimensions to the next odd value."""

        return cls(rows, cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def dimensions(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self._rows, self._cols)

    def cell_state(self, row: int, col: int) -> CellState:
        self._check(row, col)
        return CellState(int(self._cells[row, col]))

    def set_cell_state(self, row: int, col: int, state: CellState) -> None:
        self._check(row, col)
        self._cells[row, col] = CellState(state)

    # ------------------------------------------------------------------

    def is_room(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and row % 2 == 1 and col % 2 == 1

    def is_wall_candidate(self, row: int, col: int) -> bool:
        if not (0 < row < self._rows - 1 and 0 < col < self._cols - 1):
            return False
        return (row % 2) != (col % 2)

    def rooms(self) -> Iterator[Cell]:
        for row in range(1, self._rows - 1, 2):
            for col in range(1, self._cols - 1, 2):
                yield row, col

    @property
    def room_count(self) -> int:
        return ((self._rows - 1) // 2) * ((self._cols - 1) // 2)

    @property
    def entrance(self) -> Cell:
        return 1, 1

    @property
    def exit(self) -> Cell:
        return self._rows - 2, self._cols - 2

    def cells_in_state(self, state: CellState) -> Iterator[Cell]:
        rows, cols = np.nonzero(self._cells == CellState(state))
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield row, col

    def to_array(self) -> np.ndarray:
        """Return a copy of the cell matrix; edits to it do not reach the grid."""

        return self._cells.copy()

    def __str__(self) -> str:
        return "\n".join(
            "".join(_GLYPHS[CellState(int(value))] for value in row) for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"


__all__ = ["Cell", "CellState", "Grid"]
