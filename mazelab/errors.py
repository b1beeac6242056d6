"""Typed failures raised by the maze grid, generator and solver."""

from __future__ import annotations

from typing import Tuple


class MazeError(Exception):
    """Base class for every maze failure."""


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive size."""

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"rows and cols must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols


class OutOfBoundsError(MazeError, IndexError):
    """Raised when a cell outside the grid extent is read or written."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is outside a {rows}x{cols} grid")
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class NoPathFoundError(MazeError, RuntimeError):
    """Raised when the solver cannot connect the entrance to the exit."""

    def __init__(self, entrance: Tuple[int, int], exit: Tuple[int, int]) -> None:
        super().__init__(f"No path from {entrance} to {exit}")
        self.entrance = entrance
        self.exit = exit


class GeneratorStateError(MazeError, RuntimeError):
    """Raised when a generator is asked to carve a grid that is not all walls."""


class SolverStateError(MazeError, RuntimeError):
    """Raised when a grid still carries marks from an earlier solve."""


__all__ = [
    "MazeError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "NoPathFoundError",
    "GeneratorStateError",
    "SolverStateError",
]
