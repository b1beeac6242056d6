"""Abstract interfaces for maze generation and solving."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from .grid import Cell, CellState, Grid


@dataclass(frozen=True)
class CellChange:
    """A single cell moving to a new state."""

    row: int
    col: int
    state: CellState

    @property
    def cell(self) -> Cell:
        return self.row, self.col


StepObserver = Callable[[CellChange], None]


class _Observable:
    def __init__(self, observer: Optional[StepObserver] = None) -> None:
        self.observer = observer

    def _apply(self, grid: Grid, row: int, col: int, state: CellState) -> CellChange:
        grid.set_cell_state(row, col, state)
        change = CellChange(row, col, state)
        if self.observer is not None:
            self.observer(change)
        return change


class AbstractMazeGenerator(_Observable, ABC):
    """Base class for algorithms that carve a maze into an all-wall grid."""

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        observer: Optional[StepObserver] = None,
    ) -> None:
        super().__init__(observer)
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    @abstractmethod
    def carve(self, grid: Grid) -> None:
        """Turn a freshly created grid into a maze in place."""

    def generate(self, rows: int, cols: int) -> Grid:
        """Create a grid of the requested size and carve it."""

        grid = Grid.create(rows, cols)
        self.carve(grid)
        return grid

    def generate_many(self, count: int, rows: int, cols: int) -> List[Grid]:
        """Generate a batch of mazes drawing from the same random source."""

        return [self.generate(rows, cols) for _ in range(count)]


class AbstractMazeSolver(_Observable, ABC):
    """Base class for algorithms that mark a path through a carved grid."""

    @abstractmethod
    def iter_steps(self, grid: Grid) -> Iterator[CellChange]:
        """Yield every state change; the generator returns the finished path."""

    def solve(self, grid: Grid) -> List[Cell]:
        """Run the search to completion and return the path from entrance to exit."""

        steps = self.iter_steps(grid)
        while True:
            try:
                next(steps)
            except StopIteration as done:
                return list(done.value)


__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeSolver",
    "CellChange",
    "StepObserver",
]
