"""Perfect maze generation and backtracking solving toolkit."""

__all__ = [
    "AbstractMazeGenerator",
    "AbstractMazeSolver",
    "CellChange",
    "Grid",
    "CellState",
    "MazeError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "NoPathFoundError",
    "GeneratorStateError",
    "SolverStateError",
    "MazeGenerator",
    "MazeSolver",
    "MazeEvaluator",
    "MazeStructureReport",
    "PathEvaluationResult",
    "generate",
    "solve",
    "reset_marks",
]

from .base import AbstractMazeGenerator, AbstractMazeSolver, CellChange
from .grid import CellState, Grid
from .errors import (
    MazeError,
    InvalidDimensionError,
    OutOfBoundsError,
    NoPathFoundError,
    GeneratorStateError,
    SolverStateError,
)
from .maze import (
    MazeGenerator,
    MazeSolver,
    MazeEvaluator,
    MazeStructureReport,
    PathEvaluationResult,
    generate,
    solve,
    reset_marks,
)
