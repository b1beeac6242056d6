"""Maze generation, solving and evaluation package."""

__all__ = [
    "MazeGenerator",
    "MazeSolver",
    "MazeEvaluator",
    "MazeStructureReport",
    "PathEvaluationResult",
    "generate",
    "solve",
    "reset_marks",
]

from .generator import MazeGenerator, generate
from .solver import MazeSolver, solve, reset_marks
from .evaluator import MazeEvaluator, MazeStructureReport, PathEvaluationResult
