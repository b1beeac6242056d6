"""Perfect maze generator using randomized wall removal with component merging."""

from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from ..base import AbstractMazeGenerator
from ..errors import GeneratorStateError, MazeError
from ..grid import Cell, CellState, Grid
from .evaluator import MazeEvaluator
from .render import SolveRecorder, render_grid
from .solver import MazeSolver

logger = logging.getLogger(__name__)

RandomSource = Union[random.Random, int, None]


@dataclass(frozen=True)
class CandidateWall:
    """A wall cell sitting between two adjacent rooms."""

    row: int
    col: int
    room_a: Cell
    room_b: Cell

    @property
    def cell(self) -> Cell:
        return self.row, self.col


def candidate_walls(grid: Grid) -> List[CandidateWall]:
    """List the wall below and the wall to the right of every room, in row-major order."""

    walls: List[CandidateWall] = []
    for row, col in grid.rooms():
        if row < grid.rows - 2:
            walls.append(CandidateWall(row + 1, col, (row, col), (row + 2, col)))
        if col < grid.cols - 2:
            walls.append(CandidateWall(row, col + 1, (row, col), (row, col + 2)))
    return walls


class MazeGenerator(AbstractMazeGenerator):
    """Carve a perfect maze: every room reachable, exactly one route between any two.

    Candidate walls are visited in a shuffled order. A wall is knocked down only
    when the rooms on either side still carry different component labels, after
    which the second room's component is relabelled to match the first.
    """

    def carve(self, grid: Grid) -> None:
        if (grid.to_array() != CellState.WALL).any():
            raise GeneratorStateError("Only a freshly created all-wall grid can be carved")
        labels = np.zeros(grid.dimensions(), dtype=np.int64)
        for label, (row, col) in enumerate(grid.rooms(), start=1):
            labels[row, col] = label

        walls = candidate_walls(grid)
        self._rng.shuffle(walls)
        logger.debug(
            "Carving %dx%d grid: %d rooms, %d candidate walls",
            grid.rows,
            grid.cols,
            grid.room_count,
            len(walls),
        )

        opened = 0
        for wall in walls:
            keep = labels[wall.room_a]
            replace = labels[wall.room_b]
            if keep == replace:
                continue
            labels[labels == replace] = keep
            labels[wall.cell] = keep
            self._apply(grid, wall.row, wall.col, CellState.OPEN)
            opened += 1

        for row, col in grid.rooms():
            self._apply(grid, row, col, CellState.OPEN)

        logger.debug("Opened %d of %d candidate walls", opened, len(walls))


def generate(rows: int, cols: int, random_source: RandomSource = None) -> Grid:
    """Build a perfect maze from a ``random.Random``, an integer seed or fresh entropy."""

    if isinstance(random_source, random.Random):
        return MazeGenerator(rng=random_source).generate(rows, cols)
    return MazeGenerator(seed=random_source).generate(rows, cols)


__all__ = ["CandidateWall", "MazeGenerator", "candidate_walls", "generate"]


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate and solve a perfect maze")
    parser.add_argument("--rows", type=int, default=21)
    parser.add_argument("--cols", type=int, default=21)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-solve", action="store_true", help="Only generate the maze")
    parser.add_argument("--output", type=Path, default=None, help="Save a PNG of the final grid")
    parser.add_argument("--animate", type=Path, default=None, help="Save a GIF of the solver at work")
    parser.add_argument("--cell-size", type=_positive_int, default=8)
    parser.add_argument(
        "--frame-every",
        type=_positive_int,
        default=1,
        help="Capture one animation frame per this many solver steps",
    )
    parser.add_argument("--ascii", action="store_true", help="Print the grid as text")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.no_solve and args.animate is not None:
        parser.error("--animate needs the solver; drop --no-solve")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        grid = MazeGenerator(seed=args.seed).generate(args.rows, args.cols)
        evaluator = MazeEvaluator()
        summary = {
            "rows": grid.rows,
            "cols": grid.cols,
            "seed": args.seed,
            "structure": evaluator.evaluate_structure(grid).to_dict(),
        }

        if not args.no_solve:
            recorder = None
            if args.animate is not None:
                recorder = SolveRecorder(grid, cell_size=args.cell_size, every=args.frame_every)
            path = MazeSolver(observer=recorder).solve(grid)
            summary["path_length"] = len(path)
            summary["path"] = evaluator.evaluate_path(grid, path).to_dict()
            if recorder is not None:
                recorder.save_animation(args.animate)
                logger.info("Wrote %d frames to %s", len(recorder.frames), args.animate)

        if args.output is not None:
            render_grid(grid, cell_size=args.cell_size).save(args.output)
            logger.info("Wrote %s", args.output)
    except MazeError as exc:
        raise SystemExit(f"error: {exc}") from exc

    if args.ascii:
        print(grid)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
