"""Pillow rendering of maze grids and solver animations."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from ..base import CellChange
from ..grid import Cell, CellState, Grid

STATE_COLORS: Dict[CellState, Tuple[int, int, int]] = {
    CellState.WALL: (0, 0, 0),
    CellState.OPEN: (255, 255, 255),
    CellState.ON_PATH: (255, 0, 0),
    CellState.DEAD: (255, 255, 0),
}
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
LINE_COLOR = (0, 90, 220)


def render_grid(
    grid: Grid,
    *,
    cell_size: int = 8,
    path: Optional[Sequence[Cell]] = None,
) -> Image.Image:
    """Draw every cell as a ``cell_size`` square, optionally tracing ``path`` on top."""

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    rows, cols = grid.dimensions()
    canvas = Image.new("RGB", (cols * cell_size, rows * cell_size), STATE_COLORS[CellState.WALL])
    draw = ImageDraw.Draw(canvas)

    for r in range(rows):
        for c in range(cols):
            state = grid.cell_state(r, c)
            if state == CellState.WALL:
                continue
            _fill_cell(draw, (r, c), cell_size, STATE_COLORS[state])

    for cell, color in ((grid.entrance, START_COLOR), (grid.exit, GOAL_COLOR)):
        if grid.in_bounds(*cell) and grid.cell_state(*cell) == CellState.OPEN:
            _fill_cell(draw, cell, cell_size, color)

    if path:
        thickness = max(1, cell_size // 3)
        points = [
            (c * cell_size + cell_size / 2, r * cell_size + cell_size / 2) for r, c in path
        ]
        if len(points) >= 2:
            draw.line(points, fill=LINE_COLOR, width=thickness, joint="curve")
        else:
            x, y = points[0]
            draw.ellipse(
                (x - thickness / 2, y - thickness / 2, x + thickness / 2, y + thickness / 2),
                fill=LINE_COLOR,
            )
    return canvas


def _fill_cell(
    draw: ImageDraw.ImageDraw,
    cell: Cell,
    cell_size: int,
    color: Tuple[int, int, int],
) -> None:
    r, c = cell
    left = c * cell_size
    top = r * cell_size
    draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=color)


class SolveRecorder:
    """Solver observer that snapshots the grid every ``every`` state changes."""

    def __init__(self, grid: Grid, *, cell_size: int = 8, every: int = 1) -> None:
        if every <= 0:
            raise ValueError("every must be positive")
        self.grid = grid
        self.cell_size = cell_size
        self.every = every
        self.frames: List[Image.Image] = []
        self._changes = 0

    def __call__(self, change: CellChange) -> None:
        self._changes += 1
        if self._changes % self.every == 0:
            self.frames.append(render_grid(self.grid, cell_size=self.cell_size))

    def save_animation(self, path: Union[str, Path], *, duration: int = 60) -> None:
        """Write the captured frames plus the final state as an animated GIF."""

        frames = list(self.frames)
        frames.append(render_grid(self.grid, cell_size=self.cell_size))
        first, rest = frames[0], frames[1:]
        first.save(
            Path(path),
            save_all=True,
            append_images=rest,
            duration=duration,
            loop=0,
        )


__all__ = ["GOAL_COLOR", "START_COLOR", "STATE_COLORS", "SolveRecorder", "render_grid"]
