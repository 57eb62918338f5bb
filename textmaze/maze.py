"""Maze generation and grid helpers."""

from __future__ import annotations

import logging
import random
from typing import Optional

from .constants import CARVE_STEPS, END, MIN_SIZE, PASSAGE, START, WALL
from .errors import InvalidDimensions
from .models import Grid

logger = logging.getLogger(__name__)


def check_dimensions(width: int, height: int) -> tuple[int, int]:
    """Validate a requested maze size.

    Sizes below ``MIN_SIZE`` are rejected; even sizes are bumped to the next
    odd value. Returns the size to build.
    """
    for v in (width, height):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidDimensions(width, height, "dimensions must be integers")
        if v < MIN_SIZE:
            raise InvalidDimensions(width, height, f"minimum is {MIN_SIZE}")
    return width | 1, height | 1


def generate_maze(
    width: int,
    height: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    width, height = check_dimensions(width, height)
    if rng is None:
        rng = random.Random(seed)

    grid = Grid(width, height)

    sx = rng.randrange(width // 2) * 2 + 1
    sy = rng.randrange(height // 2) * 2 + 1
    _carve(grid, sx, sy, rng)

    grid.start = (1, 1)
    grid.end = (width - 2, height - 2)
    grid.put(*grid.start, START)
    grid.put(*grid.end, END)

    logger.debug(
        "generated %dx%d maze (seed=%s, carve origin=%d,%d, passages=%d)",
        width,
        height,
        seed,
        sx,
        sy,
        grid.count(PASSAGE, START, END),
    )
    return grid


def _shuffled_steps(rng: random.Random) -> list[tuple[int, int]]:
    steps = list(CARVE_STEPS)
    rng.shuffle(steps)
    return steps


def _carve(grid: Grid, x: int, y: int, rng: random.Random) -> None:
    # Each frame holds a cell and the directions it has not tried yet, so the
    # order matches a recursive carve without using the Python call stack.
    grid.put(x, y, PASSAGE)
    stack = [(x, y, _shuffled_steps(rng))]

    while stack:
        cx, cy, steps = stack[-1]
        if not steps:
            stack.pop()
            continue
        dx, dy = steps.pop(0)
        nx, ny = cx + dx, cy + dy
        if 0 < nx < grid.width - 1 and 0 < ny < grid.height - 1 and grid.at(nx, ny) == WALL:
            grid.put(cx + dx // 2, cy + dy // 2, PASSAGE)
            grid.put(nx, ny, PASSAGE)
            stack.append((nx, ny, _shuffled_steps(rng)))
