# -*- coding: utf-8 -*-
"""Core data models (grid, player, configuration, status snapshot)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from .constants import (
    MAX_WALL_HITS,
    MAZE_HEIGHT,
    MAZE_WIDTH,
    TIME_LIMIT,
    WALL,
    LossReason,
    Outcome,
)


@dataclass
class Grid:
    """Cell tags over a width x height rectangle, stored row-major."""

    width: int
    height: int
    cells: list[str] = field(default_factory=list)
    start: tuple[int, int] = (1, 1)
    end: tuple[int, int] = (1, 1)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [WALL] * (self.width * self.height)
        if len(self.cells) != self.width * self.height:
            raise ValueError("cell count does not match grid size")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> str:
        return self.cells[y * self.width + x]

    def put(self, x: int, y: int, tag: str) -> None:
        self.cells[y * self.width + x] = tag

    def rows(self) -> list[str]:
        w = self.width
        return ["".join(self.cells[y * w:(y + 1) * w]) for y in range(self.height)]

    def count(self, *tags: str) -> int:
        return sum(1 for c in self.cells if c in tags)


@dataclass
class Player:
    x: int
    y: int


@dataclass
class Settings:
    width: int = MAZE_WIDTH
    height: int = MAZE_HEIGHT
    max_wall_hits: int = MAX_WALL_HITS
    time_limit: float = TIME_LIMIT
    seed: Optional[int] = None

    language: str = "auto"
    colors: Literal["auto", "on", "off"] = "auto"
    unicode: Literal["auto", "on", "off"] = "auto"


@dataclass(frozen=True)
class Status:
    x: int
    y: int
    wall_hits: int
    max_wall_hits: int
    elapsed: float
    remaining: float
    outcome: Outcome
    loss_reason: Optional[LossReason] = None
