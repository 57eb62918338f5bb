# -*- coding: utf-8 -*-
"""Direction parsing and key mapping for grid movement."""
from __future__ import annotations

import curses
from typing import Optional

from .constants import Direction
from .errors import InvalidDirection

OFFSETS: dict[str, tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

KEY_DIRECTIONS: dict[int, Direction] = {
    ord("w"): "up",
    ord("W"): "up",
    ord("s"): "down",
    ord("S"): "down",
    ord("a"): "left",
    ord("A"): "left",
    ord("d"): "right",
    ord("D"): "right",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}


def parse_direction(value: object) -> Direction:
    if isinstance(value, str):
        name = value.strip().lower()
        if name in OFFSETS:
            return name  # type: ignore[return-value]
    raise InvalidDirection(value)


def key_to_direction(ch: int) -> Optional[Direction]:
    """Map a curses key code to a direction, or None for any other key."""
    return KEY_DIRECTIONS.get(ch)


def step(x: int, y: int, direction: Direction) -> tuple[int, int]:
    dx, dy = OFFSETS[parse_direction(direction)]
    return x + dx, y + dy
