# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the text maze."""
from __future__ import annotations

from typing import Literal

# ----- Cell tags -----
WALL = "#"
PASSAGE = " "
START = "S"
END = "E"
PLAYER = "P"

# ----- Maze size (odd so walls and passages alternate) -----
MIN_SIZE = 5
MAZE_WIDTH = 21
MAZE_HEIGHT = 15

# Two-step carving directions: up, right, down, left
CARVE_STEPS = ((0, -2), (2, 0), (0, 2), (-2, 0))

# ----- Session rules -----
MAX_WALL_HITS = 3
TIME_LIMIT = 60.0  # seconds
COLLISION_DELAY = 0.2  # seconds, pause after the bell

Direction = Literal["up", "down", "left", "right"]
MoveResult = Literal["moved", "collision"]
Outcome = Literal["unresolved", "won", "lost"]
LossReason = Literal["hits_exceeded", "time_exceeded"]
