# -*- coding: utf-8 -*-
"""Game session state: player movement, wall hits, clock and outcome.

The session is turn based. The outer loop calls :meth:`GameState.evaluate`
once per turn and :meth:`GameState.attempt_move` once per directional key.
The clock is only polled at those points, so a session can run past the time
limit by up to one blocking key wait before the loss is noticed.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Optional

from .constants import (
    END,
    MAX_WALL_HITS,
    PASSAGE,
    PLAYER,
    TIME_LIMIT,
    LossReason,
    MoveResult,
    Outcome,
)
from .errors import SessionClosed
from .models import Grid, Player, Status
from .movement import parse_direction, step
from .util import clamp

logger = logging.getLogger(__name__)

# Tags the player may step onto. START is left out on purpose: once the
# player has left it, walking back in counts as a wall hit.
WALKABLE = (PASSAGE, END)


class GameState:
    def __init__(
        self,
        grid: Grid,
        max_wall_hits: int = MAX_WALL_HITS,
        time_limit: float = TIME_LIMIT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_wall_hits < 1:
            raise ValueError("max_wall_hits must be at least 1")
        if time_limit <= 0:
            raise ValueError("time_limit must be positive")

        self.grid = grid
        self.max_wall_hits = max_wall_hits
        self.time_limit = float(time_limit)
        self._clock = clock

        self.wall_hits = 0
        self.outcome: Outcome = "unresolved"
        self._loss_reason: Optional[LossReason] = None
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

        sx, sy = grid.start
        self.player = Player(sx, sy)
        # Tag hidden under the player overlay, restored when the player leaves.
        self._under = grid.at(sx, sy)
        grid.put(sx, sy, PLAYER)

    # ----- clock -----

    def start_clock(self) -> None:
        if self._started_at is None and self.outcome == "unresolved":
            self._started_at = self._clock()

    @property
    def clock_started(self) -> bool:
        return self._started_at is not None

    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return max(0.0, end - self._started_at)

    def remaining(self) -> float:
        return clamp(self.time_limit - self.elapsed(), 0.0, self.time_limit)

    # ----- moves -----

    def attempt_move(self, direction: str) -> MoveResult:
        if self.outcome != "unresolved":
            raise SessionClosed(f"game already {self.outcome}")

        d = parse_direction(direction)
        nx, ny = step(self.player.x, self.player.y, d)

        if not self.grid.in_bounds(nx, ny) or self.grid.at(nx, ny) not in WALKABLE:
            self.wall_hits += 1
            logger.debug(
                "collision moving %s from %d,%d (hits %d/%d)",
                d,
                self.player.x,
                self.player.y,
                self.wall_hits,
                self.max_wall_hits,
            )
            result: MoveResult = "collision"
        else:
            self.grid.put(self.player.x, self.player.y, self._under)
            self._under = self.grid.at(nx, ny)
            self.player.x, self.player.y = nx, ny
            self.grid.put(nx, ny, PLAYER)
            logger.debug("moved %s to %d,%d", d, nx, ny)
            result = "moved"

        self.evaluate()
        return result

    # ----- outcome -----

    def _live_outcome(self) -> tuple[Outcome, Optional[LossReason]]:
        # Win first: reaching the exit on the turn the time runs out still wins.
        if (self.player.x, self.player.y) == self.grid.end:
            return "won", None
        if self.wall_hits >= self.max_wall_hits:
            return "lost", "hits_exceeded"
        if self._started_at is not None and self.elapsed() >= self.time_limit:
            return "lost", "time_exceeded"
        return "unresolved", None

    def check_outcome(self) -> Outcome:
        if self.outcome != "unresolved":
            return self.outcome
        return self._live_outcome()[0]

    def loss_reason(self) -> Optional[LossReason]:
        if self.outcome != "unresolved":
            return self._loss_reason
        return self._live_outcome()[1]

    def evaluate(self) -> Outcome:
        """Check the outcome and latch it if the game has been decided."""
        if self.outcome != "unresolved":
            return self.outcome

        outcome, reason = self._live_outcome()
        if outcome != "unresolved":
            self._stopped_at = self._clock() if self._started_at is not None else None
            self.outcome = outcome
            self._loss_reason = reason
            logger.info(
                "game %s (reason=%s, hits=%d/%d, elapsed=%.1fs)",
                outcome,
                reason,
                self.wall_hits,
                self.max_wall_hits,
                self.elapsed(),
            )
        return self.outcome

    @property
    def finished(self) -> bool:
        return self.outcome != "unresolved"

    # ----- snapshots for renderers -----

    def snapshot(self) -> list[str]:
        return self.grid.rows()

    def status(self) -> Status:
        return Status(
            x=self.player.x,
            y=self.player.y,
            wall_hits=self.wall_hits,
            max_wall_hits=self.max_wall_hits,
            elapsed=self.elapsed(),
            remaining=self.remaining(),
            outcome=self.check_outcome(),
            loss_reason=self.loss_reason(),
        )
