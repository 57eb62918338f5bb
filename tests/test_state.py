import logging

import pytest

from textmaze.constants import END, PASSAGE, PLAYER, START, WALL
from textmaze.errors import InvalidDirection, SessionClosed
from textmaze.maze import generate_maze
from textmaze.models import Grid
from textmaze.state import GameState

CORRIDOR = [
    "#######",
    "#S    #",
    "##### #",
    "#E    #",
    "#######",
]

TO_EXIT = ["right"] * 4 + ["down"] * 2 + ["left"] * 4


def make_grid(rows: list[str]) -> Grid:
    width, height = len(rows[0]), len(rows)
    cells = list("".join(rows))
    start = end = (0, 0)
    for i, tag in enumerate(cells):
        if tag == START:
            start = (i % width, i // width)
        elif tag == END:
            end = (i % width, i // width)
    return Grid(width, height, cells, start=start, end=end)


def new_state(clock, rows=CORRIDOR, max_wall_hits=3, time_limit=60.0) -> GameState:
    return GameState(make_grid(rows), max_wall_hits, time_limit, clock=clock)


def test_initial_state(clock) -> None:
    state = new_state(clock)

    assert (state.player.x, state.player.y) == (1, 1)
    assert state.grid.at(1, 1) == PLAYER
    assert state.wall_hits == 0
    assert state.outcome == "unresolved"
    assert state.check_outcome() == "unresolved"
    assert state.elapsed() == 0.0
    assert state.remaining() == 60.0
    assert not state.clock_started


def test_move_into_passage(clock) -> None:
    state = new_state(clock)

    assert state.attempt_move("right") == "moved"
    assert (state.player.x, state.player.y) == (2, 1)
    assert state.grid.at(2, 1) == PLAYER
    assert state.wall_hits == 0
    # Leaving the start uncovers the start tag, not a passage.
    assert state.grid.at(1, 1) == START
    assert state.grid.count(PLAYER) == 1


def test_overlay_restores_passage(clock) -> None:
    state = new_state(clock)
    state.attempt_move("right")
    state.attempt_move("right")
    assert state.grid.at(2, 1) == PASSAGE
    assert state.grid.at(3, 1) == PLAYER


@pytest.mark.parametrize("direction", ["up", "down", "left"])
def test_wall_collision_keeps_position(clock, direction: str) -> None:
    state = new_state(clock)

    assert state.attempt_move(direction) == "collision"
    assert (state.player.x, state.player.y) == (1, 1)
    assert state.wall_hits == 1
    assert state.grid.at(1, 1) == PLAYER


def test_start_cell_is_sealed_after_leaving(clock) -> None:
    state = new_state(clock)
    state.attempt_move("right")

    assert state.attempt_move("left") == "collision"
    assert (state.player.x, state.player.y) == (2, 1)
    assert state.wall_hits == 1
    assert state.grid.at(1, 1) == START


def test_out_of_bounds_counts_as_wall(clock) -> None:
    state = new_state(clock, rows=["S E"])

    assert state.attempt_move("left") == "collision"
    assert state.attempt_move("up") == "collision"
    assert (state.player.x, state.player.y) == (0, 0)
    assert state.wall_hits == 2


def test_reaching_exit_wins(clock) -> None:
    state = new_state(clock)
    state.start_clock()

    for d in TO_EXIT:
        assert state.attempt_move(d) == "moved"

    assert (state.player.x, state.player.y) == state.grid.end
    assert state.outcome == "won"
    assert state.check_outcome() == "won"
    assert state.loss_reason() is None
    assert state.wall_hits == 0


def test_moves_after_win_are_rejected(clock) -> None:
    state = new_state(clock)
    for d in TO_EXIT:
        state.attempt_move(d)

    with pytest.raises(SessionClosed):
        state.attempt_move("right")
    assert state.wall_hits == 0


def test_losing_on_wall_hits(clock) -> None:
    state = new_state(clock, max_wall_hits=3)
    state.start_clock()

    state.attempt_move("up")
    state.attempt_move("up")
    assert state.check_outcome() == "unresolved"

    assert state.attempt_move("up") == "collision"
    assert state.wall_hits == 3
    assert state.outcome == "lost"
    assert state.loss_reason() == "hits_exceeded"

    with pytest.raises(SessionClosed):
        state.attempt_move("right")
    assert state.wall_hits == 3


def test_losing_on_time(clock) -> None:
    state = new_state(clock, time_limit=60.0)
    state.start_clock()

    clock.advance(59.5)
    assert state.evaluate() == "unresolved"
    assert state.remaining() == pytest.approx(0.5)

    clock.advance(0.5)
    assert state.check_outcome() == "lost"
    assert state.loss_reason() == "time_exceeded"
    assert state.evaluate() == "lost"
    assert state.remaining() == 0.0


def test_time_loss_regardless_of_hits(clock) -> None:
    state = new_state(clock, max_wall_hits=3)
    state.start_clock()
    state.attempt_move("up")
    state.attempt_move("up")

    clock.advance(61.0)
    assert state.evaluate() == "lost"
    assert state.loss_reason() == "time_exceeded"


def test_hits_reported_before_time_when_both_apply(clock) -> None:
    state = new_state(clock, max_wall_hits=1)
    state.start_clock()
    clock.advance(120.0)
    # The move itself is processed before the turn's outcome is checked.
    state.attempt_move("up")
    assert state.outcome == "lost"
    assert state.loss_reason() == "hits_exceeded"


def test_win_beats_time_on_the_same_turn(clock) -> None:
    state = new_state(clock)
    state.start_clock()

    for d in TO_EXIT[:-1]:
        state.attempt_move(d)
    clock.advance(75.0)
    assert state.check_outcome() == "lost"

    assert state.attempt_move(TO_EXIT[-1]) == "moved"
    assert state.outcome == "won"


def test_check_outcome_does_not_latch(clock) -> None:
    state = new_state(clock)
    state.start_clock()
    clock.advance(60.0)

    assert state.check_outcome() == "lost"
    assert state.check_outcome() == "lost"
    assert state.outcome == "unresolved"
    assert state.attempt_move("right") == "moved"
    assert state.outcome == "lost"


def test_clock_only_runs_after_start(clock) -> None:
    state = new_state(clock)
    clock.advance(1000.0)
    assert state.elapsed() == 0.0
    assert state.evaluate() == "unresolved"

    state.start_clock()
    clock.advance(5.0)
    assert state.elapsed() == pytest.approx(5.0)

    # A second start does not reset the clock.
    state.start_clock()
    clock.advance(5.0)
    assert state.elapsed() == pytest.approx(10.0)


def test_clock_freezes_when_decided(clock) -> None:
    state = new_state(clock)
    state.start_clock()
    clock.advance(12.0)
    for d in TO_EXIT:
        state.attempt_move(d)

    clock.advance(100.0)
    assert state.elapsed() == pytest.approx(12.0)
    assert state.outcome == "won"


def test_invalid_direction(clock) -> None:
    state = new_state(clock)
    with pytest.raises(InvalidDirection):
        state.attempt_move("north")
    assert state.wall_hits == 0
    assert (state.player.x, state.player.y) == (1, 1)


def test_direction_names_are_case_insensitive(clock) -> None:
    state = new_state(clock)
    assert state.attempt_move("RIGHT") == "moved"


def test_status_snapshot(clock) -> None:
    state = new_state(clock, max_wall_hits=5, time_limit=90.0)
    state.start_clock()
    state.attempt_move("up")
    clock.advance(30.0)

    status = state.status()
    assert (status.x, status.y) == (1, 1)
    assert status.wall_hits == 1
    assert status.max_wall_hits == 5
    assert status.elapsed == pytest.approx(30.0)
    assert status.remaining == pytest.approx(60.0)
    assert status.outcome == "unresolved"
    assert status.loss_reason is None


def test_snapshot_shows_player(clock) -> None:
    state = new_state(clock)
    state.attempt_move("right")
    assert state.snapshot()[1] == "#SP   #"


@pytest.mark.parametrize("max_wall_hits,time_limit", [(0, 60.0), (3, 0.0), (3, -1.0)])
def test_bad_limits_are_rejected(clock, max_wall_hits: int, time_limit: float) -> None:
    with pytest.raises(ValueError):
        new_state(clock, max_wall_hits=max_wall_hits, time_limit=time_limit)


def test_hit_counting_on_generated_maze(clock) -> None:
    grid = generate_maze(9, 9, seed=42)
    state = GameState(grid, max_wall_hits=10, clock=clock)

    for d, (dx, dy) in {"up": (0, -1), "left": (-1, 0), "down": (0, 1), "right": (1, 0)}.items():
        x, y = state.player.x, state.player.y
        target = grid.at(x + dx, y + dy)
        hits = state.wall_hits
        result = state.attempt_move(d)
        if target in (PASSAGE, END):
            assert result == "moved"
            assert (state.player.x, state.player.y) == (x + dx, y + dy)
            assert state.wall_hits == hits
        else:
            assert target in (WALL, START)
            assert result == "collision"
            assert (state.player.x, state.player.y) == (x, y)
            assert state.wall_hits == hits + 1
        if state.finished:
            break


def test_moves_and_collisions_are_logged(clock, caplog) -> None:
    state = new_state(clock)
    with caplog.at_level(logging.DEBUG, logger="textmaze.state"):
        state.attempt_move("right")
        state.attempt_move("up")

    messages = [r.getMessage() for r in caplog.records]
    assert "moved right to 2,1" in messages
    assert any(m.startswith("collision moving up from 2,1") for m in messages)
