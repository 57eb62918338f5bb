# -*- coding: utf-8 -*-
"""UI helpers: prompts, instruction screen, key reading, result screen."""
from __future__ import annotations

import curses
import time
from typing import Callable, List, Optional

from .constants import COLLISION_DELAY, Direction
from .movement import key_to_direction
from .state import GameState
from .style import Style, draw_box
from .util import display_width, fit_width, format_clock, safe_addstr


def confirm_yes_no(stdscr, tr: Callable[[str], str], prompt_key: str) -> bool:
    prompt = tr(prompt_key)
    h, w = stdscr.getmaxyx()
    line = tr("prompt_yes_no", prompt=prompt)
    safe_addstr(stdscr, h - 1, 0, line[: max(0, w - 1)], curses.A_REVERSE)
    stdscr.refresh()

    while True:
        ch = stdscr.getch()
        if ch in (ord("y"), ord("Y")):
            return True
        if ch in (ord("n"), ord("N")):
            return False


def read_direction(stdscr, tr: Callable[[str], str]) -> Optional[Direction]:
    """Block until a direction key arrives.

    Other keys are dropped. Returns None when the player confirms quitting.
    """
    while True:
        ch = stdscr.getch()
        direction = key_to_direction(ch)
        if direction is not None:
            return direction
        if ch in (ord("q"), ord("Q")) and confirm_yes_no(stdscr, tr, "prompt_exit"):
            return None


def collision_feedback(delay: float = COLLISION_DELAY) -> None:
    try:
        curses.beep()
    except curses.error:
        pass
    time.sleep(delay)


def _panel(stdscr, style: Style, lines: List[str]) -> None:
    stdscr.erase()
    h, w = stdscr.getmaxyx()

    box_w = min(w - 2, max(display_width(s) for s in lines) + 6)
    box_h = len(lines) + 4
    if box_w < 8 or box_h > h:
        for i, msg in enumerate(lines[:h]):
            safe_addstr(stdscr, i, 0, fit_width(msg, w - 1))
        stdscr.refresh()
        return

    box_x = (w - box_w) // 2
    box_y = (h - box_h) // 2
    draw_box(stdscr, box_y, box_x, box_h, box_w, style.unicode_ok, style.hud_attr())
    for i, msg in enumerate(lines):
        attr = curses.A_BOLD if i == 0 else curses.A_NORMAL
        safe_addstr(stdscr, box_y + 2 + i, box_x + 3, fit_width(msg, box_w - 6), attr)
    stdscr.refresh()


def intro_screen(stdscr, tr: Callable[[str], str], style: Style, state: GameState) -> None:
    lines = [
        tr("intro_title"),
        "",
        tr("intro_controls"),
        tr("intro_legend"),
        tr("intro_limits", hits=state.max_wall_hits, minutes=state.time_limit / 60.0),
        "",
        tr("intro_press_key"),
    ]
    _panel(stdscr, style, lines)
    stdscr.getch()


def result_lines(tr: Callable[[str], str], state: GameState, abandoned: bool = False) -> List[str]:
    status = state.status()
    hits = dict(hits=status.wall_hits, max_hits=status.max_wall_hits)

    if abandoned and status.outcome == "unresolved":
        return [tr("quit_title"), tr("win_hits", **hits)]
    if status.outcome == "won":
        return [
            tr("win_title"),
            tr("win_time", clock=format_clock(status.elapsed)),
            tr("win_hits", **hits),
        ]
    if status.loss_reason == "hits_exceeded":
        detail = tr("lose_hits", **hits)
    else:
        detail = tr(
            "lose_time",
            clock=format_clock(status.elapsed),
            limit=format_clock(state.time_limit),
        )
    return [tr("lose_title"), detail]


def result_screen(
    stdscr, tr: Callable[[str], str], style: Style, state: GameState, abandoned: bool = False
) -> None:
    lines = result_lines(tr, state, abandoned)
    lines += ["", tr("result_press_key")]
    _panel(stdscr, style, lines)
    stdscr.getch()
