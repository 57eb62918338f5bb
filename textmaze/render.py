# -*- coding: utf-8 -*-
"""Board and status rendering."""
from __future__ import annotations

from typing import Callable, List, Tuple

from .models import Status
from .state import GameState
from .style import Style
from .util import fit_width, format_clock, safe_addstr


def row_runs(row: str, style: Style) -> List[Tuple[str, int]]:
    """Split a grid row into (text, attr) runs so each run is one addstr call."""
    runs: List[Tuple[str, int]] = []
    buf: list[str] = []
    cur_attr = None
    for tag in row:
        attr = style.cell_attr(tag)
        if cur_attr is not None and attr != cur_attr:
            runs.append(("".join(buf), cur_attr))
            buf = []
        cur_attr = attr
        buf.append(style.cell_text(tag))
    if buf:
        runs.append(("".join(buf), cur_attr))
    return runs


def status_lines(tr: Callable[[str], str], status: Status) -> List[str]:
    return [
        tr("status_position", x=status.x, y=status.y),
        tr("status_hits", hits=status.wall_hits, max_hits=status.max_wall_hits),
        tr("status_time", clock=format_clock(status.remaining)),
        tr("status_keys"),
    ]


def render_board(stdscr, tr: Callable[[str], str], state: GameState, style: Style) -> None:
    stdscr.erase()
    h, w = stdscr.getmaxyx()

    rows = state.snapshot()
    lines = status_lines(tr, state.status())
    need_h = len(rows) + 1 + len(lines)
    need_w = state.grid.width * 2 + 1
    if h < need_h or w < need_w:
        safe_addstr(stdscr, 0, 0, fit_width(tr("msg_too_small"), w - 1))
        stdscr.refresh()
        return

    for y, row in enumerate(rows):
        x = 0
        for text, attr in row_runs(row, style):
            safe_addstr(stdscr, y, x, text, attr)
            x += len(text)

    hud_attr = style.hud_attr()
    top = len(rows) + 1
    for i, line in enumerate(lines):
        safe_addstr(stdscr, top + i, 0, fit_width(line, w - 1), hud_attr)

    stdscr.refresh()
