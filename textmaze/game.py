"""Main game loop and curses entrypoint.

Each turn runs three steps:
- render: draw the board and the status block
- evaluate: latch a win or loss (time is only checked here and after moves)
- input: block for one direction key and apply it
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Optional

import curses
import locale
import logging
import os

from .i18n import LOCALES, make_tr, resolve_language
from .maze import generate_maze
from .models import Settings
from .render import render_board
from .state import GameState
from .style import effective_style, init_style
from .ui import collision_feedback, intro_screen, read_direction, result_screen

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(path: Optional[str] = None, level: Optional[str] = None) -> None:
    """Send log records to a file.

    curses owns the terminal, so nothing is logged unless ``TEXTMAZE_LOG``
    (or ``path``) names a file.
    """
    path = path or os.environ.get("TEXTMAZE_LOG")
    if not path:
        logging.getLogger("textmaze").addHandler(logging.NullHandler())
        return

    level_name = (level or os.environ.get("TEXTMAZE_LOG_LEVEL") or "INFO").upper()
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("textmaze")
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.addHandler(handler)


ENV_CHOICES = {
    "language": ("TEXTMAZE_LANG", ("auto",) + tuple(LOCALES)),
    "colors": ("TEXTMAZE_COLORS", ("auto", "on", "off")),
    "unicode": ("TEXTMAZE_UNICODE", ("auto", "on", "off")),
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from the defaults plus ``TEXTMAZE_LANG``,
    ``TEXTMAZE_COLORS`` and ``TEXTMAZE_UNICODE``. Unknown values keep "auto".
    """
    environ = os.environ if environ is None else environ
    settings = Settings()
    for field_name, (var, choices) in ENV_CHOICES.items():
        value = (environ.get(var) or "").strip().lower()
        if not value:
            continue
        if value not in choices:
            logger.warning("ignoring %s=%r (expected one of %s)", var, value, ", ".join(choices))
            continue
        setattr(settings, field_name, value)
    return settings


def new_session(settings: Settings) -> GameState:
    grid = generate_maze(settings.width, settings.height, seed=settings.seed)
    return GameState(grid, settings.max_wall_hits, settings.time_limit)


def play(stdscr, state: GameState, style, tr) -> bool:
    """Run turns until the game is decided. Returns False if the player quit."""
    state.start_clock()
    logger.info("clock started (limit %.0fs, max hits %d)", state.time_limit, state.max_wall_hits)

    while True:
        render_board(stdscr, tr, state, style)
        if state.evaluate() != "unresolved":
            return True

        direction = read_direction(stdscr, tr)
        if direction is None:
            logger.info("player quit after %.1fs", state.elapsed())
            return False

        if state.attempt_move(direction) == "collision":
            collision_feedback()


def main(stdscr, settings: Optional[Settings] = None) -> None:
    # curses setup
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    curses.noecho()
    curses.cbreak()
    stdscr.nodelay(False)

    settings = settings or load_settings()
    style = effective_style(init_style(stdscr), settings)
    tr = make_tr(resolve_language(settings.language))

    state = new_session(settings)

    intro_screen(stdscr, tr, style, state)
    finished = play(stdscr, state, style, tr)
    result_screen(stdscr, tr, style, state, abandoned=not finished)


def run() -> None:
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    configure_logging()
    curses.wrapper(main)
