"""Terminal capabilities and styling (unicode, colors, cell glyphs)."""

from __future__ import annotations

import curses
import locale
import os
import sys
from dataclasses import dataclass

from .constants import END, PASSAGE, PLAYER, WALL
from .models import Settings
from .util import safe_addstr


@dataclass
class Style:
    unicode_ok: bool
    colors_ok: bool
    wall_pair: int = 0
    player_pair: int = 0
    end_pair: int = 0
    hud_pair: int = 0

    def cell_text(self, tag: str) -> str:
        """Each cell is drawn two columns wide."""
        if tag == WALL:
            return "██" if self.unicode_ok else "# "
        if tag == PASSAGE:
            return "  "
        return tag + " "

    def cell_attr(self, tag: str) -> int:
        if tag == PLAYER:
            return self._pair(self.player_pair) | curses.A_BOLD
        if tag == END:
            return self._pair(self.end_pair) | curses.A_BOLD
        return self._pair(self.wall_pair)

    def hud_attr(self) -> int:
        return self._pair(self.hud_pair) | curses.A_BOLD

    def _pair(self, pid: int) -> int:
        if not self.colors_ok or not pid:
            return curses.A_NORMAL
        return curses.color_pair(pid)


def init_style(stdscr) -> Style:
    unicode_ok = prefer_utf8()
    colors_ok = False

    if curses.has_colors():
        try:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            colors_ok = True
        except curses.error:
            colors_ok = False

    style = Style(unicode_ok=unicode_ok, colors_ok=colors_ok)
    if not colors_ok:
        return style

    pairs = getattr(curses, "COLOR_PAIRS", 0) or 0

    def safe_init_pair(pid: int, fg: int) -> int:
        if pid >= pairs:
            return 0
        try:
            curses.init_pair(pid, fg, -1)
            return pid
        except curses.error:
            return 0

    style.wall_pair = safe_init_pair(1, curses.COLOR_WHITE)
    style.player_pair = safe_init_pair(2, curses.COLOR_YELLOW)
    style.end_pair = safe_init_pair(3, curses.COLOR_RED)
    style.hud_pair = safe_init_pair(4, curses.COLOR_WHITE)
    return style


def effective_style(base: Style, settings: Settings) -> Style:
    unicode_ok = base.unicode_ok
    if settings.unicode == "on":
        unicode_ok = True
    elif settings.unicode == "off":
        unicode_ok = False

    colors_ok = base.colors_ok and settings.colors != "off"

    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        wall_pair=base.wall_pair if colors_ok else 0,
        player_pair=base.player_pair if colors_ok else 0,
        end_pair=base.end_pair if colors_ok else 0,
        hud_pair=base.hud_pair if colors_ok else 0,
    )


def prefer_utf8() -> bool:
    enc = (
        (sys.stdout.encoding or "")
        + "|"
        + locale.getpreferredencoding(False)
        + "|"
        + (os.environ.get("LC_ALL") or "")
        + "|"
        + (os.environ.get("LANG") or "")
    ).upper()
    return ("UTF-8" in enc) or ("UTF8" in enc)


def box_chars(unicode_ok: bool):
    if unicode_ok:
        return {"tl": "┌", "tr": "┐", "bl": "└", "br": "┘", "h": "─", "v": "│"}
    return {"tl": "+", "tr": "+", "bl": "+", "br": "+", "h": "-", "v": "|"}


def draw_box(stdscr, y: int, x: int, h: int, w: int, unicode_ok: bool, attr: int = 0) -> None:
    bc = box_chars(unicode_ok)
    safe_addstr(stdscr, y, x, bc["tl"] + bc["h"] * (w - 2) + bc["tr"], attr)
    for yy in range(y + 1, y + h - 1):
        safe_addstr(stdscr, yy, x, bc["v"], attr)
        safe_addstr(stdscr, yy, x + w - 1, bc["v"], attr)
    safe_addstr(stdscr, y + h - 1, x, bc["bl"] + bc["h"] * (w - 2) + bc["br"], attr)
