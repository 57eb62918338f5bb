# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations

import curses
import unicodedata


def safe_addstr(stdscr, y: int, x: int, s: str, attr: int = 0) -> None:
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def format_clock(seconds: float) -> str:
    """Format seconds as ``mm:ss``, truncating fractions like a stopwatch."""
    total = int(max(0.0, seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


def display_width(s: str) -> int:
    """Terminal columns taken by ``s``; wide and fullwidth characters count 2."""
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in s)


def fit_width(s: str, cols: int) -> str:
    """Cut ``s`` so it takes at most ``cols`` terminal columns."""
    used = 0
    for i, ch in enumerate(s):
        used += display_width(ch)
        if used > cols:
            return s[:i]
    return s
