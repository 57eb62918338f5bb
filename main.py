#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Random text maze in the terminal.

Rules:
- W/A/S/D or the arrow keys move P one cell.
- Reach E before the time runs out.
- Every wall hit counts; the start cell is sealed once you leave it.
- Q quits with confirmation.

Run:
  python3 main.py

Set TEXTMAZE_LOG=/path/to/file to write a debug log while playing.
TEXTMAZE_LANG (auto/en/zh), TEXTMAZE_COLORS and TEXTMAZE_UNICODE (auto/on/off)
override the detected language, colors and box glyphs.
"""

from textmaze.game import run

if __name__ == "__main__":
    run()
