# -*- coding: utf-8 -*-
"""Localization utilities (English + Traditional Chinese)."""
from __future__ import annotations

import locale
import os
from typing import Callable, Dict


LOCALES: Dict[str, Dict[str, str]] = {
    "en": {
        "msg_too_small": "Terminal too small. Enlarge it.",

        "prompt_yes_no": "{prompt} Y/N ",
        "prompt_exit": "Give up and exit?",

        "intro_title": "Welcome to the random maze!",
        "intro_controls": "Move with W/A/S/D or the arrow keys. P is you.",
        "intro_legend": "# is a wall, E is the exit. The start is sealed once you leave it.",
        "intro_limits": "You may hit a wall at most {hits} times, time limit {minutes:g} min.",
        "intro_press_key": "Press any key to start...",

        "status_position": "Position: ({x}, {y})",
        "status_hits": "Wall hits: {hits}/{max_hits}",
        "status_time": "Time left: {clock}",
        "status_keys": "W/A/S/D or arrows: move   Q: quit",

        "win_title": "Congratulations, you won!",
        "win_time": "Time used: {clock}",
        "win_hits": "Wall hits: {hits}/{max_hits}",

        "lose_title": "Game over, you lost!",
        "lose_hits": "Too many wall hits: {hits}/{max_hits}",
        "lose_time": "Out of time: {clock}/{limit}",

        "quit_title": "Maze abandoned.",
        "result_press_key": "Press any key to exit...",
    },
    "zh": {
        "msg_too_small": "終端機視窗太小，請放大。",

        "prompt_yes_no": "{prompt} Y/N ",
        "prompt_exit": "放棄並離開遊戲？",

        "intro_title": "歡迎來到隨機迷宮遊戲！",
        "intro_controls": "使用 W/A/S/D 或方向鍵移動，P 是你的位置",
        "intro_legend": "# 是牆壁，E 是終點，離開起點後就不能再回去",
        "intro_limits": "最多只能撞牆 {hits} 次，限時 {minutes:g} 分鐘",
        "intro_press_key": "按任意鍵開始遊戲...",

        "status_position": "目前位置: ({x}, {y})",
        "status_hits": "撞牆次數: {hits}/{max_hits}",
        "status_time": "剩餘時間: {clock}",
        "status_keys": "W/A/S/D 或方向鍵: 移動   Q: 離開",

        "win_title": "恭喜你贏了！",
        "win_time": "用時: {clock}",
        "win_hits": "撞牆次數: {hits}/{max_hits}",

        "lose_title": "遊戲結束，你輸了！",
        "lose_hits": "撞牆次數超過限制: {hits}/{max_hits}",
        "lose_time": "時間用完: {clock}/{limit}",

        "quit_title": "已放棄迷宮。",
        "result_press_key": "按任意鍵退出...",
    },
}


def detect_language() -> str:
    """Pick a locale table from the environment, falling back to English."""
    candidates = [os.environ.get(k) or "" for k in ("LC_ALL", "LC_MESSAGES", "LANG")]
    try:
        candidates.append(locale.getlocale()[0] or "")
    except ValueError:
        pass
    for name in candidates:
        code = name.split(".")[0].split("_")[0].lower()
        if code in LOCALES:
            return code
    return "en"


def resolve_language(lang: str) -> str:
    if lang == "auto":
        return detect_language()
    return lang if lang in LOCALES else "en"


def make_tr(lang: str) -> Callable[[str], str]:
    def tr(key: str, **kwargs) -> str:
        table = LOCALES.get(lang) or LOCALES["en"]
        s = table.get(key) or LOCALES["en"].get(key) or key
        if kwargs:
            try:
                return s.format(**kwargs)
            except (KeyError, IndexError, ValueError):
                return s
        return s
    return tr
