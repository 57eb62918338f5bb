"""Test configuration.

Pytest sometimes runs with the current working directory set to ``tests/``.
Make sure the project root (and thus the ``textmaze`` package) is importable.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


class FakeScreen:
    """Records addstr calls and replays queued key codes."""

    def __init__(self, keys=(), size=(40, 100)) -> None:
        self.keys = [ord(k) if isinstance(k, str) else k for k in keys]
        self.size = size
        self.writes: list[tuple[int, int, str, int]] = []
        self.refreshes = 0

    def getch(self) -> int:
        if not self.keys:
            raise AssertionError("ran out of scripted keys")
        return self.keys.pop(0)

    def getmaxyx(self) -> tuple[int, int]:
        return self.size

    def addstr(self, y: int, x: int, s: str, attr: int = 0) -> None:
        self.writes.append((y, x, s, attr))

    def erase(self) -> None:
        self.writes.clear()

    def refresh(self) -> None:
        self.refreshes += 1

    def text(self) -> str:
        return "\n".join(s for _y, _x, s, _a in self.writes)


@pytest.fixture
def screen_factory():
    return FakeScreen
