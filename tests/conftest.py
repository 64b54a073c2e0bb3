"""Shared fixtures for the vibe test suite."""

import heapq
import itertools
import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from vibe import config
from vibe.debug_logger import DebugLogger


@pytest.fixture(autouse=True)
def reset_debug_logger():
    """Reset the singleton logger before and after each test."""
    DebugLogger._instance = None
    yield
    instance = DebugLogger._instance
    if instance is not None:
        instance.close()
    DebugLogger._instance = None


@pytest.fixture(autouse=True)
def unseeded_random(monkeypatch):
    """Keep VIBE_RANDOM_SEED from the developer's shell out of the tests."""
    monkeypatch.setattr(config, "RANDOM_SEED", None)


class FakeTimer:
    """Handle returned by FakeScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Scheduler with a manually advanced clock, kept in milliseconds."""

    def __init__(self):
        self.now = 0.0
        self.timers: List[FakeTimer] = []
        self._queue: List[Tuple[float, int, FakeTimer]] = []
        self._counter = itertools.count()

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + round(delay * 1000.0, 6), callback)
        self.timers.append(timer)
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    def advance(self, milliseconds: float) -> None:
        target = self.now + milliseconds
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            self.now = due
            if not timer.cancelled:
                timer.callback()
        self.now = target

    @property
    def active(self) -> List[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and t.due > self.now]


@pytest.fixture
def fake_scheduler() -> FakeScheduler:
    return FakeScheduler()
