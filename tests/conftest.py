from __future__ import annotations

import os
import random
from pathlib import Path

# pygame must never open a real window or audio device under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from snake.clock import TickClock  # noqa: E402
from snake.config import Config  # noqa: E402
from snake.session import GameSession  # noqa: E402


class FakeTimer:
    """Stands in for pygame.time.set_timer and records every call."""

    def __init__(self):
        self.calls: list[tuple[int, int]] = []
        self.active: dict[int, int] = {}

    def __call__(self, event_type: int, millis: int) -> None:
        self.calls.append((event_type, millis))
        if millis:
            self.active[event_type] = millis
        else:
            self.active.pop(event_type, None)


class FakeSound:
    def __init__(self):
        self.played: list[str] = []

    def play(self, cue: str) -> None:
        self.played.append(cue)


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def sound() -> FakeSound:
    return FakeSound()


@pytest.fixture
def score_file(tmp_path: Path) -> Path:
    return tmp_path / "best.json"


@pytest.fixture
def make_session(timer: FakeTimer, sound: FakeSound, score_file: Path):
    def _make(**overrides) -> GameSession:
        cfg = Config(highscore_path=str(score_file), seed=1234, sound=False)
        for k, v in overrides.items():
            setattr(cfg, k, v)
        return GameSession(cfg=cfg, clock=TickClock(set_timer=timer), sound=sound)

    return _make


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)
