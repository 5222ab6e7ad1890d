# session.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Protocol
import random

from .config import CFG, Config, clamp_speed, speed_to_interval
from .clock import TickClock
from .controls import accept_direction
from .game import GameState, Direction, StepResult, new_game_state, step_game
from .highscore import load_high_score, save_high_score


class Sound(Protocol):
    def play(self, cue: str) -> None: ...


class _Silent:
    def play(self, cue: str) -> None:
        pass


@dataclass
class GameSession:
    """
    Owns the game state and its lifecycle: Idle --start()--> Running,
    Running --tick()--> Running, Running --collision--> Idle.

    The clock is the only driver of progress; input only writes the direction
    slot through request_direction().
    """
    cfg: Config = field(default_factory=lambda: CFG)
    clock: TickClock = field(default_factory=TickClock)
    sound: Sound = field(default_factory=_Silent)

    def __post_init__(self):
        self.rng = random.Random(self.cfg.seed)
        self.speed = clamp_speed(self.cfg.speed)
        self.high_score = load_high_score(self.cfg.highscore_path)
        self.state: GameState = new_game_state(rng=self.rng)
        self.last_result: Optional[StepResult] = None
        self.games_played = 0

    # ---------- read-only views for display ----------
    @property
    def running(self) -> bool:
        return self.state.running

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def game_over(self) -> bool:
        return self.last_result is not None and self.last_result.is_terminal

    # ---------- lifecycle ----------
    def start(self) -> None:
        """(Re)start a run. Safe to call at any time."""
        self.state = new_game_state(rng=self.rng)
        self.state.running = True
        self.last_result = None
        self.games_played += 1
        self.clock.schedule(speed_to_interval(self.speed))
        print(f"[GAME] Start #{self.games_played} speed={self.speed} "
              f"interval={self.clock.interval_ms}ms")

    def stop(self) -> None:
        """Terminal transition: cancel the clock, play the defeat cue, settle the high score."""
        self.state.running = False
        self.clock.cancel()
        self.sound.play("defeat")
        print(f"[GAME] Game over ({self.last_result.value if self.last_result else 'stopped'}) "
              f"score={self.state.score}")

        if self.state.score > self.high_score:
            self.high_score = self.state.score
            save_high_score(self.cfg.highscore_path, self.high_score)
            print(f"[SCORE] New high score {self.high_score}")

    def tick(self) -> Optional[StepResult]:
        """One clock tick. Ticks that arrive while idle are dropped."""
        if not self.state.running:
            return None

        result = step_game(self.state, self.rng)
        self.last_result = result
        if self.cfg.debug:
            print(f"[GAME] tick {result.value} head={self.state.snake[0]} "
                  f"len={len(self.state.snake)} score={self.state.score}")

        if result is StepResult.ATE:
            self.sound.play("eat")
        elif result.is_terminal:
            self.stop()
        return result

    # ---------- external controls ----------
    def request_direction(self, direction: Direction) -> bool:
        return accept_direction(self.state, direction)

    def set_speed(self, setting: int) -> int:
        """Apply a new speed setting; reschedules the clock mid-run without touching the state."""
        self.speed = clamp_speed(setting)
        if self.state.running:
            self.clock.schedule(speed_to_interval(self.speed))
        return self.speed
