# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import random

from .config import TILE_COUNT, RIGHT, SCORE_PER_FOOD, INITIAL_LENGTH

Cell = Tuple[int, int]
Direction = Tuple[int, int]


class StepResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"

    @property
    def is_terminal(self) -> bool:
        return self in (StepResult.HIT_WALL, StepResult.HIT_SELF)


# ---------- Helpers ----------
def spawn_food(snake: List[Cell], tile_count: int = TILE_COUNT,
               rng: Optional[random.Random] = None) -> Cell:
    rng = rng or random.Random()
    while True:
        fx = rng.randrange(tile_count)
        fy = rng.randrange(tile_count)
        if (fx, fy) not in snake:
            return (fx, fy)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(cell: Cell, tile_count: int = TILE_COUNT) -> bool:
    x, y = cell
    return 0 <= x < tile_count and 0 <= y < tile_count

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]      # head at index 0
    direction: Direction   # single slot, overwritten by accepted input
    food: Cell
    score: int = 0
    running: bool = False
    tile_count: int = TILE_COUNT

def initial_snake(tile_count: int = TILE_COUNT) -> List[Cell]:
    cx = cy = tile_count // 2
    return [(cx - i, cy) for i in range(INITIAL_LENGTH)]

def new_game_state(tile_count: int = TILE_COUNT,
                   rng: Optional[random.Random] = None) -> GameState:
    snake = initial_snake(tile_count)
    return GameState(
        snake=snake,
        direction=RIGHT,
        food=spawn_food(snake, tile_count, rng),
        score=0,
        running=False,
        tile_count=tile_count,
    )

# ---------- Update ----------
def step_game(state: GameState, rng: Optional[random.Random] = None) -> StepResult:
    """
    Advance the snake by one cell.
    Collisions leave the state untouched; the caller owns the terminal transition.
    """
    hx, hy = state.snake[0]
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, state.tile_count):
        return StepResult.HIT_WALL

    # Self collision
    if new_head in state.snake:
        return StepResult.HIT_SELF

    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += SCORE_PER_FOOD
        state.food = spawn_food(state.snake, state.tile_count, rng)
        return StepResult.ATE

    state.snake.pop()
    return StepResult.MOVED
