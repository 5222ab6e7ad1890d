from dataclasses import dataclass
from typing import Optional

# ----- Board & grid -----
BOARD_SIZE = 400
GRID_SIZE = 20
TILE_COUNT = BOARD_SIZE // GRID_SIZE

# Control strip under the board (score, speed, buttons)
PANEL_HEIGHT = 160
WIDTH, HEIGHT = BOARD_SIZE, BOARD_SIZE + PANEL_HEIGHT

# ----- Colors -----
BG         = (0, 0, 0)
PANEL_BG   = (30, 30, 36)
HEAD_COLOR = (0x27, 0xAE, 0x60)
BODY_COLOR = (0x2E, 0xCC, 0x71)
FOOD_COLOR = (0xE7, 0x4C, 0x3C)
TEXT       = (255, 255, 255)
BUTTON     = (60, 60, 72)
BUTTON_HI  = (90, 90, 110)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Scoring -----
SCORE_PER_FOOD = 10
INITIAL_LENGTH = 3

# ----- Speed slider -----
SPEED_MIN, SPEED_MAX = 1, 20
MIN_INTERVAL_MS = 30

HIGHSCORE_KEY = "snakeHighScore"
HIGHSCORE_FILE = "snake_highscore.json"


# ----- Tunables -----
@dataclass
class Config:
    speed: int = 10
    sound: bool = True
    highscore_path: str = HIGHSCORE_FILE
    seed: Optional[int] = None
    debug: bool = False

CFG = Config()


def clamp_speed(setting: int) -> int:
    return max(SPEED_MIN, min(SPEED_MAX, int(setting)))


def speed_to_interval(setting: int) -> int:
    """
    Map the 1..20 speed setting to a tick interval in ms.
    1 -> 297 ms (slow), 20 -> 50 ms (fast). Out-of-range settings are clamped.
    """
    return max(MIN_INTERVAL_MS, 310 - 13 * clamp_speed(setting))
