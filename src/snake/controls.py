# controls.py
"""
Input mapping.

Keyboard arrows and the on-screen direction buttons are two adapters over the
same capability, request_direction(direction) -> bool, which the session gates
through accept_direction().
"""
from typing import Callable, Dict, Optional, Tuple

import pygame  # type: ignore

from .config import BOARD_SIZE, UP, DOWN, LEFT, RIGHT, DIRECTIONS
from .game import GameState, Direction, is_opposite

RequestDirection = Callable[[Direction], bool]

# ---------- On-screen layout (control strip under the board) ----------
_PAD_CX = 300
_BTN_W, _BTN_H = 46, 40

BUTTONS: Dict[str, pygame.Rect] = {
    "up":         pygame.Rect(_PAD_CX - _BTN_W // 2, BOARD_SIZE + 8, _BTN_W, _BTN_H),
    "left":       pygame.Rect(_PAD_CX - _BTN_W // 2 - 52, BOARD_SIZE + 56, _BTN_W, _BTN_H),
    "right":      pygame.Rect(_PAD_CX - _BTN_W // 2 + 52, BOARD_SIZE + 56, _BTN_W, _BTN_H),
    "down":       pygame.Rect(_PAD_CX - _BTN_W // 2, BOARD_SIZE + 104, _BTN_W, _BTN_H),
    "start":      pygame.Rect(16, BOARD_SIZE + 100, 140, 40),
    "speed_down": pygame.Rect(112, BOARD_SIZE + 58, 28, 28),
    "speed_up":   pygame.Rect(146, BOARD_SIZE + 58, 28, 28),
}

ZONE_DIRECTIONS: Dict[str, Direction] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def hit_test(pos: Tuple[int, int]) -> Optional[str]:
    """Name of the on-screen button under pos, if any."""
    for name, rect in BUTTONS.items():
        if rect.collidepoint(pos):
            return name
    return None


# ---------- Acceptance gate ----------
def accept_direction(state: GameState, cand: Direction) -> bool:
    """
    Overwrite the direction slot with cand unless the game is idle or cand
    reverses the direction currently in the slot.
    """
    if cand not in DIRECTIONS:
        raise ValueError(f"Not a direction: {cand!r}")
    if not state.running:
        return False
    if is_opposite(cand, state.direction):
        return False
    state.direction = cand
    return True


# ---------- Adapters ----------
class KeyboardAdapter:
    KEYMAP: Dict[int, Direction] = {
        pygame.K_UP: UP,
        pygame.K_DOWN: DOWN,
        pygame.K_LEFT: LEFT,
        pygame.K_RIGHT: RIGHT,
    }

    def __init__(self, request_direction: RequestDirection):
        self.request_direction = request_direction

    def handle_key(self, key: int) -> bool:
        cand = self.KEYMAP.get(key)
        if cand is None:
            return False
        return self.request_direction(cand)


class TouchAdapter:
    def __init__(self, request_direction: RequestDirection):
        self.request_direction = request_direction

    def handle_point(self, pos: Tuple[int, int]) -> bool:
        cand = ZONE_DIRECTIONS.get(hit_test(pos) or "")
        if cand is None:
            return False
        return self.request_direction(cand)

