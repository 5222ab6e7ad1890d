# render.py
from __future__ import annotations
from typing import TYPE_CHECKING

import pygame  # type: ignore

from .config import (
    BOARD_SIZE, GRID_SIZE, WIDTH, PANEL_HEIGHT,
    BG, PANEL_BG, HEAD_COLOR, BODY_COLOR, FOOD_COLOR, TEXT, BUTTON, BUTTON_HI,
)
from .controls import BUTTONS
from .game import GameState

if TYPE_CHECKING:
    from .session import GameSession

_BUTTON_LABELS = {
    "up": "^", "down": "v", "left": "<", "right": ">",
    "speed_down": "-", "speed_up": "+",
}


def _blit_centered(screen: pygame.Surface, font: pygame.font.Font, text: str,
                   center, color=TEXT) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=center))


# ---------- Board ----------
def draw_board(screen: pygame.Surface, state: GameState) -> None:
    pygame.draw.rect(screen, BG, pygame.Rect(0, 0, BOARD_SIZE, BOARD_SIZE))

    # food: circle centred in its cell
    fx, fy = state.food
    center = (fx * GRID_SIZE + GRID_SIZE // 2, fy * GRID_SIZE + GRID_SIZE // 2)
    pygame.draw.circle(screen, FOOD_COLOR, center, GRID_SIZE // 2 - 2)

    # snake: squares inset by 2px so segments show gaps, head darker
    for i, (x, y) in enumerate(state.snake):
        color = HEAD_COLOR if i == 0 else BODY_COLOR
        rect = pygame.Rect(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE - 2, GRID_SIZE - 2)
        pygame.draw.rect(screen, color, rect)


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font) -> None:
    _blit_centered(screen, font, "GAME OVER", (BOARD_SIZE // 2, BOARD_SIZE // 2))


def draw_idle(screen: pygame.Surface, font: pygame.font.Font) -> None:
    pygame.draw.rect(screen, BG, pygame.Rect(0, 0, BOARD_SIZE, BOARD_SIZE))
    _blit_centered(screen, font, "Press Space or Start", (BOARD_SIZE // 2, BOARD_SIZE // 2))


# ---------- Control strip ----------
def draw_panel(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    pygame.draw.rect(screen, PANEL_BG, pygame.Rect(0, BOARD_SIZE, WIDTH, PANEL_HEIGHT))

    screen.blit(font.render(f"Score: {session.score}", True, TEXT), (16, BOARD_SIZE + 10))
    screen.blit(font.render(f"Best: {session.high_score}", True, TEXT), (16, BOARD_SIZE + 34))
    screen.blit(font.render(f"Speed: {session.speed}", True, TEXT), (16, BOARD_SIZE + 64))

    for name, rect in BUTTONS.items():
        pygame.draw.rect(screen, BUTTON_HI if name == "start" else BUTTON, rect, border_radius=6)
        if name == "start":
            label = "Restart" if session.running else "Start"
        else:
            label = _BUTTON_LABELS[name]
        _blit_centered(screen, font, label, rect.center)


def draw_frame(screen: pygame.Surface, font: pygame.font.Font,
               big_font: pygame.font.Font, session: GameSession) -> None:
    """Paint the whole window from the session. Reads only."""
    if session.games_played == 0:
        draw_idle(screen, font)
    else:
        draw_board(screen, session.state)
        if session.game_over:
            draw_game_over(screen, big_font)
    draw_panel(screen, font, session)
