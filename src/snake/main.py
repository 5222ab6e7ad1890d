# main.py
import argparse
import dataclasses

import pygame  # type: ignore

from .config import CFG, Config, WIDTH, HEIGHT, SPEED_MIN, SPEED_MAX
from .audio import SoundBoard
from .clock import TickClock, TICK_EVENT
from .controls import KeyboardAdapter, TouchAdapter, hit_test
from .render import draw_frame
from .session import GameSession

START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
FASTER_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS, pygame.K_PAGEUP)
SLOWER_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS, pygame.K_PAGEDOWN)


def parse_args(argv=None) -> Config:
    parser = argparse.ArgumentParser(description="Classic Snake")
    parser.add_argument(
        "--speed",
        type=int,
        default=CFG.speed,
        help=f"initial speed setting, {SPEED_MIN} (slow) to {SPEED_MAX} (fast)",
    )
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=CFG.highscore_path,
        help="JSON file the best score is kept in",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed food placement")
    parser.add_argument("--debug", action="store_true", help="print every tick")
    args = parser.parse_args(argv)

    return dataclasses.replace(
        CFG,
        speed=args.speed,
        sound=not args.mute,
        highscore_path=args.highscore_file,
        seed=args.seed,
        debug=args.debug,
    )


def handle_click(session: GameSession, touch: TouchAdapter, pos) -> None:
    name = hit_test(pos)
    if name == "start":
        session.start()
    elif name == "speed_up":
        session.set_speed(session.speed + 1)
    elif name == "speed_down":
        session.set_speed(session.speed - 1)
    else:
        touch.handle_point(pos)


def handle_event(session: GameSession, keyboard: KeyboardAdapter,
                 touch: TouchAdapter, event: pygame.event.Event) -> bool:
    """Route one pygame event. Returns False when the player asked to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type == TICK_EVENT:
        session.tick()
    elif event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in START_KEYS:
            session.start()
        elif event.key in FASTER_KEYS:
            session.set_speed(session.speed + 1)
        elif event.key in SLOWER_KEYS:
            session.set_speed(session.speed - 1)
        else:
            keyboard.handle_key(event.key)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        # Touchscreen taps arrive here too, as synthesized clicks in window pixels.
        # Raw FINGERDOWN is not used: on trackpads its x/y are not window coordinates.
        handle_click(session, touch, event.pos)
    return True


def main(argv=None):
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont(None, 26)
    big_font = pygame.font.SysFont(None, 64)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    session = GameSession(cfg=cfg, clock=TickClock(), sound=SoundBoard(cfg.sound))
    keyboard = KeyboardAdapter(session.request_direction)
    touch = TouchAdapter(session.request_direction)
    print(f"[GAME] Ready. High score {session.high_score} ({cfg.highscore_path})")

    running = True
    while running:
        for event in pygame.event.get():
            if not handle_event(session, keyboard, touch, event):
                running = False
                break

        draw_frame(screen, font, big_font, session)
        pygame.display.flip()
        clock.tick(60)  # redraw rate only; movement is driven by TICK_EVENT

    session.clock.cancel()
    pygame.quit()


if __name__ == "__main__":
    main()
