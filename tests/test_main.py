from __future__ import annotations

import pygame
import pytest

from snake.clock import TICK_EVENT
from snake.config import CFG, RIGHT, UP
from snake.controls import BUTTONS, KeyboardAdapter, TouchAdapter
from snake.game import StepResult
from snake.main import handle_click, handle_event, parse_args


def test_defaults_come_from_config():
    cfg = parse_args([])
    assert cfg == CFG


def test_flags_override_config(tmp_path):
    path = str(tmp_path / "hs.json")
    cfg = parse_args(["--speed", "17", "--mute", "--highscore-file", path, "--seed", "3", "--debug"])
    assert cfg.speed == 17
    assert cfg.sound is False
    assert cfg.highscore_path == path
    assert cfg.seed == 3
    assert cfg.debug is True
    # the shared default is untouched
    assert CFG.sound is True


# ---------- event routing ----------


@pytest.fixture
def wired(make_session):
    session = make_session(speed=10)
    keyboard = KeyboardAdapter(session.request_direction)
    touch = TouchAdapter(session.request_direction)

    def send(event_type, **attrs):
        return handle_event(session, keyboard, touch, pygame.event.Event(event_type, attrs))

    return session, touch, send


def _click(send, name, touch=False):
    return send(pygame.MOUSEBUTTONDOWN, pos=BUTTONS[name].center, button=1, touch=touch)


def test_start_button_starts_and_restarts(wired):
    session, touch, _send = wired
    handle_click(session, touch, BUTTONS["start"].center)
    assert session.running
    session.state.food = (11, 10)
    session.tick()
    handle_click(session, touch, BUTTONS["start"].center)
    assert session.score == 0
    assert session.games_played == 2


def test_speed_buttons_step_and_clamp(wired):
    session, touch, _send = wired
    handle_click(session, touch, BUTTONS["speed_up"].center)
    assert session.speed == 11
    handle_click(session, touch, BUTTONS["speed_down"].center)
    handle_click(session, touch, BUTTONS["speed_down"].center)
    assert session.speed == 9

    for _ in range(30):
        handle_click(session, touch, BUTTONS["speed_up"].center)
    assert session.speed == 20
    for _ in range(30):
        handle_click(session, touch, BUTTONS["speed_down"].center)
    assert session.speed == 1


def test_direction_button_steers(wired):
    session, touch, _send = wired
    session.start()
    handle_click(session, touch, BUTTONS["up"].center)
    assert session.state.direction == UP


def test_click_on_board_does_nothing(wired):
    session, touch, _send = wired
    handle_click(session, touch, (200, 200))
    assert session.running is False
    assert session.speed == 10


def test_touch_tap_is_handled_like_a_click(wired):
    session, _touch, send = wired
    assert _click(send, "start", touch=True)
    assert session.running
    assert _click(send, "up", touch=True)
    assert session.state.direction == UP


def test_only_left_button_clicks(wired):
    session, _touch, send = wired
    send(pygame.MOUSEBUTTONDOWN, pos=BUTTONS["start"].center, button=3, touch=False)
    assert session.running is False


def test_finger_events_are_ignored(wired):
    session, _touch, send = wired
    # trackpad fingers report device-relative coordinates
    assert send(pygame.FINGERDOWN, x=0.5, y=0.5, touch_id=0, finger_id=0, dx=0.0, dy=0.0,
                pressure=1.0)
    assert session.running is False


def test_keys_route_to_session(wired):
    session, _touch, send = wired
    assert send(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert session.running
    send(pygame.KEYDOWN, key=pygame.K_EQUALS)
    assert session.speed == 11
    send(pygame.KEYDOWN, key=pygame.K_PAGEDOWN)
    assert session.speed == 10
    send(pygame.KEYDOWN, key=pygame.K_LEFT)
    assert session.state.direction == RIGHT
    send(pygame.KEYDOWN, key=pygame.K_UP)
    assert session.state.direction == UP


def test_tick_event_advances(wired):
    session, _touch, send = wired
    session.start()
    session.state.food = (0, 0)
    head = session.state.snake[0]
    send(TICK_EVENT)
    assert session.last_result is StepResult.MOVED
    assert session.state.snake[0] == (head[0] + 1, head[1])


def test_quit_and_escape_stop_the_loop(wired):
    _session, _touch, send = wired
    assert send(pygame.QUIT) is False
    assert send(pygame.KEYDOWN, key=pygame.K_ESCAPE) is False
