# clock.py
from typing import Callable, Optional

import pygame  # type: ignore

# Posted to the event queue on every tick
TICK_EVENT = pygame.USEREVENT + 1


class TickClock:
    """
    The single periodic tick source.

    Backed by pygame.time.set_timer: installing a timer for an event type
    replaces any timer already running for it, and an interval of 0 removes it,
    so schedule() is cancel-then-install and cancel() is idempotent.
    """

    def __init__(self, set_timer: Optional[Callable[[int, int], None]] = None,
                 event_type: int = TICK_EVENT):
        self._set_timer = set_timer or pygame.time.set_timer
        self.event_type = event_type
        self.interval_ms: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.interval_ms is not None

    def schedule(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.cancel()
        self._set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms

    def cancel(self) -> None:
        self._set_timer(self.event_type, 0)
        self.interval_ms = None
