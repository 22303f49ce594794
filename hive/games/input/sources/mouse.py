"""
Mouse Input Source - Left button press edges as input events.
"""
import time
from typing import List

import pygame

from models import Vector2D, EventType
from hive.games.input.input_event import InputEvent
from hive.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Mouse click input source.

    Converts pygame left-button presses into InputEvent models. Only the
    press transition (MOUSEBUTTONDOWN) counts, holding the button does not
    produce further events. Non-mouse events are re-posted to the pygame
    event queue for the main loop.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect mouse clicks."""
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left mouse button only
                    pos_x, pos_y = event.pos
                    self._event_queue.append(InputEvent(
                        position=Vector2D(x=float(pos_x), y=float(pos_y)),
                        timestamp=time.monotonic(),
                        event_type=EventType.HIT,
                    ))
            elif event.type not in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
