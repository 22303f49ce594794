"""
Bee Catch game mode.

Bees and hornets fly around a forest. Click bees for points, avoid the
hornets: three hornet hits or the end of the clock finishes the round.

Each frame runs one update step (step) and one draw step (draw). draw only
reads the state and describes the frame as render commands.
"""

import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pygame

from hive.games import BaseGame, GameState
from hive.games.input import InputEvent
from hive.logging import get_logger
from models import EventType, Point2D, RulesConfig
from games.BeeCatch import config
from games.BeeCatch.assets import FOREST, SpriteAssets
from games.BeeCatch.bee import Bee
from games.BeeCatch.effects import LightningEffect, RoundTimer
from games.BeeCatch.render import (
    DrawImage,
    DrawLine,
    DrawText,
    FillOverlay,
    PygameRenderer,
    RenderCommand,
)
from games.BeeCatch.scoring import ScoreTracker
from games.BeeCatch.spawner import BeeSpawner

log = get_logger('game_mode')

START_MESSAGE = "Click to start the Bee Catching Game!"
PLAY_AGAIN_MESSAGE = "Click to play again"


@dataclass(frozen=True)
class FrameInput:
    """Input for one tick.

    Attributes:
        pointer: Pointer position in screen coordinates
        pressed: True only on the frame the primary button went down
    """
    pointer: Point2D = field(default_factory=lambda: Point2D(x=0.0, y=0.0))
    pressed: bool = False

    @classmethod
    def from_events(cls, events: List[InputEvent]) -> 'FrameInput':
        """Build frame input from collected events; the first HIT wins.

        MISS events are never hit-tested and do not count as a press.
        """
        for event in events:
            if event.event_type == EventType.HIT:
                return cls(pointer=event.position, pressed=True)
        return cls()


class BeeCatchMode(BaseGame):
    """
    Bee Catch game mode.

    Args:
        assets: Decoded sprites, also used to size the hit boxes
        rules: Gameplay constants (config.DEFAULT_RULES if None)
        rng: Random generator for spawning
        clock: Seconds source for the round timer (time.monotonic by default)
        fx_rng: Random generator for cosmetic effects, kept apart from rng
            so drawing never changes what spawns
    """

    NAME = "Bee Catch"
    DESCRIPTION = "Click the bees, avoid the hornets, beat the clock."
    VERSION = "1.0.0"
    AUTHOR = "Hive Team"

    ARGUMENTS = [
        {
            'name': '--assets-dir',
            'type': str,
            'default': None,
            'help': 'Directory with bee.png, hornet.png and forest.jpg'
        },
        {
            'name': '--fps',
            'type': int,
            'default': config.FPS,
            'help': 'Frames per second (game speed is per frame)'
        },
    ]

    def __init__(
        self,
        assets: SpriteAssets,
        rules: Optional[RulesConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        fx_rng: Optional[random.Random] = None,
    ):
        super().__init__()

        self._assets = assets
        self._rules = rules if rules is not None else config.DEFAULT_RULES
        self._fx_rng = fx_rng if fx_rng is not None else random.Random()
        self._clock = clock

        self._spawner = BeeSpawner(self._rules, assets.hitbox_sizes(), rng)
        self._timer = RoundTimer(self._rules.game_time, self._clock)
        self._lightning = LightningEffect(self._rules.lightning_ticks)
        self._tracker = ScoreTracker(self._rules.max_hornets)

        self._bees: List[Bee] = []
        self._internal_state = GameState.NOT_STARTED
        self._pending_input = FrameInput()

        # Created on first render
        self._renderer: Optional[PygameRenderer] = None

    # =========================================================================
    # State
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        return self._internal_state

    def get_score(self) -> int:
        return self._tracker.score

    @property
    def bees(self) -> List[Bee]:
        return self._bees

    @property
    def hornets_hit(self) -> int:
        return self._tracker.hornets_hit

    @property
    def remaining_time(self) -> int:
        return self._timer.remaining

    @property
    def lightning_active(self) -> bool:
        return self._lightning.active

    @property
    def lightning_ticks_left(self) -> int:
        return self._lightning.ticks_left

    @property
    def rules(self) -> RulesConfig:
        return self._rules

    # =========================================================================
    # BaseGame interface
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Queue this frame's press for the next update."""
        frame = FrameInput.from_events(events)
        if frame.pressed or not self._pending_input.pressed:
            self._pending_input = frame

    def update(self, dt: float) -> None:
        """Run one tick with the queued input.

        Args:
            dt: Unused; movement is per tick and the clock is wall time
        """
        frame = self._pending_input
        self._pending_input = FrameInput()
        self.step(frame)

    def render(self, screen: pygame.Surface) -> None:
        if self._renderer is None:
            self._renderer = PygameRenderer(self._assets)
        self._renderer.render(screen, self.draw())

    def tick(self, frame: FrameInput) -> List[RenderCommand]:
        """Run one update step, then describe the resulting frame."""
        self.step(frame)
        return self.draw()

    def reset(self) -> None:
        """Back to the title screen with an empty round."""
        super().reset()
        self._clear_round()
        self._timer = RoundTimer(self._rules.game_time, self._clock)
        self._internal_state = GameState.NOT_STARTED

    def restart(self) -> None:
        """Start a fresh round straight away."""
        self._clear_round()
        self._timer.start()
        self._internal_state = GameState.PLAYING
        log.info("Round restarted")

    def _clear_round(self) -> None:
        self._bees = []
        self._tracker = self._tracker.reset()
        self._lightning.reset()
        self._pending_input = FrameInput()

    # =========================================================================
    # Update step
    # =========================================================================

    def step(self, frame: FrameInput) -> None:
        """Advance the game by one tick.

        While playing, the order is: clock, spawn, lightning countdown,
        movement, click, then removal of caught entities.
        """
        if self._internal_state == GameState.NOT_STARTED:
            if frame.pressed:
                self._timer.start()
                self._internal_state = GameState.PLAYING
                log.info("Round started (%d seconds)", self._rules.game_time)
            return

        if self._internal_state == GameState.GAME_OVER:
            if frame.pressed:
                self.restart()
            return

        if self._timer.update() <= 0:
            self._end_round("time up")
            return

        self._spawner.update(self._bees)
        self._lightning.update()

        for bee in self._bees:
            if bee.visible:
                bee.move(self._rules.screen_width, self._rules.screen_height)

        if frame.pressed:
            self._handle_press(frame.pointer)

        self._bees = [bee for bee in self._bees if bee.visible]

    def _handle_press(self, point: Point2D) -> None:
        """Hit-test a press; the earliest spawned entity under it is caught."""
        for bee in self._bees:
            if not bee.visible or not bee.contains_point(point):
                continue

            bee.visible = False
            if bee.is_hornet:
                self._tracker = self._tracker.record_hornet()
                self._lightning.trigger()
                log.debug("Hornet hit (%s)", self._tracker.get_hornets_text())
                if self._tracker.is_out_of_lives:
                    self._end_round("too many hornets")
            else:
                points = self._rules.points_for(bee.speed_tier)
                self._tracker = self._tracker.record_bee(points)
                log.debug("Caught %s for %d points", bee, points)
            break

    def _end_round(self, reason: str) -> None:
        self._internal_state = GameState.GAME_OVER
        log.info("Game over (%s), score %d", reason, self._tracker.score)

    # =========================================================================
    # Draw step
    # =========================================================================

    def draw(self) -> List[RenderCommand]:
        """Describe the current frame as render commands."""
        width = self._rules.screen_width
        height = self._rules.screen_height

        commands: List[RenderCommand] = [
            DrawImage(FOREST, 0, 0, width, height),
            FillOverlay(config.FOREST_TINT),
        ]

        if self._internal_state == GameState.NOT_STARTED:
            commands += self._centered_text(START_MESSAGE, height // 2)
            return commands

        if self._internal_state == GameState.GAME_OVER:
            y = height // 2
            commands += self._centered_text(f"Game Over! Your score: {self._tracker.score}", y)
            commands += self._centered_text(PLAY_AGAIN_MESSAGE, y + 30)
            return commands

        for bee in self._bees:
            if bee.visible:
                commands.append(DrawImage(self._assets.sprite_name(bee.kind), bee.x, bee.y))

        if self._lightning.active:
            for _ in range(self._rules.lightning_bolts):
                x1 = self._fx_rng.randrange(width)
                x2 = self._fx_rng.randrange(width)
                commands.append(DrawLine((x1, 0), (x2, height), config.LIGHTNING_COLOR))

        commands += self._shadowed_text(f"Score: {self._tracker.score}", 10, 20)
        commands += self._shadowed_text(f"Time: {self._timer.remaining}", width - 100, 20)
        commands += self._shadowed_text(self._tracker.get_hornets_text(), 10, 40)
        return commands

    def _shadowed_text(self, text: str, x: int, y: int) -> List[RenderCommand]:
        offset = config.SHADOW_OFFSET
        return [
            DrawText(text, x + offset, y + offset, config.SHADOW_COLOR),
            DrawText(text, x, y, config.TEXT_COLOR),
        ]

    def _centered_text(self, text: str, y: int) -> List[RenderCommand]:
        x = (self._rules.screen_width - len(text) * config.CHAR_WIDTH) // 2
        return self._shadowed_text(text, x, y)
