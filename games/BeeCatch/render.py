"""Render commands for Bee Catch and the pygame renderer that runs them.

The game mode never touches a surface directly: draw() describes the frame
as a list of commands, and PygameRenderer paints them in order.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

import pygame

from games.BeeCatch import config
from games.BeeCatch.assets import SpriteAssets

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class DrawImage:
    """Draw a named sprite with its top-left corner at (x, y).

    width/height scale the sprite; None keeps its own size.
    """
    sprite: str
    x: float
    y: float
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class FillOverlay:
    """Blend a color over the whole screen."""
    color: RGBA


@dataclass(frozen=True)
class DrawLine:
    """Draw a 1 px line between two points."""
    start: Tuple[float, float]
    end: Tuple[float, float]
    color: RGBA


@dataclass(frozen=True)
class DrawText:
    """Draw text in the fixed width font; y is the baseline."""
    text: str
    x: int
    y: int
    color: RGBA


RenderCommand = Union[DrawImage, FillOverlay, DrawLine, DrawText]


class PygameRenderer:
    """Executes render commands against a pygame surface.

    Scaled sprites and overlays are cached, so drawing the same frame
    layout every tick does not rescale images.
    """

    def __init__(self, assets: SpriteAssets, font: Optional[pygame.font.Font] = None):
        self._assets = assets
        self._font = font
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}
        self._overlays: Dict[Tuple[RGBA, Tuple[int, int]], pygame.Surface] = {}
        self._line_layer: Optional[pygame.Surface] = None

    def _get_font(self) -> pygame.font.Font:
        """Get or create the fixed width font."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont('monospace', config.FONT_SIZE)
        return self._font

    def render(self, screen: pygame.Surface, commands: List[RenderCommand]) -> None:
        """Paint commands in order.

        Consecutive lines share one alpha layer that is blitted once.
        """
        pending_lines: List[DrawLine] = []
        for cmd in commands:
            if isinstance(cmd, DrawLine):
                pending_lines.append(cmd)
                continue
            if pending_lines:
                self._draw_lines(screen, pending_lines)
                pending_lines = []

            if isinstance(cmd, DrawImage):
                self._draw_image(screen, cmd)
            elif isinstance(cmd, FillOverlay):
                self._fill_overlay(screen, cmd)
            elif isinstance(cmd, DrawText):
                self._draw_text(screen, cmd)
            else:
                raise TypeError(f"Unknown render command: {cmd!r}")

        if pending_lines:
            self._draw_lines(screen, pending_lines)

    def _draw_image(self, screen: pygame.Surface, cmd: DrawImage) -> None:
        image = self._assets.get_sprite(cmd.sprite)
        if cmd.width is not None and cmd.height is not None:
            if (cmd.width, cmd.height) != image.get_size():
                key = (cmd.sprite, cmd.width, cmd.height)
                if key not in self._scaled:
                    self._scaled[key] = pygame.transform.scale(image, (cmd.width, cmd.height))
                image = self._scaled[key]
        screen.blit(image, (int(cmd.x), int(cmd.y)))

    def _fill_overlay(self, screen: pygame.Surface, cmd: FillOverlay) -> None:
        key = (cmd.color, screen.get_size())
        overlay = self._overlays.get(key)
        if overlay is None:
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            overlay.fill(cmd.color)
            self._overlays[key] = overlay
        screen.blit(overlay, (0, 0))

    def _draw_lines(self, screen: pygame.Surface, lines: List[DrawLine]) -> None:
        if self._line_layer is None or self._line_layer.get_size() != screen.get_size():
            self._line_layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        layer = self._line_layer
        layer.fill((0, 0, 0, 0))
        for line in lines:
            pygame.draw.line(layer, line.color, line.start, line.end)
        screen.blit(layer, (0, 0))

    def _draw_text(self, screen: pygame.Surface, cmd: DrawText) -> None:
        font = self._get_font()
        surface = font.render(cmd.text, True, cmd.color)
        screen.blit(surface, (cmd.x, cmd.y - font.get_ascent()))
