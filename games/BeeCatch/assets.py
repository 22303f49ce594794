"""Sprite loading for Bee Catch.

All images are decoded once at startup and handed to the game as an
immutable SpriteAssets value.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple, Union

import pygame

from hive.logging import get_logger
from models import EntityKind
from games.BeeCatch import config

log = get_logger('assets')

BEE = 'bee'
HORNET = 'hornet'
FOREST = 'forest'


class AssetLoadError(Exception):
    """Raised when a required image is missing or cannot be decoded."""
    pass


@dataclass(frozen=True)
class SpriteAssets:
    """The three images the game needs.

    Attributes:
        bee: Bee sprite
        hornet: Hornet sprite
        forest: Background image (scaled to the screen when drawn)
    """
    bee: pygame.Surface
    hornet: pygame.Surface
    forest: pygame.Surface

    def get_sprite(self, name: str) -> pygame.Surface:
        """Get an image by name ('bee', 'hornet' or 'forest')."""
        sprites = {BEE: self.bee, HORNET: self.hornet, FOREST: self.forest}
        if name not in sprites:
            raise KeyError(f"Unknown sprite: {name}")
        return sprites[name]

    def sprite_name(self, kind: EntityKind) -> str:
        """Sprite name used to draw an entity kind."""
        return HORNET if kind == EntityKind.HORNET else BEE

    def hitbox_size(self, kind: EntityKind) -> Tuple[int, int]:
        """Hit box for an entity kind: half the sprite size, rounded down."""
        width, height = self.get_sprite(self.sprite_name(kind)).get_size()
        return width // 2, height // 2

    def hitbox_sizes(self) -> Dict[EntityKind, Tuple[int, int]]:
        return {kind: self.hitbox_size(kind) for kind in EntityKind}


def _load_image(path: Path) -> pygame.Surface:
    """Load and decode one image file."""
    if not path.is_file():
        raise AssetLoadError(f"Failed to open image: {path}")
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        raise AssetLoadError(f"Failed to decode image {path}: {e}") from e

    # Converting needs a display; tests load images headless
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    log.debug("Loaded %s (%dx%d)", path.name, image.get_width(), image.get_height())
    return image


def load_assets(assets_dir: Union[str, Path, None] = None) -> SpriteAssets:
    """Load the bee, hornet and forest images.

    Args:
        assets_dir: Directory holding the images (config.ASSETS_DIR if None)

    Returns:
        SpriteAssets with all three images decoded

    Raises:
        AssetLoadError: If any image is missing or undecodable
    """
    directory = Path(assets_dir) if assets_dir is not None else config.ASSETS_DIR
    log.info("Loading sprites from %s", directory)
    return SpriteAssets(
        bee=_load_image(directory / config.BEE_IMAGE),
        hornet=_load_image(directory / config.HORNET_IMAGE),
        forest=_load_image(directory / config.FOREST_IMAGE),
    )
