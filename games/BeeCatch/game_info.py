"""
Bee Catch metadata and factory.

Launchers read the constants below and build games through get_game_mode().
"""

from games.BeeCatch import config

# Game metadata
NAME = "Bee Catch"
DESCRIPTION = "Click the bees, avoid the hornets, beat the clock."
VERSION = "1.0.0"
AUTHOR = "Hive Team"

# CLI argument definitions, the same options BeeCatchMode.get_arguments() reports
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
    {
        'name': '--seed',
        'type': int,
        'default': None,
        'help': 'Random seed for reproducible spawns'
    },
]


def get_game_mode(**kwargs):
    """
    Factory function to create a BeeCatchMode instance.

    Args:
        **kwargs: Game configuration options
            - assets: Preloaded SpriteAssets (loaded from assets_dir if missing)
            - assets_dir: Directory to load the sprites from
            - seed: Random seed for spawning
            - fps: Accepted and ignored; the entry point's loop uses it

    Returns:
        BeeCatchMode instance

    Raises:
        AssetLoadError: If the sprites cannot be loaded
    """
    import random

    from games.BeeCatch.assets import load_assets
    from games.BeeCatch.game_mode import BeeCatchMode

    # Filter out None values
    game_kwargs = {k: v for k, v in kwargs.items() if v is not None}

    assets = game_kwargs.get('assets')
    if assets is None:
        assets = load_assets(game_kwargs.get('assets_dir'))

    constructor_kwargs = {'assets': assets}
    if 'seed' in game_kwargs:
        constructor_kwargs['rng'] = random.Random(game_kwargs['seed'])
    if 'rules' in game_kwargs:
        constructor_kwargs['rules'] = game_kwargs['rules']

    return BeeCatchMode(**constructor_kwargs)
