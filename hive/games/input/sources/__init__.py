"""Input sources: the abstract InputSource and the pygame mouse."""

from hive.games.input.sources.base import InputSource
from hive.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
