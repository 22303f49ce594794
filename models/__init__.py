"""
Data models for Hive games.

- primitives: Point2D (alias Vector2D) and Rectangle
- beecatch: Bee Catch enums, the validated RulesConfig and ScoreData

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models import EntityKind, SpeedTier, RulesConfig
"""

from .primitives import (
    Point2D,
    Vector2D,
    Rectangle,
)

from .beecatch import (
    EventType,
    EntityKind,
    SpeedTier,
    RulesConfig,
    ScoreData,
)

__all__ = [
    "Point2D",
    "Vector2D",
    "Rectangle",
    "EventType",
    "EntityKind",
    "SpeedTier",
    "RulesConfig",
    "ScoreData",
]
