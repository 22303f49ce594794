"""Hive: the small framework the arcade games in this repository run on."""

from hive.logging import get_logger

__all__ = ['get_logger']
