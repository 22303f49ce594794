"""
Input abstraction layer for Hive games.

Turns pointer presses from any source into InputEvent values the
games consume once per frame.
"""

from hive.games.input.input_event import InputEvent
from hive.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
