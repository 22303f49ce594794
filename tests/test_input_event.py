"""
Tests for the InputEvent dataclass.

Tests cover:
- Valid construction
- Timestamp validation
- Immutability
- String representation
"""

import dataclasses

import pytest

from models import Vector2D, EventType
from hive.games.input import InputEvent


class TestInputEventConstruction:
    """Test InputEvent creation with valid data."""

    def test_valid_construction(self):
        """Test creating InputEvent with valid data."""
        position = Vector2D(x=100.0, y=200.0)
        event = InputEvent(position=position, timestamp=1.5, event_type=EventType.HIT)

        assert event.position == position
        assert event.timestamp == 1.5
        assert event.event_type == EventType.HIT

    def test_default_event_type_is_hit(self):
        """Test event_type defaults to HIT."""
        event = InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=0.0)
        assert event.event_type == EventType.HIT

    def test_negative_timestamp_rejected(self):
        """Test negative timestamps raise ValueError."""
        with pytest.raises(ValueError, match='non-negative'):
            InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=-0.1)


class TestInputEventImmutability:
    """Test that InputEvent cannot be modified."""

    def test_cannot_change_position(self):
        """Test assigning a field raises FrozenInstanceError."""
        event = InputEvent(position=Vector2D(x=1.0, y=2.0), timestamp=1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.position = Vector2D(x=3.0, y=4.0)  # type: ignore

    def test_equal_events_compare_equal(self):
        """Test two events with the same data are equal."""
        a = InputEvent(position=Vector2D(x=1.0, y=2.0), timestamp=1.0)
        b = InputEvent(position=Vector2D(x=1.0, y=2.0), timestamp=1.0)
        assert a == b


class TestInputEventString:
    """Test string representation."""

    def test_str_contains_position_and_type(self):
        """Test __str__ shows position, time and type."""
        event = InputEvent(position=Vector2D(x=10.0, y=20.5), timestamp=2.0)
        assert str(event) == "InputEvent(pos=(10.00, 20.50), t=2.000, type=hit)"
