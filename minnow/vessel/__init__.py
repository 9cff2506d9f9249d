"""Boat state and crew management."""

from .vessel import Boat, BoatState, CrewPositionError

__all__ = ["Boat", "BoatState", "CrewPositionError"]
