"""
minnow - a boat with a crew, a rated speed and a handful of orders.
"""

from .vessel import Boat, BoatState, CrewPositionError
from .voyage import Order, Voyage
from .config import Settings, init_logging

__version__ = "0.0.1"

__all__ = [
    "Boat",
    "BoatState",
    "CrewPositionError",
    "Order",
    "Voyage",
    "Settings",
    "init_logging",
]
