"""Voyages: running a boat through a sequence of orders."""

from .voyage import Order, Voyage

__all__ = ["Order", "Voyage"]
