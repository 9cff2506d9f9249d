"""Visualization tools for voyage histories."""

from .speed_plotter import SpeedPlotter

__all__ = ["SpeedPlotter"]
