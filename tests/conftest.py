"""Pytest configuration and fixtures."""

from datetime import datetime

import matplotlib
import pytest

matplotlib.use("Agg")

from minnow import Boat, Voyage


@pytest.fixture
def minnow():
    """Create the boat used throughout the scenarios."""
    return Boat(
        name="The Minnow",
        crew=["The Skipper", "Gilligan", "Mary-anne"],
        max_speed=25.0,
    )


@pytest.fixture
def voyage(minnow):
    """Create a voyage starting at a fixed time."""
    return Voyage(minnow, start_time=datetime(2024, 1, 1, 8, 0))
