import logging
import math
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

import numpy as np
import pandas as pd

from minnow.vessel import Boat

logger = logging.getLogger(__name__)


class Order(Enum):
    """Speed orders that can be given to a boat"""

    FULL_SPEED = "full_speed"
    HALF_SPEED = "half_speed"
    FULL_STOP = "full_stop"


class Voyage:
    """Runs a boat through a sequence of speed orders and records its history.

    Each step applies one order, holds the resulting speed for a number of
    hours and accumulates the distance covered.
    """

    def __init__(self, boat: Boat, start_time: Optional[datetime] = None):
        """Initialize the voyage.

        Args:
            boat: Boat to sail
            start_time: Time at which the voyage starts (defaults to now)
        """
        self.boat = boat
        self.current_time = start_time if start_time is not None else datetime.now()
        self.distance_travelled = 0.0

        # Store voyage history
        self.history: List[Dict] = [
            {
                "order": None,
                "message": None,
                "speed": self.boat.speed,
                "distance": 0.0,
                "time": self.current_time,
            }
        ]

    @staticmethod
    def _parse_order(order: Union[str, Order]) -> Order:
        if isinstance(order, Order):
            return order
        try:
            return Order(order)
        except ValueError:
            valid = ", ".join(o.value for o in Order)
            logger.error(f"Unknown order {order!r}")
            raise ValueError(f"Unknown order {order!r}. Use one of: {valid}")

    def step(self, order: Union[str, Order], duration_hours: float = 1.0) -> Dict:
        """Apply an order and hold the resulting speed.

        Args:
            order: Order to give, e.g. "full_speed"
            duration_hours: Time to hold the resulting speed in hours

        Returns:
            Dict containing the state after the step
        """
        order = self._parse_order(order)
        if not math.isfinite(duration_hours) or duration_hours <= 0:
            raise ValueError(f"Duration must be finite and positive: {duration_hours}")
        try:
            new_time = self.current_time + timedelta(hours=duration_hours)
        except OverflowError as e:
            raise ValueError(f"Duration too long: {duration_hours}") from e

        message = getattr(self.boat, order.value)()

        # Distance in nautical miles, speed in knots
        leg_distance = self.boat.speed * duration_hours
        self.distance_travelled += leg_distance
        self.current_time = new_time

        state = {
            "order": order.value,
            "message": message,
            "speed": self.boat.speed,
            "distance": leg_distance,
            "time": self.current_time,
        }
        self.history.append(state)
        return state

    def run(
        self, orders: Iterable[Union[str, Order]], duration_hours: float = 1.0
    ) -> List[Dict]:
        """Run the voyage through a sequence of orders.

        Args:
            orders: Orders to give, in turn
            duration_hours: Time to hold each order in hours

        Returns:
            List of state dictionaries for each step
        """
        states = [self.step(order, duration_hours) for order in orders]
        logger.info(
            f"{self.boat.name} completed {len(states)} orders, "
            f"{self.distance_travelled:.1f} nm travelled"
        )
        return states

    def to_dataframe(self) -> pd.DataFrame:
        """Get the voyage history as a DataFrame indexed by time."""
        return pd.DataFrame(
            self.history, columns=["time", "order", "message", "speed", "distance"]
        ).set_index("time")

    def summary(self) -> Dict:
        """Summarise the voyage.

        The mean speed is weighted by the time each speed was held.
        """
        legs = self.history[1:]
        speeds = np.array([leg["speed"] for leg in legs], dtype=float)
        hours = np.array(
            [
                (leg["time"] - prev["time"]).total_seconds() / 3600
                for prev, leg in zip(self.history, legs)
            ],
            dtype=float,
        )

        return {
            "steps": len(legs),
            "distance": self.distance_travelled,
            "max_speed_reached": float(speeds.max()) if legs else 0.0,
            "mean_speed": float(np.average(speeds, weights=hours)) if legs else 0.0,
        }
