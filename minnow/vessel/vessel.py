import logging
import math
import operator
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


class CrewPositionError(IndexError):
    """Raised when a roster position does not refer to a crew member."""

    def __init__(self, position: int, crew_size: int):
        self.position = position
        self.crew_size = crew_size
        super().__init__(
            f"Crew position {position} out of range for a crew of {crew_size}"
        )


@dataclass
class BoatState:
    """Represents the current operational state of a boat"""

    speed: float = 0.0  # in knots
    crew: List[str] = field(default_factory=list)


class Boat:
    """A boat with a fixed name and rated speed, a crew and a current speed

    Parameters:
        name: Name of the boat
        crew: Initial crew roster, in order (default empty)
        max_speed: Maximum rated speed in knots (default 0.0)
    """

    FULL_SPEED_MESSAGE = "Full speed ahead!"
    FULL_STOP_MESSAGE = "All stop!"
    HALF_SPEED_MESSAGE = "Half speed ahead!"

    def __init__(
        self,
        name: str,
        crew: Optional[Iterable[str]] = None,
        max_speed: float = 0.0,
    ):
        """
        Initialize the boat

        Args:
            name: Name of the boat
            crew: Initial crew roster, in order (default empty)
            max_speed: Maximum rated speed in knots (default 0.0)
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Boat name must be a non-empty string")
        if isinstance(max_speed, bool) or not isinstance(max_speed, (int, float)):
            raise ValueError(f"Maximum speed must be a number: {max_speed!r}")
        if not math.isfinite(max_speed) or max_speed < 0:
            raise ValueError(f"Maximum speed must be finite and >= 0: {max_speed}")

        if isinstance(crew, str):
            raise ValueError(f"Crew must be a list of names, not a string: {crew!r}")
        crew = list(crew) if crew is not None else []
        for member in crew:
            self._check_member(member)

        self._name = name
        self._max_speed = float(max_speed)
        self._state = BoatState(crew=crew)

    def full_speed(self) -> str:
        """Run the boat at its maximum rated speed."""
        self._state.speed = self._max_speed
        return self._announce(self.FULL_SPEED_MESSAGE)

    def full_stop(self) -> str:
        """Bring the boat to a stop."""
        self._state.speed = 0.0
        return self._announce(self.FULL_STOP_MESSAGE)

    def half_speed(self) -> str:
        """Run the boat at half of its maximum rated speed."""
        self._state.speed = self._max_speed / 2
        return self._announce(self.HALF_SPEED_MESSAGE)

    @staticmethod
    def _check_member(member) -> None:
        if not isinstance(member, str) or not member.strip():
            raise ValueError(
                f"Crew member name must be a non-empty string: {member!r}"
            )

    def _announce(self, message: str) -> str:
        logger.info(message)
        logger.info(self._report_speed())
        return message

    def _report_speed(self) -> str:
        return f"{self._name} is travelling at {self._state.speed:.1f} knots."

    def roll_call(self) -> List[str]:
        """
        Call the roll of the crew

        Returns:
            One status line per crew member, in roster order
        """
        return [f"{member} is present!" for member in self._state.crew]

    def add_crew(self, member: str) -> int:
        """
        Add a crew member to the end of the roster

        Args:
            member: Name of the new crew member

        Returns:
            Size of the crew after the addition
        """
        self._check_member(member)
        self._state.crew.append(member)
        logger.info(f"{member} joined the crew of {self._name}")
        return len(self._state.crew)

    def remove_crew(self, position: int) -> str:
        """
        Remove the crew member at a zero-based roster position

        Args:
            position: Position of the crew member in the roster

        Returns:
            Name of the removed crew member

        Raises:
            TypeError: If position is not an integer
            CrewPositionError: If position is outside the roster
        """
        if isinstance(position, bool):
            raise TypeError(f"Crew position must be an integer: {position!r}")
        try:
            position = operator.index(position)
        except TypeError:
            raise TypeError(f"Crew position must be an integer: {position!r}") from None

        crew_size = len(self._state.crew)
        # Negative positions are rejected rather than counted from the end
        if not 0 <= position < crew_size:
            logger.error(
                f"Cannot remove crew position {position} from {self._name} "
                f"(crew of {crew_size})"
            )
            raise CrewPositionError(position, crew_size)

        member = self._state.crew.pop(position)
        logger.info(f"{member} left the crew of {self._name}")
        return member

    @property
    def name(self) -> str:
        """Get the boat's name"""
        return self._name

    @property
    def max_speed(self) -> float:
        """Get the maximum rated speed"""
        return self._max_speed

    @property
    def speed(self) -> float:
        """Get current speed"""
        return self._state.speed

    @property
    def crew(self) -> List[str]:
        """Get a copy of the crew roster"""
        return list(self._state.crew)

    @property
    def state(self) -> BoatState:
        """Get a snapshot of the current state"""
        return replace(self._state, crew=list(self._state.crew))

    def __repr__(self) -> str:
        return (
            f"Boat(name={self._name!r}, speed={self._state.speed}, "
            f"max_speed={self._max_speed})"
        )


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )

    boat = Boat(
        name="The Minnow",
        crew=["The Skipper", "Gilligan", "Mary-anne"],
        max_speed=25.0,
    )
    print(boat.full_speed())
    print(boat.speed)

    print(boat.half_speed())
    print(boat.speed)

    print(boat.remove_crew(1))
    print(boat.roll_call())
