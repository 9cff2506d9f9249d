import matplotlib.pyplot as plt
import numpy as np
from typing import Optional

from minnow.voyage import Voyage


class SpeedPlotter:
    """Plots the speed history of a voyage."""

    def __init__(self, voyage: Voyage, figsize=(10, 4)):
        """Initialize the speed plotter.

        Args:
            voyage: Voyage whose history is plotted
            figsize: Figure size in inches
        """
        if not voyage.history:
            raise ValueError("Voyage has no history to plot")

        self.voyage = voyage
        self.figsize = figsize
        self.fig: Optional[plt.Figure] = None
        self.ax = None

    def plot(self) -> plt.Figure:
        """Draw the speed history as a step plot.

        Returns:
            The matplotlib Figure
        """
        history = self.voyage.history
        times = [state["time"] for state in history]
        speeds = np.array([state["speed"] for state in history], dtype=float)

        self.fig, self.ax = plt.subplots(figsize=self.figsize)

        # Each recorded speed is held up to the time of its entry
        self.ax.step(times, speeds, where="pre", color="tab:blue", label="Speed")
        self.ax.axhline(
            self.voyage.boat.max_speed,
            color="tab:red",
            linestyle="--",
            label="Maximum rated speed",
        )

        self.ax.set_title(f"{self.voyage.boat.name} speed history")
        self.ax.set_xlabel("Time")
        self.ax.set_ylabel("Speed (knots)")
        self.ax.set_ylim(bottom=0, top=max(self.voyage.boat.max_speed, 1.0) * 1.1)
        self.ax.legend(loc="upper right")
        self.fig.autofmt_xdate()

        return self.fig

    def save(self, path: str) -> None:
        """Save the plot to a file.

        Args:
            path: Output file path
        """
        if self.fig is None:
            self.plot()
        self.fig.savefig(path, bbox_inches="tight")

    def close(self) -> None:
        """Release the figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
