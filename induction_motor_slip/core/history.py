"""
Recorded slip trajectory of a simulation run.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional


@dataclass(frozen=True)
class SlipSample:
    """
    Record of a single tick.

    Contains the operating point after the tick was applied.
    """
    tick: int
    time: float            # Simulated time since start [s]
    slip: float
    running: bool
    speed: float           # Rotor speed [rpm]
    torque: float          # Electromagnetic torque [Nm]


class SlipHistory:
    """
    Stores the sequence of ticks of a simulator.

    With a limit set, only the most recent samples are kept.
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 1:
            raise ValueError(f"History limit must be >= 1, got {limit}")
        self.limit = limit
        self.samples: Deque[SlipSample] = deque(maxlen=limit)

    def add(self, sample: SlipSample):
        """Add a tick record."""
        self.samples.append(sample)

    def clear(self):
        self.samples.clear()

    @property
    def current(self) -> Optional[SlipSample]:
        """Get most recent sample."""
        return self.samples[-1] if self.samples else None

    @property
    def count(self) -> int:
        """Number of stored samples."""
        return len(self.samples)

    def get_series(self, variable: str) -> List[float]:
        """
        Get the history of a specific variable.

        Args:
            variable: Name of the variable (must be an attribute of SlipSample)

        Returns:
            List of values across ticks
        """
        return [getattr(sample, variable) for sample in self.samples]

    def plot(self, variable: str = 'slip', ax=None):
        """
        Plot a variable against simulated time.

        Args:
            variable: Attribute of SlipSample to plot
            ax: Existing matplotlib Axes (a new figure is created if None)

        Returns:
            The matplotlib Axes
        """
        import matplotlib.pyplot as plt

        if ax is None:
            _, ax = plt.subplots(figsize=(8, 4))

        times = self.get_series('time')
        values = self.get_series(variable)

        ax.plot(times, values, 'b-')
        ax.set_xlabel('Time [s]')
        ax.set_ylabel(variable)
        ax.set_title(f'History of {variable}')
        ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)
        return ax
