"""
Live readouts of the motor operating point.

Combines the current slip and run state with the torque-slip model into
the values shown next to the rotor animation.
"""

from dataclasses import dataclass
from typing import List

from ..models.parameters import MotorParameters
from ..utils.constants import LINE_FREQUENCY, ROTOR_PERIOD_BASE, ROTOR_PERIOD_PER_SLIP
from .torque_slip import calculate_sync_speed, compute_operating_point


def calculate_rotor_period(slip: float, running: bool) -> float:
    """
    Rotor animation period (seconds per revolution).

    Higher slip means slower rotation. A stopped motor keeps the base period.

    Args:
        slip: Current slip (0-1)
        running: Whether the motor is switched on

    Returns:
        Period [s]
    """
    if not running:
        return ROTOR_PERIOD_BASE
    return ROTOR_PERIOD_BASE + slip * ROTOR_PERIOD_PER_SLIP


@dataclass(frozen=True)
class OperatingReadout:
    """Numbers published to the display after every tick."""
    sync_speed: float       # Synchronous speed [rpm]
    actual_speed: float     # Rotor speed [rpm]
    slip: float
    torque: float           # Electromagnetic torque [Nm]
    running: bool
    rotor_period: float     # Animation period [s]

    @property
    def slip_percent(self) -> float:
        """Slip [%]."""
        return self.slip * 100

    @property
    def status(self) -> str:
        return "Motor Running" if self.running else "Motor Stopped"

    def format_lines(self) -> List[str]:
        """Readout lines as shown in the panel."""
        return [
            f"Synchronous speed: {self.sync_speed:.0f} rpm",
            f"Actual speed: {self.actual_speed:.0f} rpm",
            f"Slip: {self.slip_percent:.1f}%",
            f"Torque: {self.torque:.1f} Nm",
        ]

    def __str__(self) -> str:
        return "\n".join([self.status] + [f"  {line}" for line in self.format_lines()])


def build_readout(
    params: MotorParameters,
    slip: float,
    running: bool,
    frequency: float = LINE_FREQUENCY
) -> OperatingReadout:
    """
    Build the readout for the given parameters and operating state.

    Args:
        params: Circuit parameters
        slip: Current slip (0-1)
        running: Whether the motor is switched on
        frequency: Supply frequency [Hz]

    Returns:
        OperatingReadout
    """
    point = compute_operating_point(params, slip, frequency)
    return OperatingReadout(
        sync_speed=calculate_sync_speed(params.poles, frequency),
        actual_speed=point.speed,
        slip=slip,
        torque=point.torque,
        running=running,
        rotor_period=calculate_rotor_period(slip, running)
    )
