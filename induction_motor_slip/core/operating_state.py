"""
Operating-point state machine for the start/stop slip relaxation.

The state holds the current slip and the run flag. Each tick moves slip one
step toward its target: the steady-state floor while running, standstill
(slip = 1) while stopped.
"""

from dataclasses import dataclass, replace
from enum import Enum

from ..utils.constants import (
    SLIP_STEP_DOWN, SLIP_STEP_UP,
    STEADY_SLIP_FLOOR, FULL_STOP_SLIP, INITIAL_SLIP,
    SLIP_DECIMALS
)


class MotorState(Enum):
    """Run mode of the motor."""
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class RelaxationSettings:
    """
    Slip ramp rates and limits.

    These are tuned for the animation, not derived from load torque or
    inertia.

    Attributes:
        step_down: Slip decrease per tick while running
        step_up: Slip increase per tick while stopped
        steady_slip_floor: Slip held while running
        full_stop_slip: Slip held while stopped
        initial_slip: Slip at power-up
    """
    step_down: float = SLIP_STEP_DOWN
    step_up: float = SLIP_STEP_UP
    steady_slip_floor: float = STEADY_SLIP_FLOOR
    full_stop_slip: float = FULL_STOP_SLIP
    initial_slip: float = INITIAL_SLIP

    def __post_init__(self):
        """Validate settings."""
        if self.step_down <= 0:
            raise ValueError(f"step_down must be positive, got {self.step_down}")
        if self.step_up <= 0:
            raise ValueError(f"step_up must be positive, got {self.step_up}")
        if not 0 <= self.steady_slip_floor < self.full_stop_slip <= 1:
            raise ValueError(
                f"Need 0 <= steady_slip_floor < full_stop_slip <= 1, got "
                f"{self.steady_slip_floor} and {self.full_stop_slip}"
            )
        if not 0 <= self.initial_slip <= 1:
            raise ValueError(f"initial_slip must be in [0, 1], got {self.initial_slip}")


DEFAULT_RELAXATION = RelaxationSettings()


@dataclass(frozen=True)
class OperatingState:
    """
    Current slip and run flag.

    Attributes:
        slip: Current slip, in [0, 1]
        running: True while the motor is switched on
    """
    slip: float = INITIAL_SLIP
    running: bool = False

    def __post_init__(self):
        if not 0 <= self.slip <= 1:
            raise ValueError(f"Slip must be in [0, 1], got {self.slip}")

    @property
    def mode(self) -> MotorState:
        return MotorState.RUNNING if self.running else MotorState.STOPPED


def initial_state(settings: RelaxationSettings = DEFAULT_RELAXATION) -> OperatingState:
    """State at power-up: small slip, motor stopped."""
    return OperatingState(slip=settings.initial_slip, running=False)


def target_slip(
    state: OperatingState,
    settings: RelaxationSettings = DEFAULT_RELAXATION
) -> float:
    """Slip value the current mode relaxes toward."""
    if state.running:
        return settings.steady_slip_floor
    return settings.full_stop_slip


def is_settled(
    state: OperatingState,
    settings: RelaxationSettings = DEFAULT_RELAXATION
) -> bool:
    """True once further ticks leave the slip unchanged."""
    return tick(state, settings).slip == state.slip


def tick(
    state: OperatingState,
    settings: RelaxationSettings = DEFAULT_RELAXATION
) -> OperatingState:
    """
    Advance the slip by one time step.

    Running:  s <- max(s - step_down, floor)
    Stopped:  s <- min(s + step_up, full_stop)

    Args:
        state: Current state
        settings: Ramp rates and limits

    Returns:
        New state (run flag unchanged)
    """
    if state.running:
        slip = max(round(state.slip - settings.step_down, SLIP_DECIMALS),
                   settings.steady_slip_floor)
    else:
        slip = min(round(state.slip + settings.step_up, SLIP_DECIMALS),
                   settings.full_stop_slip)

    if slip == state.slip:
        return state
    return replace(state, slip=slip)


def set_running(state: OperatingState, running: bool) -> OperatingState:
    """
    Switch the motor on or off.

    Only the run flag changes; the slip carries over to the next tick.
    """
    if state.running == running:
        return state
    return replace(state, running=bool(running))
