"""Operating-point state machine and simulation driver."""

from .operating_state import (
    MotorState,
    RelaxationSettings,
    OperatingState,
    DEFAULT_RELAXATION,
    initial_state,
    target_slip,
    is_settled,
    tick,
    set_running
)

from .history import (
    SlipSample,
    SlipHistory
)

from .simulator import (
    SimulationSettings,
    MotorSimulator
)

__all__ = [
    # State machine
    'MotorState',
    'RelaxationSettings',
    'OperatingState',
    'DEFAULT_RELAXATION',
    'initial_state',
    'target_slip',
    'is_settled',
    'tick',
    'set_running',

    # History
    'SlipSample',
    'SlipHistory',

    # Simulator
    'SimulationSettings',
    'MotorSimulator'
]
