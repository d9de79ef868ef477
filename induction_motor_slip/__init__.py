"""
Induction Motor Slip Simulator

Steady-state torque-slip model of a three-phase induction motor, with a
time-stepped start/stop animation of the operating point.

Usage:
    from induction_motor_slip import MotorSimulator, create_default_parameters

    sim = MotorSimulator(create_default_parameters())
    sim.set_running(True)
    sim.advance(100)
    print(sim.readout)
"""

from .models import (
    MotorParameters,
    create_default_parameters,
    create_parameters_from_dict,
    check_parameter_ranges
)

from .calculations import (
    # Torque-slip
    CurvePoint,
    OperatingPoint,
    calculate_sync_speed,
    calculate_slip,
    calculate_torque,
    calculate_slip_at_max_torque,
    calculate_max_torque,
    calculate_starting_torque,
    sample_curve,
    get_curve,
    find_peak_point,
    compute_operating_point,
    # Readouts
    OperatingReadout,
    calculate_rotor_period,
    build_readout
)

from .core import (
    MotorState,
    RelaxationSettings,
    OperatingState,
    initial_state,
    tick,
    set_running,
    SlipSample,
    SlipHistory,
    SimulationSettings,
    MotorSimulator
)

from .utils import (
    LINE_FREQUENCY,
    DEFAULT_PARAMETERS,
    ParameterRanges
)
from .utils.plotting import plot_slip_torque_curve

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    'MotorSimulator',
    'SimulationSettings',

    # Models
    'MotorParameters',
    'create_default_parameters',
    'create_parameters_from_dict',
    'check_parameter_ranges',

    # Calculations
    'CurvePoint',
    'OperatingPoint',
    'calculate_sync_speed',
    'calculate_slip',
    'calculate_torque',
    'calculate_slip_at_max_torque',
    'calculate_max_torque',
    'calculate_starting_torque',
    'sample_curve',
    'get_curve',
    'find_peak_point',
    'compute_operating_point',
    'OperatingReadout',
    'calculate_rotor_period',
    'build_readout',

    # State machine
    'MotorState',
    'RelaxationSettings',
    'OperatingState',
    'initial_state',
    'tick',
    'set_running',
    'SlipSample',
    'SlipHistory',

    # Utils
    'LINE_FREQUENCY',
    'DEFAULT_PARAMETERS',
    'ParameterRanges',
    'plot_slip_torque_curve'
]
