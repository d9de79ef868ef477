"""Calculation modules for the slip-torque simulator."""

from .torque_slip import (
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
    compute_operating_point
)

from .readouts import (
    OperatingReadout,
    calculate_rotor_period,
    build_readout
)

__all__ = [
    # Torque-slip
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

    # Readouts
    'OperatingReadout',
    'calculate_rotor_period',
    'build_readout'
]
