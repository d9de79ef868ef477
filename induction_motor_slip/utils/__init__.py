"""Utility functions and constants."""

from .constants import (
    LINE_FREQUENCY,
    PHASES,
    SLIP_EPSILON,
    CURVE_STEP,
    TICK_INTERVAL,
    SLIP_STEP_DOWN, SLIP_STEP_UP,
    STEADY_SLIP_FLOOR, FULL_STOP_SLIP, INITIAL_SLIP,
    HISTORY_LIMIT,
    SLIP_DECIMALS,
    ROTOR_PERIOD_BASE, ROTOR_PERIOD_PER_SLIP,
    DEFAULT_PARAMETERS,
    ParameterRanges
)

__all__ = [
    'LINE_FREQUENCY',
    'PHASES',
    'SLIP_EPSILON',
    'CURVE_STEP',
    'TICK_INTERVAL',
    'SLIP_STEP_DOWN', 'SLIP_STEP_UP',
    'STEADY_SLIP_FLOOR', 'FULL_STOP_SLIP', 'INITIAL_SLIP',
    'HISTORY_LIMIT',
    'SLIP_DECIMALS',
    'ROTOR_PERIOD_BASE', 'ROTOR_PERIOD_PER_SLIP',
    'DEFAULT_PARAMETERS',
    'ParameterRanges'
]
