"""Data models for the slip-torque simulator."""

from .parameters import (
    MotorParameters,
    create_default_parameters,
    create_parameters_from_dict,
    check_parameter_ranges
)

__all__ = [
    'MotorParameters',
    'create_default_parameters',
    'create_parameters_from_dict',
    'check_parameter_ranges'
]
