"""
Equivalent circuit parameter model for the slip-torque simulator.
Contains the per-phase circuit values and supply data that define the motor.
"""

from dataclasses import dataclass, asdict, fields, replace as _replace
from typing import Mapping

from ..utils.constants import LINE_FREQUENCY, DEFAULT_PARAMETERS, ParameterRanges


@dataclass(frozen=True)
class MotorParameters:
    """
    Per-phase equivalent circuit parameters and supply data.

    One value is built per user update; a changed slider yields a new
    instance through `replace`.

    Attributes:
        Rs: Stator resistance [Ω]
        Xs: Stator leakage reactance [Ω]
        Xm: Magnetizing reactance [Ω] (not used by the approximate torque formula)
        Rr: Rotor resistance (referred to stator) [Ω]
        Xr: Rotor leakage reactance (referred to stator) [Ω]
        poles: Number of poles (even, >= 2)
        voltage: Supply voltage [V]
    """
    Rs: float
    Xs: float
    Xm: float
    Rr: float
    Xr: float
    poles: int
    voltage: float

    def __post_init__(self):
        """Validate parameters."""
        if self.Rs <= 0:
            raise ValueError(f"Stator resistance must be positive, got {self.Rs}")
        if self.Rr <= 0:
            raise ValueError(f"Rotor resistance must be positive, got {self.Rr}")
        if self.Xm <= 0:
            raise ValueError(f"Magnetizing reactance must be positive, got {self.Xm}")
        if self.Xs < 0:
            raise ValueError(f"Stator reactance must be non-negative, got {self.Xs}")
        if self.Xr < 0:
            raise ValueError(f"Rotor reactance must be non-negative, got {self.Xr}")
        if self.voltage <= 0:
            raise ValueError(f"Voltage must be positive, got {self.voltage}")
        if isinstance(self.poles, bool) or int(self.poles) != self.poles:
            raise ValueError(f"Poles must be an integer, got {self.poles}")
        if self.poles < 2 or self.poles % 2 != 0:
            raise ValueError(f"Poles must be even and >= 2, got {self.poles}")

    @property
    def pole_pairs(self) -> int:
        """Number of pole pairs p."""
        return int(self.poles) // 2

    @property
    def sync_speed(self) -> float:
        """Synchronous speed at the default line frequency [rpm]."""
        return 120 * LINE_FREQUENCY / self.poles

    @property
    def X_total(self) -> float:
        """Total leakage reactance Xs + Xr [Ω]."""
        return self.Xs + self.Xr

    def replace(self, **changes) -> 'MotorParameters':
        """Return a validated copy with some fields changed."""
        return _replace(self, **changes)

    def as_dict(self) -> dict:
        """Field name -> value mapping."""
        return asdict(self)

    def __repr__(self) -> str:
        return (
            f"MotorParameters(\n"
            f"  Stator: Rs={self.Rs} Ω, Xs={self.Xs} Ω\n"
            f"  Rotor: Rr={self.Rr} Ω, Xr={self.Xr} Ω\n"
            f"  Magnetizing: Xm={self.Xm} Ω\n"
            f"  Supply: {self.voltage} V, {self.poles} poles "
            f"({self.sync_speed:.0f} rpm sync)\n"
            f")"
        )


def create_default_parameters() -> MotorParameters:
    """Create the default 4-pole, 400 V motor."""
    return MotorParameters(**DEFAULT_PARAMETERS)


def create_parameters_from_dict(values: Mapping) -> MotorParameters:
    """
    Create parameters from a mapping (e.g. form or slider values).

    Missing keys are taken from the default motor.

    Args:
        values: Parameter name -> value

    Returns:
        Validated MotorParameters
    """
    known = {f.name for f in fields(MotorParameters)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown motor parameters: {sorted(unknown)}")

    merged = dict(DEFAULT_PARAMETERS)
    merged.update(values)
    return MotorParameters(**merged)


def check_parameter_ranges(params: MotorParameters) -> dict:
    """
    Compare parameters against the typical input ranges.

    Values outside these ranges are still valid; they are only reported.

    Args:
        params: Motor parameters

    Returns:
        Dictionary with check results and warnings
    """
    warnings = []

    for name, (low, high) in ParameterRanges.limits().items():
        value = getattr(params, name)
        if value < low:
            warnings.append(f"{name}={value} is below typical minimum {low}")
        elif value > high:
            warnings.append(f"{name}={value} exceeds typical maximum {high}")

    return {
        'in_range': len(warnings) == 0,
        'warnings': warnings
    }
