"""
Torque-slip characteristic of the induction motor.

Implements the approximate per-phase equivalent circuit torque equation
and the quantities derived from it (synchronous speed, breakdown and
starting torque, sampled torque-slip curve).
"""

from dataclasses import dataclass
from typing import List, Sequence
import math

from ..models.parameters import MotorParameters
from ..utils.constants import LINE_FREQUENCY, PHASES, SLIP_EPSILON, CURVE_STEP


@dataclass(frozen=True)
class CurvePoint:
    """One sample of the torque-slip curve."""
    slip: float
    torque: float           # Electromagnetic torque [Nm]
    speed: float            # Rotor speed [rpm]


@dataclass(frozen=True)
class OperatingPoint:
    """Motor speed and torque at the current slip."""
    slip: float
    speed: float            # Rotor speed [rpm]
    torque: float           # Electromagnetic torque [Nm]


def calculate_sync_speed(poles: int, frequency: float = LINE_FREQUENCY) -> float:
    """
    Synchronous speed of the rotating field.

    Args:
        poles: Number of poles
        frequency: Supply frequency [Hz]

    Returns:
        Synchronous speed [rpm]
    """
    if poles <= 0:
        raise ValueError(f"Poles must be positive, got {poles}")
    return 120 * frequency / poles


def calculate_slip(actual_speed: float, sync_speed: float) -> float:
    """
    Slip from rotor and synchronous speed.

    s = (n_sync - n) / n_sync

    Args:
        actual_speed: Rotor speed [rpm]
        sync_speed: Synchronous speed [rpm]

    Returns:
        Slip (dimensionless)
    """
    if sync_speed == 0:
        raise ValueError("Synchronous speed must be non-zero")
    return (sync_speed - actual_speed) / sync_speed


def calculate_torque(
    slip: float,
    params: MotorParameters,
    frequency: float = LINE_FREQUENCY
) -> float:
    """
    Electromagnetic torque at a given slip.

    Approximate circuit (magnetizing branch ignored):

        T = 3 V² (Rr/s) / (2π (n_sync/60) [(Rs + Rr/s)² + (Xs + Xr)²])

    Slips below SLIP_EPSILON are evaluated at SLIP_EPSILON.

    Args:
        slip: Operating slip (0-1)
        params: Circuit parameters
        frequency: Supply frequency [Hz]

    Returns:
        Torque [Nm]
    """
    s = max(slip, SLIP_EPSILON)
    n_sync = calculate_sync_speed(params.poles, frequency)

    Rr_s = params.Rr / s
    numerator = PHASES * params.voltage**2 * Rr_s
    denominator = 2 * math.pi * (n_sync / 60) * (
        (params.Rs + Rr_s)**2 + params.X_total**2
    )

    return numerator / denominator


def calculate_slip_at_max_torque(params: MotorParameters) -> float:
    """
    Slip at breakdown (maximum) torque.

    s_max = Rr / sqrt(Rs² + (Xs + Xr)²)

    Independent of voltage and frequency.
    """
    return params.Rr / math.sqrt(params.Rs**2 + params.X_total**2)


def calculate_max_torque(
    params: MotorParameters,
    frequency: float = LINE_FREQUENCY
) -> float:
    """Breakdown torque [Nm]."""
    return calculate_torque(calculate_slip_at_max_torque(params), params, frequency)


def calculate_starting_torque(
    params: MotorParameters,
    frequency: float = LINE_FREQUENCY
) -> float:
    """Locked rotor torque (slip = 1) [Nm]."""
    return calculate_torque(1.0, params, frequency)


def sample_curve(
    params: MotorParameters,
    step: float = CURVE_STEP,
    frequency: float = LINE_FREQUENCY
) -> List[CurvePoint]:
    """
    Calculate the torque-slip characteristic from standstill to synchronism.

    Slips are i/n for i = 0..n with n = round(1/step), so both ends
    (0 and 1) are included exactly. The step must divide 1 evenly
    (0.01, 0.02, 0.025, 0.1, ...).

    Args:
        params: Circuit parameters
        step: Slip resolution, in (0, 1], dividing 1 evenly
        frequency: Supply frequency [Hz]

    Returns:
        List of CurvePoint ordered by increasing slip
    """
    if not 0 < step <= 1:
        raise ValueError(f"Curve step must be in (0, 1], got {step}")

    n_steps = max(1, round(1 / step))
    if abs(n_steps * step - 1) > 1e-9:
        raise ValueError(f"Curve step must divide 1 evenly, got {step}")
    n_sync = calculate_sync_speed(params.poles, frequency)

    points = []
    for i in range(n_steps + 1):
        s = i / n_steps
        points.append(CurvePoint(
            slip=s,
            torque=calculate_torque(s, params, frequency),
            speed=n_sync * (1 - s)
        ))

    return points


def get_curve(params: MotorParameters) -> List[CurvePoint]:
    """Torque-slip curve at the default resolution, for charting."""
    return sample_curve(params)


def find_peak_point(curve: Sequence[CurvePoint]) -> CurvePoint:
    """
    Sampled point with the largest torque.

    Args:
        curve: Sampled torque-slip curve

    Returns:
        The first point holding the maximum torque
    """
    if not curve:
        raise ValueError("Curve is empty")
    return max(curve, key=lambda point: point.torque)


def compute_operating_point(
    params: MotorParameters,
    slip: float,
    frequency: float = LINE_FREQUENCY
) -> OperatingPoint:
    """
    Speed and torque at the given slip.

    Args:
        params: Circuit parameters
        slip: Operating slip (0-1)
        frequency: Supply frequency [Hz]

    Returns:
        OperatingPoint
    """
    n_sync = calculate_sync_speed(params.poles, frequency)
    return OperatingPoint(
        slip=slip,
        speed=n_sync * (1 - slip),
        torque=calculate_torque(slip, params, frequency)
    )
