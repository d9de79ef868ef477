"""
Constants and typical parameter values for the slip-torque simulator.
"""

# =============================================================================
# SUPPLY
# =============================================================================

LINE_FREQUENCY = 50.0      # Supply frequency [Hz]
PHASES = 3                 # Number of stator phases


# =============================================================================
# TORQUE FORMULA
# =============================================================================

# Lower bound on the slip used inside the torque equation; s = 0 puts Rr/s
# at infinity.
SLIP_EPSILON = 0.001

# Slip resolution of the torque-slip curve
CURVE_STEP = 0.01


# =============================================================================
# SLIP RELAXATION (start/stop animation)
# =============================================================================

TICK_INTERVAL = 0.1        # Wall-clock time between ticks [s]
SLIP_STEP_DOWN = 0.01      # Slip decrease per tick while running
SLIP_STEP_UP = 0.01        # Slip increase per tick while stopped
STEADY_SLIP_FLOOR = 0.03   # Slip held while running
FULL_STOP_SLIP = 1.0       # Slip at standstill
INITIAL_SLIP = 0.03

# Samples kept by a simulator history (100 s at the default tick rate)
HISTORY_LIMIT = 1000

# Decimal places kept on every relaxed slip value so that sums of decimal
# steps stay on the 0.01 grid (0.03 + 97 * 0.01 == 1.0).
SLIP_DECIMALS = 10


# =============================================================================
# ROTOR ANIMATION
# =============================================================================

ROTOR_PERIOD_BASE = 8.0    # Seconds per revolution at zero slip / stopped
ROTOR_PERIOD_PER_SLIP = 20.0


# =============================================================================
# DEFAULT MOTOR
# =============================================================================

# Typical small 4-pole, 400 V three-phase motor
DEFAULT_PARAMETERS = {
    'Rs': 0.5,      # Stator resistance [Ω]
    'Xs': 1.5,      # Stator reactance [Ω]
    'Xm': 30.0,     # Magnetizing reactance [Ω]
    'Rr': 0.6,      # Rotor resistance [Ω]
    'Xr': 1.5,      # Rotor reactance [Ω]
    'poles': 4,
    'voltage': 400.0,
}


# =============================================================================
# TYPICAL INPUT RANGES (for validation and slider limits)
# =============================================================================

class ParameterRanges:
    """Typical input ranges for the equivalent circuit parameters."""

    # Line voltage [V]
    VOLTAGE_MIN = 100.0
    VOLTAGE_MAX = 1000.0

    # Number of poles (even)
    POLES_MIN = 2
    POLES_MAX = 12

    # Stator/rotor resistance and leakage reactance [Ω]
    IMPEDANCE_MIN = 0.1
    IMPEDANCE_MAX = 10.0

    # Magnetizing reactance [Ω]
    XM_MIN = 1.0
    XM_MAX = 50.0

    @classmethod
    def limits(cls) -> dict:
        """(min, max) for every parameter name."""
        impedance = (cls.IMPEDANCE_MIN, cls.IMPEDANCE_MAX)
        return {
            'Rs': impedance,
            'Xs': impedance,
            'Xm': (cls.XM_MIN, cls.XM_MAX),
            'Rr': impedance,
            'Xr': impedance,
            'poles': (cls.POLES_MIN, cls.POLES_MAX),
            'voltage': (cls.VOLTAGE_MIN, cls.VOLTAGE_MAX),
        }
