#!/usr/bin/env python3
"""
Example: Torque-slip characteristic and start/stop of the default motor.

4 poles, 400 V, Rs = 0.5 Ω, Xs = Xr = 1.5 Ω, Rr = 0.6 Ω, Xm = 30 Ω.
"""

from induction_motor_slip import (
    MotorSimulator,
    SimulationSettings,
    create_default_parameters,
    calculate_slip_at_max_torque,
    calculate_max_torque,
    calculate_starting_torque,
)


def main():
    """Run the example."""

    print("=" * 70)
    print("INDUCTION MOTOR SLIP - Default Motor")
    print("=" * 70)

    params = create_default_parameters()
    print("\nMotor Parameters:")
    print(params)

    print("\n" + "=" * 70)
    print("CHARACTERISTIC POINTS")
    print("=" * 70)
    print(f"  Synchronous speed: {params.sync_speed:.0f} rpm")
    print(f"  Slip at max torque: {calculate_slip_at_max_torque(params):.4f}")
    print(f"  Max torque: {calculate_max_torque(params):.1f} Nm")
    print(f"  Starting torque: {calculate_starting_torque(params):.1f} Nm")

    sim = MotorSimulator(params, SimulationSettings(verbose=True))

    print("\n" + "=" * 70)
    print("TORQUE-SLIP CHARACTERISTIC")
    print("=" * 70)
    print(f"\n{'Slip':>8} {'Speed [rpm]':>12} {'Torque [Nm]':>12}")
    print("-" * 34)
    for point in sim.curve[::10]:  # Every tenth point
        print(f"{point.slip:8.2f} {point.speed:12.0f} {point.torque:12.1f}")

    print("\n" + "=" * 70)
    print("START / STOP")
    print("=" * 70)

    # Let the motor coast to standstill, then switch it on
    sim.advance(97)
    print(f"\nAfter {sim.tick_count} ticks stopped:")
    print(sim.readout)

    sim.set_running(True)
    sim.advance(97)
    print(f"\nAfter {sim.tick_count} ticks:")
    print(sim.readout)

    return sim


if __name__ == "__main__":
    sim = main()
