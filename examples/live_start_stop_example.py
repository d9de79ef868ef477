#!/usr/bin/env python3
"""
Drive the simulator from its periodic timer, as an interactive front end
would.

The motor is switched on, left to settle, switched off mid-way and the
recorded slip and torque are plotted against time.
"""

from __future__ import annotations

from pathlib import Path
import asyncio
import sys

import matplotlib.pyplot as plt

# Allow running directly from the repository root.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from induction_motor_slip import (
    MotorSimulator,
    SimulationSettings,
    create_default_parameters,
    plot_slip_torque_curve,
)

TICK_INTERVAL = 0.02   # Faster than the 100 ms default to keep the demo short


def print_readout(readout) -> None:
    print(
        f"{readout.status:>14} | slip {readout.slip_percent:5.1f}% | "
        f"{readout.actual_speed:6.0f} rpm | {readout.torque:6.1f} Nm | "
        f"rotor period {readout.rotor_period:4.1f} s"
    )


async def run_demo() -> MotorSimulator:
    settings = SimulationSettings(tick_interval=TICK_INTERVAL, verbose=True)
    sim = MotorSimulator(create_default_parameters(), settings)
    unsubscribe = sim.subscribe(print_readout)

    await sim.start()
    await sim.toggle(True)
    await sim.run_for(20)

    # Switch off before the steady slip is reached
    await sim.toggle(False)
    await sim.run_for(30)

    await sim.toggle(True)
    await sim.run_for(60)

    await sim.stop()
    unsubscribe()
    return sim


def plot_run(sim: MotorSimulator) -> None:
    fig, axes = plt.subplots(1, 3, figsize=(15, 4))
    sim.history.plot('slip', ax=axes[0])
    sim.history.plot('torque', ax=axes[1])
    plot_slip_torque_curve(sim.curve, current_slip=sim.slip, ax=axes[2])
    fig.suptitle("Start / Stop Relaxation", fontsize=14)
    fig.tight_layout(rect=[0, 0.03, 1, 0.95])
    plt.show()


def main() -> None:
    sim = asyncio.run(run_demo())
    plot_run(sim)


if __name__ == "__main__":
    main()
