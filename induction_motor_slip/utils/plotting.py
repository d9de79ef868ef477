"""
Plotting of the torque-slip characteristic (requires matplotlib).
"""

from typing import Optional, Sequence

from ..calculations.torque_slip import CurvePoint, find_peak_point


def plot_slip_torque_curve(
    curve: Sequence[CurvePoint],
    current_slip: Optional[float] = None,
    ax=None
):
    """
    Plot torque against slip with reference lines.

    A dashed line marks the sampled maximum torque and, if given, a solid
    line marks the current operating slip.

    Args:
        curve: Sampled torque-slip curve
        current_slip: Slip of the live operating point
        ax: Existing matplotlib Axes (a new figure is created if None)

    Returns:
        The matplotlib Axes
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))

    slips_pct = [point.slip * 100 for point in curve]
    torques = [point.torque for point in curve]
    peak = find_peak_point(curve)

    ax.plot(slips_pct, torques, color="tab:blue", linewidth=2, label="Torque")
    ax.axvline(peak.slip * 100, color="#ff7300", linestyle="--",
               label=f"Max Torque ({peak.torque:.1f} Nm)")
    if current_slip is not None:
        ax.axvline(current_slip * 100, color="#82ca9d", linewidth=2,
                   label=f"Current ({current_slip * 100:.1f}%)")

    ax.set_xlabel("Slip [%]")
    ax.set_ylabel("Torque [Nm]")
    ax.set_title("Slip-Torque Curve")
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.3)
    ax.legend()
    return ax
