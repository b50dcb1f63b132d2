"""Torque envelope and power map plots for machine drives."""

# %%
import matplotlib.pyplot as plt
import numpy as np

from motorlimits.drive.utils._utils import MotorLimit


# %%
def plot_torque_envelope(data, ax=None):
    """
    Plot the torque limits as a function of the rotor speed.

    Segments limited by the voltage (power) are drawn with dashed lines and
    segments limited by the phase current with solid lines.

    Parameters
    ----------
    data : SimpleNamespace
        Output of `calc_torque_envelope`.
    ax : Axes, optional
        Axes to draw on. A new figure is created if not given.

    Returns
    -------
    Axes
        Axes containing the plot.

    """
    if ax is None:
        _, ax = plt.subplots()

    w_M = np.ravel(data.rotor_vel)
    for name, color in (("upper", "b"), ("lower", "r")):
        tau = np.ravel(getattr(data, name + "_limit"))
        power_limited = np.ravel(
            getattr(data, name + "_constraint")) == MotorLimit.POWER
        ax.plot(
            w_M, np.where(power_limited, np.nan, tau), color + "-",
            label=f"{name}, phase current")
        ax.plot(
            w_M, np.where(power_limited, tau, np.nan), color + "--",
            label=f"{name}, voltage")

    ax.set_xlabel("Rotor speed (rad/s)")
    ax.set_ylabel("Torque (Nm)")
    ax.legend()

    return ax


# %%
def plot_power_map(data, ax=None, quantity="loss"):
    """
    Plot a torque-speed map of the power, loss, or efficiency.

    Parameters
    ----------
    data : SimpleNamespace
        Output of `calc_power_map`.
    ax : Axes, optional
        Axes to draw on. A new figure is created if not given.
    quantity : str, optional
        Field of `data` to plot: "power", "loss", or "efficiency". The
        default is "loss".

    Returns
    -------
    Axes
        Axes containing the plot.

    """
    if quantity not in ("power", "loss", "efficiency"):
        raise ValueError(f"Cannot plot quantity {quantity!r}")
    if ax is None:
        _, ax = plt.subplots()

    values = getattr(data, quantity)
    cs = ax.contourf(data.rotor_vel, data.torque, values, levels=20)
    labels = {
        "power": "Power (W)",
        "loss": "Loss (W)",
        "efficiency": "Efficiency"
    }
    ax.figure.colorbar(cs, ax=ax, label=labels[quantity])
    ax.set_xlabel("Rotor speed (rad/s)")
    ax.set_ylabel("Torque (Nm)")

    return ax
