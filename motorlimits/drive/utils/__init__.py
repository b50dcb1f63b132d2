"""Parameters, results, and plotting of machine drive models."""
from motorlimits.drive.utils._utils import (
    MotorLimit,
    MotorPars,
    SaliencyError,
    TorqueLimits,
)
from motorlimits.drive.utils._plots import (
    plot_power_map,
    plot_torque_envelope,
)

__all__ = [
    "MotorLimit",
    "MotorPars",
    "SaliencyError",
    "TorqueLimits",
    "plot_power_map",
    "plot_torque_envelope",
]
