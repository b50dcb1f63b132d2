"""Steady-state torque limit and loss models of PM synchronous motor drives."""
from motorlimits.drive.model._machine import (
    VoltageCircle,
    calc_voltage_circle,
)
from motorlimits.drive.model._limits import calc_torque_limits
from motorlimits.drive.model._power import (
    calc_controller_loss,
    calc_motor_power,
)
from motorlimits.drive.model._envelope import (
    calc_efficiency,
    calc_power_map,
    calc_torque_envelope,
)

__all__ = [
    "VoltageCircle",
    "calc_voltage_circle",
    "calc_torque_limits",
    "calc_controller_loss",
    "calc_motor_power",
    "calc_efficiency",
    "calc_power_map",
    "calc_torque_envelope",
]
