"""Batch evaluation of the torque limits and the power over operating grids."""
from types import SimpleNamespace

import numpy as np

from motorlimits.drive.model._limits import calc_torque_limits
from motorlimits.drive.model._power import calc_motor_power


# %%
def calc_torque_envelope(voltage, rotor_vels, par):
    """
    Compute the torque limits over a range of rotor speeds.

    Parameters
    ----------
    voltage : float | array_like
        Inverter voltage (V), broadcastable to `rotor_vels`.
    rotor_vels : array_like
        Mechanical rotor speeds (rad/s).
    par : MotorPars
        Motor parameters.

    Returns
    -------
    SimpleNamespace
        Envelope data, containing the following fields:

            rotor_vel : ndarray
                Mechanical rotor speeds (rad/s).
            voltage : ndarray
                Inverter voltages (V).
            lower_limit : ndarray
                Lower torque limits (Nm).
            upper_limit : ndarray
                Upper torque limits (Nm).
            lower_constraint : ndarray of MotorLimit
                Constraints at the lower limits.
            upper_constraint : ndarray of MotorLimit
                Constraints at the upper limits.

    """
    voltage, rotor_vel = np.broadcast_arrays(
        np.asarray(voltage, dtype=float), np.asarray(rotor_vels, dtype=float))
    data = SimpleNamespace(
        rotor_vel=rotor_vel.copy(),
        voltage=voltage.copy(),
        lower_limit=np.zeros(rotor_vel.shape),
        upper_limit=np.zeros(rotor_vel.shape),
        lower_constraint=np.empty(rotor_vel.shape, dtype=object),
        upper_constraint=np.empty(rotor_vel.shape, dtype=object))

    for idx in np.ndindex(rotor_vel.shape):
        limits = calc_torque_limits(voltage[idx], rotor_vel[idx], par)
        data.lower_limit[idx] = limits.lower_limit
        data.upper_limit[idx] = limits.upper_limit
        data.lower_constraint[idx] = limits.lower_constraint
        data.upper_constraint[idx] = limits.upper_constraint

    return data


# %%
def calc_power_map(voltage, torques, rotor_vels, par):
    """
    Compute the electrical power and efficiency over a torque-speed grid.

    Parameters
    ----------
    voltage : float
        Inverter voltage (V).
    torques : array_like
        Torques (Nm).
    rotor_vels : array_like
        Mechanical rotor speeds (rad/s).
    par : MotorPars
        Motor parameters.

    Returns
    -------
    SimpleNamespace
        Map data, containing the following fields, each of shape
        `(len(torques), len(rotor_vels))`:

            torque : ndarray
                Torques (Nm).
            rotor_vel : ndarray
                Mechanical rotor speeds (rad/s).
            power : ndarray
                Electrical power (W), positive for generation.
            mech_power : ndarray
                Mechanical power (W), positive for generation.
            loss : ndarray
                Total loss (W), non-positive.
            efficiency : ndarray
                Efficiency in the direction of the power flow. NaN where no
                power is transferred.

    """
    rotor_vel, torque = np.meshgrid(
        np.asarray(rotor_vels, dtype=float), np.asarray(torques, dtype=float))
    power = np.zeros(torque.shape)
    for idx in np.ndindex(torque.shape):
        power[idx] = calc_motor_power(voltage, torque[idx], rotor_vel[idx], par)

    mech_power = -torque*rotor_vel
    data = SimpleNamespace(
        torque=torque,
        rotor_vel=rotor_vel,
        power=power,
        mech_power=mech_power,
        loss=power - mech_power,
        efficiency=calc_efficiency(power, mech_power))

    return data


# %%
def calc_efficiency(power, mech_power):
    """
    Compute the efficiency in the direction of the power flow.

    When motoring, the mechanical output is divided by the electrical input.
    When generating, the electrical output is divided by the mechanical input.

    Parameters
    ----------
    power : array_like
        Electrical power (W), positive for generation.
    mech_power : array_like
        Mechanical power (W), positive for generation.

    Returns
    -------
    ndarray
        Efficiency. NaN where the input power is zero or where the losses
        consume all of it.

    Examples
    --------
    >>> from motorlimits.drive.model import calc_efficiency
    >>> calc_efficiency([-125., 80.], [-100., 100.])
    array([0.8, 0.8])

    """
    power = np.asarray(power, dtype=float)
    mech_power = np.asarray(mech_power, dtype=float)

    # Motoring: power and mech_power negative, generating: both positive
    p_in = np.where(mech_power < 0, -power, mech_power)
    p_out = np.where(mech_power < 0, -mech_power, power)
    useful = (p_in > 0) & (p_out > 0)

    eff = np.full(np.shape(power), np.nan)
    np.divide(p_out, p_in, out=eff, where=useful)
    return eff
