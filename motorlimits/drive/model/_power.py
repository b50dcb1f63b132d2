"""
Electrical power of a PM synchronous motor drive.

The motor and inverter losses are computed directly from the operating
point instead of an efficiency lookup table. Power is positive for
generation and losses are negative.

"""
import logging

import numpy as np

from motorlimits.drive.model._machine import calc_voltage_circle

logger = logging.getLogger(__name__)


# %%
def calc_motor_power(voltage, torque, rotor_vel, par):
    """
    Compute the electrical power for a torque at a given speed.

    The current vector follows the id = 0 line until the voltage limit is
    reached, after which the id needed to stay on the voltage limit is drawn.
    An operating point outside the voltage-limited disc is evaluated with
    the d-axis current of the disc center. Torque from hysteresis and eddy
    currents is ignored.

    Parameters
    ----------
    voltage : float
        Inverter voltage (V). Negative values are treated as zero.
    torque : float
        Electromagnetic torque (Nm).
    rotor_vel : float
        Mechanical rotor speed (rad/s).
    par : MotorPars
        Motor parameters.

    Returns
    -------
    float
        Electrical power (W), positive for generation.

    Raises
    ------
    SaliencyError
        If the machine is salient.

    """
    circ = calc_voltage_circle(voltage, rotor_vel, par)
    voltage = max(voltage, 0.)

    i_q = torque/(1.5*par.n_p*par.psi_f)
    i_sq = i_q**2

    i_q_height = i_q - circ.i_q_center
    if abs(i_q_height) > circ.radius:
        logger.debug(
            "Operating point outside the voltage limit: i_q=%g A, "
            "i_q_center=%g A, radius=%g A", i_q, circ.i_q_center, circ.radius)
        i_sq += circ.i_d_center**2
    else:
        i_d = circ.i_d_center + np.sqrt(circ.radius**2 - i_q_height**2)
        if i_d < 0:
            i_sq += i_d**2

    mech_power = -torque*rotor_vel

    # Three phases, peak to rms
    resistive_loss = -1.5*i_sq*par.R_s

    # Friction and windage, evaluated on the speed magnitude
    w_M = abs(rotor_vel)
    speed_loss = -(
        par.omega_loss_coefficient_cubic*w_M**2 +
        par.omega_loss_coefficient_sq*w_M +
        par.omega_loss_coefficient_lin)*w_M

    hysteresis_loss = -.5*par.hysteresis_loss_coefficient*i_sq*rotor_vel**2

    controller_loss = calc_controller_loss(voltage, i_sq, par)

    return float(
        mech_power + resistive_loss + speed_loss + hysteresis_loss +
        controller_loss)


# %%
def calc_controller_loss(voltage, peak_phase_current_sq, par):
    """
    Compute the inverter semiconductor losses.

    The conduction loss assumes synchronous switching, i.e., one switch of
    each half bridge always conducts. The switching loss consists of a part
    proportional to the commutated voltage and current and of a part due to
    the output capacitance, modeled as linear in voltage. Ripple current at
    the switching frequency is not taken into account.

    Parameters
    ----------
    voltage : float
        Inverter voltage (V).
    peak_phase_current_sq : float
        Squared peak phase current (A²).
    par : MotorPars
        Motor parameters.

    Returns
    -------
    float
        Inverter loss (W), non-positive.

    Examples
    --------
    >>> from motorlimits.drive.model import calc_controller_loss
    >>> from motorlimits.drive.utils import MotorPars
    >>> par = MotorPars(
    ...     n_p=8, R_s=.1, L_d=1e-3, L_q=1e-3, psi_f=.05,
    ...     phase_current_cmd_limit=200, rds_on=.01)
    >>> calc_controller_loss(400, 100, par)
    -1.5

    """
    conduction_loss = -1.5*peak_phase_current_sq*par.rds_on

    variable_switching_loss = -(
        6/np.pi*voltage*np.sqrt(peak_phase_current_sq)*
        par.specific_switching_loss)
    fixed_switching_loss = -3*(
        par.fixed_loss_sq_coeff*voltage + par.fixed_loss_lin_coeff)*voltage

    return float(
        conduction_loss + par.switching_frequency*
        (variable_switching_loss + fixed_switching_loss))
