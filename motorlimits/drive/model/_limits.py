"""
Torque limits of a voltage-limited PM synchronous motor drive.

The q-axis current range is first bounded by the current command limits,
then by the voltage-limited current disc, and finally by the intersection of
the phase-current circle with that disc. The machine is assumed non-salient.

"""
import numpy as np

from motorlimits.common.utils import MIN_OMEGA_E_NORM, OMEGA_E_EPS, saturate
from motorlimits.drive.model._machine import calc_voltage_circle
from motorlimits.drive.utils import MotorLimit, TorqueLimits


# %%
def calc_torque_limits(voltage, rotor_vel, par):
    """
    Compute the achievable torque range.

    Parameters
    ----------
    voltage : float
        Inverter voltage (V). Negative values are treated as zero.
    rotor_vel : float
        Mechanical rotor speed (rad/s).
    par : MotorPars
        Motor parameters.

    Returns
    -------
    TorqueLimits
        Lower and upper torque limits (Nm) and the constraints setting them.

    Raises
    ------
    SaliencyError
        If the machine is salient.

    Examples
    --------
    >>> from motorlimits.drive.model import calc_torque_limits
    >>> from motorlimits.drive.utils import MotorPars
    >>> par = MotorPars(
    ...     n_p=8, R_s=.1, L_d=1e-3, L_q=1e-3, psi_f=.05,
    ...     phase_current_cmd_limit=200, modulation_limit=.98)
    >>> limits = calc_torque_limits(400, 0, par)
    >>> round(limits.upper_limit, 6)
    120.0
    >>> limits.upper_constraint
    <MotorLimit.PHASE_CURRENT: 'phase_current'>

    """
    circ = calc_voltage_circle(voltage, rotor_vel, par)
    L, R_s, psi_f = par.L_q, par.R_s, par.psi_f
    i_lim = par.phase_current_cmd_limit
    w_e, u_dq_max, z2 = circ.w_e, circ.u_dq_max, circ.z2

    # Hard q-axis current command limits
    i_q_lower, i_q_upper = par.iq_cmd_lower_limit, par.iq_cmd_upper_limit
    lower_constraint = upper_constraint = MotorLimit.PHASE_CURRENT

    # Voltage (power) limit
    if i_q_lower < circ.i_q_center - circ.radius:
        lower_constraint = MotorLimit.POWER
        i_q_lower = circ.i_q_center - circ.radius
    if i_q_upper > circ.i_q_center + circ.radius:
        upper_constraint = MotorLimit.POWER
        i_q_upper = circ.i_q_center + circ.radius

    # Intersections of the phase-current circle and the voltage limit
    cos_idq = (u_dq_max**2 - z2*i_lim**2 - (psi_f*w_e)**2)/(
        2*max(abs(w_e), MIN_OMEGA_E_NORM)*psi_f*i_lim*np.sqrt(z2))
    theta_delta = np.arccos(saturate(cos_idq, -1., 1.))
    theta_ref = np.arctan(R_s/(w_e*L)) if abs(w_e) > OMEGA_E_EPS else 0.

    # Phase-current limit, lower
    theta = min(theta_ref - theta_delta, -.5*np.pi)
    if (circ.i_d_center < i_lim*np.cos(theta)
            and i_lim*np.sin(theta) > i_q_lower):
        lower_constraint = MotorLimit.PHASE_CURRENT
        i_q_lower = i_lim*np.sin(theta)

    # Phase-current limit, upper
    theta = max(theta_ref + theta_delta, .5*np.pi)
    if (circ.i_d_center < i_lim*np.cos(theta)
            and i_lim*np.sin(theta) < i_q_upper):
        upper_constraint = MotorLimit.PHASE_CURRENT
        i_q_upper = i_lim*np.sin(theta)

    k_tau = 1.5*par.n_p*psi_f
    return TorqueLimits(
        lower_limit=float(k_tau*i_q_lower),
        upper_limit=float(k_tau*i_q_upper),
        lower_constraint=lower_constraint,
        upper_constraint=upper_constraint)
