"""
Steady-state voltage limit of a non-salient PM synchronous machine.

Under the voltage limit `|u_s| <= u_dq_max`, the feasible steady-state
current vectors of a non-salient machine form a disc in the dq plane. Peak-
valued space vectors are used.

"""
from dataclasses import dataclass

import numpy as np


# %%
@dataclass(frozen=True)
class VoltageCircle:
    """
    Voltage-limited current disc and the quantities it is derived from.

    Parameters
    ----------
    w_e : float
        Electrical angular speed (rad/s).
    u_dq_max : float
        Maximum dq voltage magnitude (V).
    z2 : float
        Squared impedance magnitude (Ω²).
    i_d_center : float
        d-axis current at the center of the disc (A).
    i_q_center : float
        q-axis current at the center of the disc (A).
    radius : float
        Radius of the disc (A).

    """
    w_e: float
    u_dq_max: float
    z2: float
    i_d_center: float
    i_q_center: float
    radius: float


# %%
def calc_voltage_circle(voltage, rotor_vel, par):
    """
    Compute the voltage-limited current disc.

    Negative voltages are treated as zero.

    Parameters
    ----------
    voltage : float
        Inverter voltage (V).
    rotor_vel : float
        Mechanical rotor speed (rad/s).
    par : MotorPars
        Motor parameters.

    Returns
    -------
    VoltageCircle
        Disc center, radius, and the intermediate quantities.

    Raises
    ------
    SaliencyError
        If the machine is salient.

    """
    par.check_non_salient()
    voltage = max(voltage, 0.)

    # The q-axis inductance dominates unless heavily flux weakening
    L, R_s, psi_f = par.L_q, par.R_s, par.psi_f
    w_e = rotor_vel*par.n_p
    u_dq_max = voltage/np.sqrt(3)*par.modulation_limit
    z2 = R_s**2 + (L*w_e)**2

    i_d_center = -w_e**2*L*psi_f/z2
    i_q_center = -R_s*w_e*psi_f/z2
    radius = u_dq_max/np.sqrt(z2)

    return VoltageCircle(
        w_e=float(w_e),
        u_dq_max=float(u_dq_max),
        z2=float(z2),
        i_d_center=float(i_d_center),
        i_q_center=float(i_q_center),
        radius=float(radius))
