"""
Axial-flux PMSM, torque envelope and loss map
=============================================

This example computes the torque limits of an axial-flux PM synchronous
motor drive over its speed range and the total motor and inverter loss over
the torque-speed plane.

"""
# %%
import matplotlib.pyplot as plt
import numpy as np

from motorlimits.common.utils import DataExporter
from motorlimits.drive import model
from motorlimits.drive.utils import (
    MotorPars, plot_power_map, plot_torque_envelope)

# %%
# Configure the motor and inverter parameters.

par = MotorPars(
    n_p=15,
    R_s=.06,
    L_d=1.2e-4,
    L_q=1.2e-4,
    psi_f=.05,
    modulation_limit=.95,
    phase_current_cmd_limit=250,
    iq_cmd_lower_limit=-250,
    iq_cmd_upper_limit=250,
    omega_loss_coefficient_cubic=1e-5,
    omega_loss_coefficient_sq=1e-3,
    omega_loss_coefficient_lin=.1,
    hysteresis_loss_coefficient=2e-6,
    rds_on=4e-3,
    specific_switching_loss=1e-9,
    fixed_loss_sq_coeff=1e-11,
    fixed_loss_lin_coeff=5e-8,
    switching_frequency=15e3)

# DC-bus voltage (V)
u_dc = 720

# %%
# Compute the torque envelope and the loss map.

w_M = np.linspace(-250, 250, 501)
envelope = model.calc_torque_envelope(u_dc, w_M, par)

tau_max = np.max(envelope.upper_limit)
power_map = model.calc_power_map(
    u_dc, np.linspace(-tau_max, tau_max, 61), np.linspace(-250, 250, 101), par)

# %%
# Plot the results and export the envelope.

fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(6, 8))
plot_torque_envelope(envelope, ax=ax1)
plot_power_map(power_map, ax=ax2)
plt.show()

DataExporter(envelope).save_csv("axial_flux_pmsm_envelope")
