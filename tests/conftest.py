"""Shared fixtures."""
import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from motorlimits.drive.utils import MotorPars  # noqa: E402


@pytest.fixture
def par():
    """Non-salient machine with permissive current command limits."""
    return MotorPars(
        n_p=8,
        R_s=.1,
        L_d=1e-3,
        L_q=1e-3,
        psi_f=.05,
        modulation_limit=.98,
        phase_current_cmd_limit=200,
        iq_cmd_lower_limit=-1000,
        iq_cmd_upper_limit=1000)


@pytest.fixture
def lossy_par(par):
    """Same machine with all loss coefficients set."""
    return par.replace(
        omega_loss_coefficient_cubic=1e-5,
        omega_loss_coefficient_sq=1e-3,
        omega_loss_coefficient_lin=.1,
        hysteresis_loss_coefficient=1e-6,
        rds_on=.01,
        specific_switching_loss=1e-6,
        fixed_loss_sq_coeff=1e-9,
        fixed_loss_lin_coeff=1e-7,
        switching_frequency=1e4)
