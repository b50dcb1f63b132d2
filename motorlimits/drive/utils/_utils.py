"""Dataclasses for the parameters and results of the machine drive models."""

# %%
import logging
from dataclasses import dataclass, fields, replace
from enum import Enum

import numpy as np

from motorlimits.common.utils import SALIENCY_TOL

logger = logging.getLogger(__name__)


# %%
class SaliencyError(ValueError):
    """Machine parameters violate the non-salient assumption (L_d != L_q)."""


# %%
class MotorLimit(Enum):
    """Physical constraint that determines a torque limit."""
    PHASE_CURRENT = "phase_current"
    POWER = "power"


# %%
@dataclass(frozen=True)
class TorqueLimits:
    """
    Achievable torque range.

    Parameters
    ----------
    lower_limit : float
        Lower torque limit (Nm).
    upper_limit : float
        Upper torque limit (Nm).
    lower_constraint : MotorLimit
        Constraint active at the lower limit.
    upper_constraint : MotorLimit
        Constraint active at the upper limit.

    """
    lower_limit: float
    upper_limit: float
    lower_constraint: MotorLimit
    upper_constraint: MotorLimit


# %%
@dataclass(frozen=True)
class MotorPars:
    # pylint: disable=too-many-instance-attributes
    """
    Parameters of a PM synchronous motor and its inverter.

    The loss coefficients default to zero, giving a lossless inverter and a
    machine with copper losses only.

    Parameters
    ----------
    n_p : int
        Number of pole pairs.
    R_s : float
        Stator resistance (Ω).
    L_d : float
        d-axis inductance (H).
    L_q : float
        q-axis inductance (H).
    psi_f : float
        Permanent-magnet flux linkage (Vs).
    phase_current_cmd_limit : float
        Peak phase-current limit of the inverter (A).
    modulation_limit : float, optional
        Usable fraction of the voltage for sinusoidal modulation. The default
        is 1.
    iq_cmd_lower_limit : float, optional
        Lower limit of the q-axis current command (A). The default is -inf.
    iq_cmd_upper_limit : float, optional
        Upper limit of the q-axis current command (A). The default is inf.
    omega_loss_coefficient_cubic : float, optional
        Cubic coefficient of the speed-dependent loss (W/(rad/s)³).
    omega_loss_coefficient_sq : float, optional
        Quadratic coefficient of the speed-dependent loss (W/(rad/s)²).
    omega_loss_coefficient_lin : float, optional
        Linear coefficient of the speed-dependent loss (W/(rad/s)).
    hysteresis_loss_coefficient : float, optional
        Hysteresis and eddy-current loss coefficient (Ω/(rad/s)²).
    rds_on : float, optional
        On-state resistance of an inverter switch (Ω).
    specific_switching_loss : float, optional
        Switching energy per commutated volt-ampere (J/(VA)).
    fixed_loss_sq_coeff : float, optional
        Quadratic coefficient of the output-capacitance loss (J/V²).
    fixed_loss_lin_coeff : float, optional
        Linear coefficient of the output-capacitance loss (J/V).
    switching_frequency : float, optional
        Inverter switching frequency (Hz).

    Examples
    --------
    >>> from motorlimits.drive.utils import MotorPars
    >>> par = MotorPars(
    ...     n_p=8, R_s=.1, L_d=1e-3, L_q=1e-3, psi_f=.05,
    ...     phase_current_cmd_limit=200)
    >>> par.replace(R_s=.2).R_s
    0.2

    """
    n_p: int
    R_s: float
    L_d: float
    L_q: float
    psi_f: float
    phase_current_cmd_limit: float
    modulation_limit: float = 1.
    iq_cmd_lower_limit: float = -np.inf
    iq_cmd_upper_limit: float = np.inf
    omega_loss_coefficient_cubic: float = 0.
    omega_loss_coefficient_sq: float = 0.
    omega_loss_coefficient_lin: float = 0.
    hysteresis_loss_coefficient: float = 0.
    rds_on: float = 0.
    specific_switching_loss: float = 0.
    fixed_loss_sq_coeff: float = 0.
    fixed_loss_lin_coeff: float = 0.
    switching_frequency: float = 0.

    def __post_init__(self):
        if self.n_p < 1:
            raise ValueError(f"n_p must be at least 1, got {self.n_p}")
        # The impedance and the cosine law divide by these
        for name in ("R_s", "psi_f", "phase_current_cmd_limit"):
            if not getattr(self, name) > 0:
                raise ValueError(
                    f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_dict(cls, pars):
        """
        Create parameters from a mapping.

        Parameters
        ----------
        pars : dict
            Parameter names and values, e.g. read from a configuration file.

        Returns
        -------
        MotorPars
            Motor parameters.

        Raises
        ------
        KeyError
            If the mapping contains unknown parameter names.

        """
        known = {f.name for f in fields(cls)}
        unknown = set(pars) - known
        if unknown:
            raise KeyError(f"Unknown motor parameters: {sorted(unknown)}")
        return cls(**pars)

    def replace(self, **changes):
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def check_non_salient(self, tol=SALIENCY_TOL):
        """
        Check that the machine can be treated as non-salient.

        Parameters
        ----------
        tol : float, optional
            Largest allowed |L_d - L_q| (H). The default is `SALIENCY_TOL`.

        Raises
        ------
        SaliencyError
            If |L_d - L_q| exceeds `tol`.

        """
        saliency = abs(self.L_d - self.L_q)
        if saliency > tol:
            logger.error(
                "Salient machine not supported: |L_d - L_q| = %g H", saliency)
            raise SaliencyError(
                f"|L_d - L_q| = {saliency:g} H exceeds the tolerance {tol:g} H")
