"""Common utilities."""
from motorlimits.common.utils._utils import (
    DataExporter,
    MIN_OMEGA_E_NORM,
    OMEGA_E_EPS,
    SALIENCY_TOL,
    saturate,
)

__all__ = [
    "DataExporter",
    "MIN_OMEGA_E_NORM",
    "OMEGA_E_EPS",
    "SALIENCY_TOL",
    "saturate",
]
