"""Helper functions and classes."""

# %%
import logging
import os
from datetime import datetime
from enum import Enum

import numpy as np
import pandas as pd
from scipy.io import savemat

logger = logging.getLogger(__name__)

# Largest tolerated |L_d - L_q| (H) for the non-salient machine models
SALIENCY_TOL = np.finfo(float).eps

# Lower bound for |omega_e| (rad/s) in the phase-current cosine law
MIN_OMEGA_E_NORM = 1.

# Speeds below this (rad/s) are treated as standstill
OMEGA_E_EPS = np.finfo(float).eps


# %%
def saturate(x, lower, upper):
    """
    Limit a value into the range [lower, upper].

    Parameters
    ----------
    x : float
        Input value.
    lower : float
        Lower bound.
    upper : float
        Upper bound.

    Returns
    -------
    float
        Limited value.

    Examples
    --------
    >>> from motorlimits.common.utils import saturate
    >>> saturate(1.2, -1, 1)
    1.0
    >>> saturate(-3, -1., 1.)
    -1.0

    """
    return float(np.clip(x, lower, upper))


# %%
class DataExporter:
    """
    Export batch-evaluation results to tabular and MATLAB formats.

    Parameters
    ----------
    data : SimpleNamespace
        Result namespace, e.g. from `calc_torque_envelope` or
        `calc_power_map`. Fields holding arrays of equal size are exported,
        2-D fields are flattened in C order.

    """

    def __init__(self, data):
        self.data = data

    @staticmethod
    def namespace_to_dict(obj):
        """
        Convert a SimpleNamespace object to a dictionary.

        Private attributes and None values are filtered out. Enum members
        are replaced with their names.

        Parameters
        ----------
        obj : SimpleNamespace
            Object with attributes.

        Returns
        -------
        dict
            Dictionary containing the valid attributes.

        """
        if not hasattr(obj, "__dict__"):
            return {}
        out = {}
        for key, value in obj.__dict__.items():
            if key.startswith("_") or value is None:
                continue
            value = np.asarray(value)
            if value.dtype == object:
                value = np.vectorize(
                    lambda v: v.name if isinstance(v, Enum) else v,
                    otypes=[object])(value).astype(str)
            out[key] = value
        return out

    def to_dataframe(self):
        """
        Collect the data into a data frame.

        Returns
        -------
        DataFrame
            One column per field, one row per evaluated point.

        """
        columns = {
            key: np.ravel(value)
            for key, value in self.namespace_to_dict(self.data).items()
        }
        return pd.DataFrame(columns)

    def save_csv(self, base_filename, timestamp=False):
        """
        Save the data into a CSV file.

        Parameters
        ----------
        base_filename : str
            File name without the extension.
        timestamp : bool, optional
            Prefix the file name with the current date and time. The default
            is False.

        Returns
        -------
        str
            Name of the written file.

        """
        filename = self._filename(base_filename, ".csv", timestamp)
        self.to_dataframe().to_csv(filename, index=False)
        logger.info("Data exported to %s", filename)
        return filename

    def save_mat(self, base_filename, timestamp=False):
        """
        Save the data into a MATLAB .mat file.

        Array shapes are preserved.

        Parameters
        ----------
        base_filename : str
            File name without the extension.
        timestamp : bool, optional
            Prefix the file name with the current date and time. The default
            is False.

        Returns
        -------
        str
            Name of the written file.

        """
        filename = self._filename(base_filename, ".mat", timestamp)
        savemat(filename, self.namespace_to_dict(self.data))
        logger.info("Data exported to %s", filename)
        return filename

    @staticmethod
    def _filename(base_filename, ext, timestamp):
        if timestamp:
            head, tail = os.path.split(base_filename)
            prefix = datetime.now().strftime("%Y%m%d_%H%M_")
            base_filename = os.path.join(head, prefix + tail)
        return base_filename + ext
