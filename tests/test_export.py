"""Tests for data export and plotting."""
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
from scipy.io import loadmat

from motorlimits.common.utils import DataExporter
from motorlimits.drive.model import calc_power_map, calc_torque_envelope
from motorlimits.drive.utils import plot_power_map, plot_torque_envelope


@pytest.fixture
def envelope(par):
    return calc_torque_envelope(400, np.linspace(0, 1000, 11), par)


@pytest.fixture
def power_map(lossy_par):
    return calc_power_map(
        400, np.linspace(-100, 100, 5), np.linspace(0, 200, 4), lossy_par)


def test_dataframe(envelope):
    df = DataExporter(envelope).to_dataframe()
    assert len(df) == 11
    assert set(df.columns) == {
        "rotor_vel", "voltage", "lower_limit", "upper_limit",
        "lower_constraint", "upper_constraint"
    }
    assert set(df["upper_constraint"]) <= {"PHASE_CURRENT", "POWER"}
    assert df["upper_constraint"].iloc[0] == "PHASE_CURRENT"
    assert df["upper_limit"].to_numpy() == pytest.approx(envelope.upper_limit)


def test_dataframe_flattens_maps(power_map):
    df = DataExporter(power_map).to_dataframe()
    assert len(df) == 20
    assert df["power"].to_numpy() == pytest.approx(power_map.power.ravel())


def test_save_csv(envelope, tmp_path):
    filename = DataExporter(envelope).save_csv(str(tmp_path/"envelope"))
    assert filename.endswith("envelope.csv")
    df = pd.read_csv(filename)
    assert df["lower_limit"].to_numpy() == pytest.approx(envelope.lower_limit)


def test_save_csv_timestamp(envelope, tmp_path):
    filename = DataExporter(envelope).save_csv(
        str(tmp_path/"envelope"), timestamp=True)
    assert list(tmp_path.glob("*_envelope.csv"))
    assert filename.startswith(str(tmp_path))


def test_save_mat_keeps_shape(power_map, tmp_path):
    filename = DataExporter(power_map).save_mat(str(tmp_path/"map"))
    mat = loadmat(filename)
    assert mat["power"].shape == (5, 4)
    np.testing.assert_allclose(mat["loss"], power_map.loss)


def test_plot_torque_envelope(envelope):
    ax = plot_torque_envelope(envelope)
    assert len(ax.get_lines()) == 4
    plt.close(ax.figure)


def test_plot_power_map(power_map):
    fig, ax = plt.subplots()
    assert plot_power_map(power_map, ax=ax, quantity="power") is ax
    plt.close(fig)


def test_plot_power_map_invalid_quantity(power_map):
    with pytest.raises(ValueError):
        plot_power_map(power_map, quantity="torque")
