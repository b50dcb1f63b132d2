"""Tests for the batch evaluation helpers."""
import numpy as np
import pytest

from motorlimits.drive.model import (
    calc_efficiency, calc_motor_power, calc_power_map, calc_torque_envelope,
    calc_torque_limits)
from motorlimits.drive.utils import MotorLimit


def test_envelope_matches_pointwise(par):
    w_M = np.linspace(-300, 300, 13)
    data = calc_torque_envelope(400, w_M, par)
    assert data.upper_limit.shape == w_M.shape
    np.testing.assert_array_equal(data.rotor_vel, w_M)
    np.testing.assert_array_equal(data.voltage, np.full(w_M.shape, 400.))
    for k, w in enumerate(w_M):
        limits = calc_torque_limits(400, w, par)
        assert data.lower_limit[k] == limits.lower_limit
        assert data.upper_limit[k] == limits.upper_limit
        assert data.lower_constraint[k] is limits.lower_constraint
        assert data.upper_constraint[k] is limits.upper_constraint


def test_envelope_power_limited_at_high_speed(par):
    data = calc_torque_envelope(400, [0, 1000], par)
    assert data.upper_constraint[0] == MotorLimit.PHASE_CURRENT
    assert data.upper_constraint[1] == MotorLimit.POWER
    assert data.upper_limit[1] < data.upper_limit[0]


def test_envelope_voltage_array(par):
    voltages = np.array([0., 200., 400.])
    data = calc_torque_envelope(voltages, 50, par)
    assert data.rotor_vel.shape == (3,)
    for k, u in enumerate(voltages):
        assert data.upper_limit[k] == calc_torque_limits(u, 50, par).upper_limit


def test_power_map(lossy_par):
    torques = np.linspace(-100, 100, 5)
    w_M = np.linspace(0, 200, 4)
    data = calc_power_map(400, torques, w_M, lossy_par)
    assert data.power.shape == (5, 4)
    assert data.torque[:, 0] == pytest.approx(torques)
    assert data.rotor_vel[0, :] == pytest.approx(w_M)
    assert data.power[1, 2] == calc_motor_power(
        400, torques[1], w_M[2], lossy_par)
    np.testing.assert_allclose(
        data.mech_power, -data.torque*data.rotor_vel)
    assert np.all(data.loss <= 0)
    eff = data.efficiency[np.isfinite(data.efficiency)]
    assert eff.size > 0
    assert np.all((eff > 0) & (eff < 1))


def test_power_map_reverse_rotation(lossy_par):
    data = calc_power_map(400, [-50, 0, 50], [-200, -100], lossy_par)
    assert np.all(data.loss <= 0)
    eff = data.efficiency[np.isfinite(data.efficiency)]
    assert eff.size > 0
    assert np.all(eff < 1)


def test_power_map_no_efficiency_without_power_flow(lossy_par):
    data = calc_power_map(400, [0, 50], [0, 100], lossy_par)
    # Zero torque or zero speed: no mechanical power
    assert np.isnan(data.efficiency[0, 1])
    assert np.isnan(data.efficiency[1, 0])
    assert np.isfinite(data.efficiency[1, 1])


def test_efficiency_directions():
    eff = calc_efficiency([-125., 80., -10., 0.], [-100., 100., 0., -20.])
    assert eff[0] == pytest.approx(.8)
    assert eff[1] == pytest.approx(.8)
    assert np.isnan(eff[2])
    assert np.isnan(eff[3])


def test_efficiency_losses_exceed_generated_power():
    # Generating shaft power smaller than the losses
    assert np.isnan(calc_efficiency([-5.], [10.])[0])
