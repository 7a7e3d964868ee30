"""Unit tests for SimulationParameters."""
import dataclasses
import pytest
from bounce.params import SimulationParameters


def test_defaults_match_reference_constants(default_params):
    assert default_params.gravity == 0.0
    assert default_params.dt == 0.01
    assert default_params.stiffness == 323.9
    assert default_params.damping == 0.9
    assert default_params.lx == 3.2
    assert default_params.lx_min == -0.5
    assert default_params.lz_max == 10.32


@pytest.mark.parametrize("kwargs", [
    {"dt": 0.0},
    {"dt": -0.01},
    {"stiffness": -1.0},
    {"damping": -0.1},
    {"lx": -1.0},
    {"lx_min": 3.2},
    {"lz_max": 0.0},
    {"gravity": float("nan")},
])
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(ValueError):
        SimulationParameters(**kwargs)


def test_parameters_are_frozen(default_params):
    with pytest.raises(dataclasses.FrozenInstanceError):
        default_params.dt = 0.1


def test_with_overrides_skips_none(default_params):
    params = default_params.with_overrides(gravity=9.81, dt=None)
    assert params.gravity == 9.81
    assert params.dt == 0.01
    assert default_params.gravity == 0.0
