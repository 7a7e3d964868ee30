"""Unit tests for body data types and structure-of-arrays conversion."""
import pytest
import numpy as np
from bounce.types import Body, ExecutionMode, body_from_soa, create_soa_body_data, validate_soa


def test_execution_mode_enum():
    assert ExecutionMode("pure") == ExecutionMode.PURE
    assert ExecutionMode("tensor") == ExecutionMode.TENSOR
    with pytest.raises(ValueError):
        ExecutionMode("wgpu")


def test_body_defaults_to_rest_at_origin():
    body = Body(mass=1.0, radius=0.5)
    assert np.array_equal(body.r, np.zeros(3))
    assert np.array_equal(body.v, np.zeros(3))
    assert np.array_equal(body.f, np.zeros(3))
    assert body.r.dtype == np.float64


@pytest.mark.parametrize("mass,radius", [(0.0, 0.1), (-1.0, 0.1), (1.0, 0.0), (1.0, -0.2)])
def test_body_rejects_non_positive_mass_or_radius(mass, radius):
    with pytest.raises(ValueError):
        Body(mass=mass, radius=radius)


def test_body_rejects_wrong_vector_shape():
    with pytest.raises(ValueError, match="Position"):
        Body(mass=1.0, radius=0.1, r=[1.0, 2.0])


def test_create_soa_body_data_two_bodies():
    bodies = [
        Body(mass=1.0, radius=0.1, r=[1, 2, 3], v=[0, 0, 1]),
        Body(mass=2.0, radius=0.2, r=[4, 5, 6]),
    ]
    soa = create_soa_body_data(bodies)

    assert soa['x'].shape == (2, 3)
    assert soa['v'].shape == (2, 3)
    assert soa['f'].shape == (2, 3)
    assert soa['mass'].shape == (2,)
    assert soa['radius'].shape == (2,)
    assert np.allclose(soa['x'][1], [4, 5, 6])
    assert soa['mass'][1] == 2.0

    body = body_from_soa(soa, 0)
    assert body.mass == 1.0
    assert np.allclose(body.v, [0, 0, 1])


def test_create_soa_body_data_empty():
    with pytest.raises(ValueError):
        create_soa_body_data([])


def test_validate_soa_shape_mismatch():
    with pytest.raises(ValueError, match="positions"):
        validate_soa(np.zeros((2, 3)), np.zeros((1, 3)), np.ones(1), np.ones(1))
    with pytest.raises(ValueError, match="Radius"):
        validate_soa(np.zeros((1, 3)), np.zeros((1, 3)), np.ones(1), np.zeros(1))
