import math

import numpy as np
import pytest

from btzviz.geometry.embedding import (
    boost_invariant,
    embedding_coords,
    embedding_invariant,
    embedding_positions,
    is_clamped,
    lorentz_boost,
    rotation_invariant,
    spatial_rotation,
)
from btzviz.params.coupling import BlackHoleParams


def test_horizon_scenario_clamps_time_like_term() -> None:
    coords = embedding_coords(1.0, 0.0, 0.0, BlackHoleParams(mass=1.0, ads_radius=1.0))

    assert float(coords.x_minus1) == pytest.approx(1.0)
    assert float(coords.x2) == pytest.approx(0.0)
    assert float(coords.x0) == pytest.approx(0.0)
    assert float(coords.x1) == pytest.approx(0.0)


def test_outside_horizon_scenario() -> None:
    params = BlackHoleParams(mass=1.0, ads_radius=1.0)
    base = embedding_coords(2.0, 0.0, 0.0, params)
    boosted = lorentz_boost(base, 0.0)

    assert float(boosted.x_minus1) == pytest.approx(2.0)
    assert float(boosted.x2) == pytest.approx(0.0)
    assert float(boosted.x0) == pytest.approx(0.0)
    assert float(boosted.x1) == pytest.approx(math.sqrt(3.0))


@pytest.mark.parametrize(
    ("mass", "ads_radius"),
    [(1.0, 1.0), (0.5, 2.0), (3.0, 0.7)],
)
def test_embedding_lies_on_hyperboloid_outside_clamp(mass: float, ads_radius: float) -> None:
    params = BlackHoleParams(mass=mass, ads_radius=ads_radius)
    r = np.linspace(1.001 * params.horizon_radius, 5.0 * params.horizon_radius, 25)
    phi = np.linspace(-1.2, 1.2, 25)
    coords = embedding_coords(r, phi, 0.8, params)

    assert not is_clamped(r, params).any()
    np.testing.assert_allclose(embedding_invariant(coords), -(ads_radius**2), rtol=1e-9, atol=1e-9)


def test_inside_horizon_time_like_coordinates_are_zero() -> None:
    params = BlackHoleParams(mass=2.0, ads_radius=1.5)
    r = np.linspace(0.0, 0.99 * params.horizon_radius, 10)
    coords = embedding_coords(r, 0.4, 1.3, params)

    assert is_clamped(r, params).all()
    np.testing.assert_allclose(coords.x0, 0.0)
    np.testing.assert_allclose(coords.x1, 0.0)
    np.testing.assert_allclose(embedding_invariant(coords), -(r**2) / params.mass)


def test_boost_and_rotation_are_identity_at_zero() -> None:
    coords = embedding_coords(3.0, 0.3, 0.5, BlackHoleParams(mass=1.2, ads_radius=0.9))

    for transformed in (lorentz_boost(coords, 0.0), spatial_rotation(coords, 0.0)):
        assert float(transformed.x_minus1) == pytest.approx(float(coords.x_minus1))
        assert float(transformed.x0) == pytest.approx(float(coords.x0))
        assert float(transformed.x1) == pytest.approx(float(coords.x1))
        assert float(transformed.x2) == pytest.approx(float(coords.x2))


@pytest.mark.parametrize("parameter", [-2.5, -0.4, 0.7, 1.9])
def test_boost_and_rotation_preserve_their_invariants(parameter: float) -> None:
    params = BlackHoleParams(mass=1.0, ads_radius=1.0)
    coords = embedding_coords(np.linspace(1.0, 4.0, 12), np.linspace(-1.0, 1.0, 12), 0.6, params)

    boosted = lorentz_boost(coords, parameter)
    rotated = spatial_rotation(coords, parameter)

    np.testing.assert_allclose(boost_invariant(boosted), boost_invariant(coords), atol=1e-9)
    np.testing.assert_allclose(rotation_invariant(rotated), rotation_invariant(coords), atol=1e-9)
    np.testing.assert_allclose(rotated.x0, coords.x0)
    np.testing.assert_allclose(boosted.x2, coords.x2)


def test_rotation_acts_on_boosted_coordinates() -> None:
    params = BlackHoleParams(mass=1.0, ads_radius=1.0)
    positions = embedding_positions(2.0, 0.5, t=0.3, rapidity=0.8, rotation=0.6, params=params)

    base = embedding_coords(2.0, 0.5, 0.3, params)
    expected = spatial_rotation(lorentz_boost(base, 0.8), 0.6)
    reversed_order = lorentz_boost(spatial_rotation(base, 0.6), 0.8)

    assert positions.shape == (3,)
    np.testing.assert_allclose(positions, [expected.x_minus1, expected.x1, expected.x2])
    assert float(reversed_order.x1) != pytest.approx(float(expected.x1))
