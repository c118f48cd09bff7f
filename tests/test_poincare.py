import math

import numpy as np
import pytest

from btzviz.geometry.poincare import horizon_disk_radius, poincare_disk_radius, poincare_positions
from btzviz.params.coupling import BlackHoleParams


def test_disk_radius_is_monotone_and_bounded() -> None:
    r = np.linspace(0.0, 60.0, 400)
    radius = poincare_disk_radius(r, 1.3)

    assert float(radius[0]) == 0.0
    assert np.all(np.diff(radius) >= 0)
    assert np.all(np.diff(radius[:100]) > 0)
    assert np.all(radius < 1.0 + 1e-12)
    assert float(poincare_disk_radius(200.0, 1.3)) == pytest.approx(1.0)


def test_horizon_maps_to_tanh_half_sqrt_mass_for_any_ads_radius() -> None:
    for ads_radius in (0.3, 1.0, 4.0):
        params = BlackHoleParams(mass=2.5, ads_radius=ads_radius)
        at_horizon = float(poincare_disk_radius(params.horizon_radius, ads_radius))

        assert at_horizon == pytest.approx(math.tanh(math.sqrt(2.5) / 2.0))
        assert horizon_disk_radius(params) == pytest.approx(at_horizon)


def test_poincare_scenario_at_unit_horizon() -> None:
    params = BlackHoleParams(mass=1.0, ads_radius=1.0)

    assert float(poincare_disk_radius(1.0, 1.0)) == pytest.approx(0.4621, abs=1e-4)
    assert horizon_disk_radius(params) == pytest.approx(0.4621, abs=1e-4)


def test_poincare_positions_lie_flat_on_circle() -> None:
    phi = np.linspace(0.0, 2.0 * math.pi, 9)
    points = poincare_positions(np.full_like(phi, 2.0), phi, 1.0)

    assert points.shape == (9, 3)
    np.testing.assert_allclose(points[:, 2], 0.0)
    np.testing.assert_allclose(np.hypot(points[:, 0], points[:, 1]), math.tanh(1.0))
