from __future__ import annotations

import numpy as np

from btzviz.params.coupling import BlackHoleParams


def poincare_disk_radius(r: float | np.ndarray, ads_radius: float) -> float | np.ndarray:
    # The factor 2 spreads the outer region away from the rim.
    return np.tanh(np.asarray(r, dtype=float) / (2.0 * ads_radius))


def poincare_positions(
    r: float | np.ndarray,
    phi: float | np.ndarray,
    ads_radius: float,
) -> np.ndarray:
    """Map (r, phi) onto the flat z=0 disk of radius < 1."""
    disk_radius = poincare_disk_radius(r, ads_radius)
    phi_arr = np.asarray(phi, dtype=float)
    x = disk_radius * np.cos(phi_arr)
    y = disk_radius * np.sin(phi_arr)
    return np.stack([x, y, np.zeros_like(x)], axis=-1)


def horizon_disk_radius(params: BlackHoleParams) -> float:
    """Disk radius of r_h = l*sqrt(M); tanh(sqrt(M)/2), independent of l."""
    return float(np.tanh(params.sqrt_mass / 2.0))


__all__ = ["poincare_disk_radius", "poincare_positions", "horizon_disk_radius"]
