from __future__ import annotations

import numpy as np
import pandas as pd

from btzviz.geometry.embedding import (
    embedding_coords,
    embedding_invariant,
    is_clamped,
    lorentz_boost,
    spatial_rotation,
)
from btzviz.geometry.poincare import poincare_disk_radius
from btzviz.params.coupling import BlackHoleParams


def radial_profile(
    params: BlackHoleParams,
    *,
    n_points: int = 120,
    r_max_factor: float = 4.0,
    t: float = 0.0,
    rapidity: float = 0.0,
    rotation: float = 0.0,
) -> pd.DataFrame:
    """Sample the phi=0 slice from r=0 out to r_max_factor horizon radii."""
    if n_points < 2:
        msg = "n_points must be at least 2"
        raise ValueError(msg)
    if r_max_factor <= 0:
        msg = "r_max_factor must be positive"
        raise ValueError(msg)

    r_h = params.horizon_radius
    radii = np.linspace(0.0, r_h * r_max_factor, n_points)
    base = embedding_coords(radii, np.zeros_like(radii), t, params)
    coords = spatial_rotation(lorentz_boost(base, rapidity), rotation)

    return pd.DataFrame(
        {
            "r": radii,
            "r_over_rh": radii / r_h,
            "disk_radius": poincare_disk_radius(radii, params.ads_radius),
            "x_minus1": coords.x_minus1,
            "x0": coords.x0,
            "x1": coords.x1,
            "x2": coords.x2,
            # Boost and rotation are isometries, so this stays -l^2 outside the clamp.
            "invariant": embedding_invariant(coords),
            "clamped": is_clamped(radii, params),
        }
    )


__all__ = ["radial_profile"]
