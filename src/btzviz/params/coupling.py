from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

DEFAULT_MASS = 1.0
DEFAULT_ADS_RADIUS = 1.0
MASS_FLOOR = 0.001
ADS_RADIUS_FLOOR = 0.001
TAU_FLOOR = 0.01


class ParamEdit(Enum):
    """Which coupled control the user touched last."""

    MASS = "mass"
    ADS_RADIUS = "ads_radius"
    TAU = "tau"


@dataclass(frozen=True)
class BlackHoleParams:
    mass: float = DEFAULT_MASS
    ads_radius: float = DEFAULT_ADS_RADIUS

    def __post_init__(self) -> None:
        if self.mass <= 0:
            msg = "mass must be positive"
            raise ValueError(msg)
        if self.ads_radius <= 0:
            msg = "ads_radius must be positive"
            raise ValueError(msg)

    @property
    def sqrt_mass(self) -> float:
        return math.sqrt(self.mass)

    @property
    def tau(self) -> float:
        """Inverse temperature l / sqrt(M)."""
        return self.ads_radius / self.sqrt_mass

    @property
    def horizon_radius(self) -> float:
        return self.ads_radius * self.sqrt_mass


def tau_from_mass(mass: float, ads_radius: float) -> float:
    return ads_radius / math.sqrt(max(mass, MASS_FLOOR))


def mass_from_tau(tau: float, ads_radius: float) -> float:
    return (ads_radius / max(tau, TAU_FLOOR)) ** 2


def derive_params(current: BlackHoleParams, edit: ParamEdit, value: float) -> BlackHoleParams:
    """Apply one edit to the M/l/tau triple and return the re-derived parameters.

    Mass and AdS radius edits keep the other one fixed and let tau follow.
    A tau edit holds l fixed and solves M = (l / tau)^2. Inputs are floored
    away from zero instead of being rejected.
    """
    if edit is ParamEdit.MASS:
        return BlackHoleParams(mass=max(float(value), MASS_FLOOR), ads_radius=current.ads_radius)
    if edit is ParamEdit.ADS_RADIUS:
        return BlackHoleParams(mass=current.mass, ads_radius=max(float(value), ADS_RADIUS_FLOOR))
    if edit is ParamEdit.TAU:
        return BlackHoleParams(
            mass=mass_from_tau(float(value), current.ads_radius),
            ads_radius=current.ads_radius,
        )
    msg = f"unsupported parameter edit: {edit!r}"
    raise ValueError(msg)


__all__ = [
    "DEFAULT_MASS",
    "DEFAULT_ADS_RADIUS",
    "MASS_FLOOR",
    "ADS_RADIUS_FLOOR",
    "TAU_FLOOR",
    "ParamEdit",
    "BlackHoleParams",
    "tau_from_mass",
    "mass_from_tau",
    "derive_params",
]
