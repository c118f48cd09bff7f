from btzviz.params.coupling import (
    ADS_RADIUS_FLOOR,
    DEFAULT_ADS_RADIUS,
    DEFAULT_MASS,
    MASS_FLOOR,
    TAU_FLOOR,
    BlackHoleParams,
    ParamEdit,
    derive_params,
    mass_from_tau,
    tau_from_mass,
)

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
