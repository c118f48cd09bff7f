from btzviz.geometry.embedding import (
    EmbeddingCoords,
    boost_invariant,
    embedding_coords,
    embedding_invariant,
    embedding_positions,
    is_clamped,
    lorentz_boost,
    rotation_invariant,
    spatial_rotation,
)
from btzviz.geometry.poincare import horizon_disk_radius, poincare_disk_radius, poincare_positions
from btzviz.geometry.profile import radial_profile

__all__ = [
    "EmbeddingCoords",
    "embedding_coords",
    "lorentz_boost",
    "spatial_rotation",
    "embedding_invariant",
    "boost_invariant",
    "rotation_invariant",
    "embedding_positions",
    "is_clamped",
    "poincare_disk_radius",
    "poincare_positions",
    "horizon_disk_radius",
    "radial_profile",
]
