"""btzviz package public API: BTZ embedding and Poincare disk visualizer."""

from btzviz.geometry.embedding import (
    EmbeddingCoords,
    embedding_coords,
    embedding_invariant,
    lorentz_boost,
    spatial_rotation,
)
from btzviz.geometry.poincare import horizon_disk_radius, poincare_disk_radius
from btzviz.geometry.profile import radial_profile
from btzviz.grid.mesh import GridConfig, LogicalGrid, build_grid
from btzviz.params.coupling import BlackHoleParams, ParamEdit, derive_params
from btzviz.render.export import build_session, export_scene
from btzviz.render.figure import build_figure, build_time_animation
from btzviz.scene.pipeline import (
    SceneFrame,
    ViewState,
    VizMode,
    build_scene_frame,
    update_positions,
)
from btzviz.scene.session import VisualizerSession

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BlackHoleParams",
    "ParamEdit",
    "derive_params",
    "EmbeddingCoords",
    "embedding_coords",
    "lorentz_boost",
    "spatial_rotation",
    "embedding_invariant",
    "poincare_disk_radius",
    "horizon_disk_radius",
    "radial_profile",
    "GridConfig",
    "LogicalGrid",
    "build_grid",
    "VizMode",
    "ViewState",
    "SceneFrame",
    "update_positions",
    "build_scene_frame",
    "VisualizerSession",
    "build_figure",
    "build_time_animation",
    "build_session",
    "export_scene",
]
