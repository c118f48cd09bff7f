from btzviz.scene.pipeline import (
    CAMERA_PRESETS,
    DEFAULT_PHI_LIMIT,
    DEFAULT_TIME_RANGE,
    CameraPreset,
    SceneFrame,
    ViewState,
    VizMode,
    angular_domain,
    build_scene_frame,
    update_positions,
)
from btzviz.scene.session import (
    REGEN_EPSILON,
    RegenerationKey,
    VisualizerSession,
    needs_regeneration,
    regeneration_key,
)

__all__ = [
    "DEFAULT_PHI_LIMIT",
    "DEFAULT_TIME_RANGE",
    "VizMode",
    "CameraPreset",
    "CAMERA_PRESETS",
    "ViewState",
    "SceneFrame",
    "angular_domain",
    "update_positions",
    "build_scene_frame",
    "REGEN_EPSILON",
    "RegenerationKey",
    "regeneration_key",
    "needs_regeneration",
    "VisualizerSession",
]
