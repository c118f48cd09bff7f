from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from btzviz.geometry.embedding import embedding_positions
from btzviz.geometry.poincare import horizon_disk_radius, poincare_positions
from btzviz.grid.mesh import LogicalGrid
from btzviz.params.coupling import BlackHoleParams

DEFAULT_PHI_LIMIT = 1.5
DEFAULT_TIME_RANGE = (-3.0, 3.0)


class VizMode(Enum):
    EMBEDDING = "embedding"
    POINCARE = "poincare"

    @classmethod
    def parse(cls, value: VizMode | str) -> VizMode:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"mode must be one of {[mode.value for mode in cls]}, got {value!r}"
            raise ValueError(msg) from None


@dataclass(frozen=True)
class CameraPreset:
    eye: tuple[float, float, float]
    up: tuple[float, float, float] = (0.0, 0.0, 1.0)
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)


CAMERA_PRESETS = {
    VizMode.EMBEDDING: CameraPreset(eye=(8.0, 8.0, 6.0)),
    VizMode.POINCARE: CameraPreset(eye=(0.0, 0.0, 3.5), up=(0.0, 1.0, 0.0)),
}


@dataclass(frozen=True)
class ViewState:
    t: float = 0.0
    boost: float = 0.0
    rotation: float = 0.0
    phi_limit: float = DEFAULT_PHI_LIMIT
    mode: VizMode = VizMode.EMBEDDING
    t_min: float = DEFAULT_TIME_RANGE[0]
    t_max: float = DEFAULT_TIME_RANGE[1]

    def __post_init__(self) -> None:
        if self.phi_limit < 0:
            msg = "phi_limit must be non-negative"
            raise ValueError(msg)
        if self.t_min > self.t_max:
            msg = "t_min must not exceed t_max"
            raise ValueError(msg)
        if not isinstance(self.mode, VizMode):
            object.__setattr__(self, "mode", VizMode.parse(self.mode))


@dataclass(frozen=True)
class SceneFrame:
    """Everything the renderer needs for one frame."""

    mode: VizMode
    positions: np.ndarray
    colors: np.ndarray
    faces: np.ndarray
    grid_shape: tuple[int, int]
    horizon_visible: bool
    horizon_scale: float
    axes_visible: bool
    polar_grid_visible: bool
    camera: CameraPreset
    t: float


def angular_domain(mode: VizMode, phi_limit: float) -> tuple[float, float]:
    if mode is VizMode.POINCARE:
        return 0.0, 2.0 * math.pi
    return -phi_limit, phi_limit


def update_positions(
    grid: LogicalGrid,
    params: BlackHoleParams,
    view: ViewState,
) -> np.ndarray:
    """Recompute the full (N, 3) position buffer from grid, parameters and view state."""
    phi_min, phi_max = angular_domain(view.mode, view.phi_limit)
    phi = phi_min + grid.phi_normalized * (phi_max - phi_min)

    if view.mode is VizMode.EMBEDDING:
        return embedding_positions(
            grid.radii,
            phi,
            t=view.t,
            rapidity=view.boost,
            rotation=view.rotation,
            params=params,
        )
    return poincare_positions(grid.radii, phi, params.ads_radius)


def build_scene_frame(
    grid: LogicalGrid,
    params: BlackHoleParams,
    view: ViewState,
) -> SceneFrame:
    is_poincare = view.mode is VizMode.POINCARE
    return SceneFrame(
        mode=view.mode,
        positions=update_positions(grid, params, view),
        colors=grid.colors,
        faces=grid.faces,
        grid_shape=(grid.config.grid_r + 1, grid.config.grid_phi + 1),
        horizon_visible=is_poincare,
        horizon_scale=horizon_disk_radius(params) if is_poincare else 0.0,
        axes_visible=not is_poincare,
        polar_grid_visible=is_poincare,
        camera=CAMERA_PRESETS[view.mode],
        t=view.t,
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
]
