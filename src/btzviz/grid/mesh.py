from __future__ import annotations

import colorsys
import logging
from dataclasses import dataclass

import numpy as np

from btzviz.params.coupling import BlackHoleParams

logger = logging.getLogger(__name__)

DEFAULT_GRID_R = 40
DEFAULT_GRID_PHI = 80
DEFAULT_R_MIN_FACTOR = 1.0
DEFAULT_R_MAX_FACTOR = 4.0
HUE_AT_HORIZON = 0.0
HUE_AT_OUTER_EDGE = 0.6


@dataclass(frozen=True)
class GridConfig:
    grid_r: int = DEFAULT_GRID_R
    grid_phi: int = DEFAULT_GRID_PHI
    r_min_factor: float = DEFAULT_R_MIN_FACTOR
    r_max_factor: float = DEFAULT_R_MAX_FACTOR

    def __post_init__(self) -> None:
        if self.grid_r < 1:
            msg = "grid_r must be at least 1"
            raise ValueError(msg)
        if self.grid_phi < 1:
            msg = "grid_phi must be at least 1"
            raise ValueError(msg)
        if self.r_min_factor < 0:
            msg = "r_min_factor must be non-negative"
            raise ValueError(msg)
        if self.r_max_factor <= self.r_min_factor:
            msg = "r_max_factor must exceed r_min_factor"
            raise ValueError(msg)

    @property
    def vertex_count(self) -> int:
        return (self.grid_r + 1) * (self.grid_phi + 1)


@dataclass(frozen=True)
class LogicalGrid:
    """Per-vertex logical coordinates plus the static color and face buffers."""

    config: GridConfig
    radii: np.ndarray
    phi_normalized: np.ndarray
    colors: np.ndarray
    faces: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.radii.shape[0])


def radial_colors(grid_r: int) -> np.ndarray:
    """HSL ramp from red at the horizon to blue at the outer edge, one row per radial index."""
    rows = []
    for ix in range(grid_r + 1):
        u = ix / grid_r
        hue = HUE_AT_HORIZON + (HUE_AT_OUTER_EDGE - HUE_AT_HORIZON) * u
        rows.append(colorsys.hls_to_rgb(hue, 0.5, 1.0))
    return np.asarray(rows, dtype=float)


def grid_faces(grid_r: int, grid_phi: int) -> np.ndarray:
    """Two triangles per cell, (a, b, d) and (b, c, d), over the row-major vertex layout."""
    width = grid_r + 1
    ix, iy = np.meshgrid(np.arange(grid_r), np.arange(grid_phi))
    ix = ix.ravel()
    iy = iy.ravel()
    a = ix + width * iy
    b = ix + width * (iy + 1)
    c = (ix + 1) + width * (iy + 1)
    d = (ix + 1) + width * iy
    first = np.stack([a, b, d], axis=-1)
    second = np.stack([b, c, d], axis=-1)
    return np.stack([first, second], axis=1).reshape(-1, 3).astype(np.int64)


def radial_bounds(params: BlackHoleParams, config: GridConfig) -> tuple[float, float]:
    r_h = params.horizon_radius
    return r_h * config.r_min_factor, r_h * config.r_max_factor


def build_grid(params: BlackHoleParams, config: GridConfig | None = None) -> LogicalGrid:
    """Assign radius, normalized angle and color to every vertex of the mesh."""
    cfg = config or GridConfig()
    width = cfg.grid_r + 1
    height = cfg.grid_phi + 1
    r_start, r_end = radial_bounds(params, cfg)

    vertex_index = np.arange(width * height)
    ix = vertex_index % width
    iy = vertex_index // width
    u = ix / cfg.grid_r
    v = iy / cfg.grid_phi

    radii = r_start + u * (r_end - r_start)
    colors = radial_colors(cfg.grid_r)[ix]

    logger.debug(
        "Built %dx%d grid: r in [%.4f, %.4f] for M=%.4f l=%.4f",
        width,
        height,
        r_start,
        r_end,
        params.mass,
        params.ads_radius,
    )
    return LogicalGrid(
        config=cfg,
        radii=radii.astype(float),
        phi_normalized=v.astype(float),
        colors=colors,
        faces=grid_faces(cfg.grid_r, cfg.grid_phi),
    )


__all__ = [
    "DEFAULT_GRID_R",
    "DEFAULT_GRID_PHI",
    "DEFAULT_R_MIN_FACTOR",
    "DEFAULT_R_MAX_FACTOR",
    "GridConfig",
    "LogicalGrid",
    "radial_colors",
    "grid_faces",
    "radial_bounds",
    "build_grid",
]
