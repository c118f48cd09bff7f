from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from btzviz.grid.mesh import GridConfig, LogicalGrid, build_grid
from btzviz.params.coupling import BlackHoleParams, ParamEdit, derive_params
from btzviz.scene.pipeline import SceneFrame, ViewState, VizMode, build_scene_frame

logger = logging.getLogger(__name__)

REGEN_EPSILON = 1e-3


@dataclass(frozen=True)
class RegenerationKey:
    """Inputs whose change forces the logical grid to be rebuilt."""

    mass: float
    ads_radius: float
    phi_limit: float
    r_max_factor: float


def regeneration_key(
    params: BlackHoleParams,
    config: GridConfig,
    view: ViewState,
) -> RegenerationKey:
    return RegenerationKey(
        mass=params.mass,
        ads_radius=params.ads_radius,
        phi_limit=view.phi_limit,
        r_max_factor=config.r_max_factor,
    )


def needs_regeneration(
    old: RegenerationKey,
    new: RegenerationKey,
    epsilon: float = REGEN_EPSILON,
) -> bool:
    return (
        abs(new.mass - old.mass) > epsilon
        or abs(new.ads_radius - old.ads_radius) > epsilon
        or abs(new.phi_limit - old.phi_limit) > epsilon
        or abs(new.r_max_factor - old.r_max_factor) > epsilon
    )


class VisualizerSession:
    """Holds the live parameters and view state and rebuilds the grid when required.

    Parameter edits are gated on ``needs_regeneration``; view edits (time, boost,
    rotation, mode) never touch the grid. ``frame()`` always recomputes positions.
    """

    def __init__(
        self,
        params: BlackHoleParams | None = None,
        grid_config: GridConfig | None = None,
        view: ViewState | None = None,
    ) -> None:
        self.params = params or BlackHoleParams()
        self.grid_config = grid_config or GridConfig()
        self.view = view or ViewState()
        self.regeneration_count = 0
        self._key = regeneration_key(self.params, self.grid_config, self.view)
        self.grid = self._regenerate()

    def _regenerate(self) -> LogicalGrid:
        self.regeneration_count += 1
        return build_grid(self.params, self.grid_config)

    def _apply(
        self,
        *,
        params: BlackHoleParams | None = None,
        grid_config: GridConfig | None = None,
        view: ViewState | None = None,
    ) -> bool:
        next_params = params or self.params
        next_config = grid_config or self.grid_config
        next_view = view or self.view
        next_key = regeneration_key(next_params, next_config, next_view)
        regenerate = needs_regeneration(self._key, next_key)

        self.params = next_params
        self.grid_config = next_config
        self.view = next_view
        if regenerate:
            self._key = next_key
            self.grid = self._regenerate()
            logger.debug("Regenerated grid for %s", next_key)
        return regenerate

    def edit_param(self, edit: ParamEdit, value: float) -> bool:
        """Apply a coupled M/l/tau edit; returns True when the grid was rebuilt."""
        return self._apply(params=derive_params(self.params, edit, value))

    def set_phi_limit(self, phi_limit: float) -> bool:
        return self._apply(view=replace(self.view, phi_limit=float(phi_limit)))

    def set_r_max_factor(self, r_max_factor: float) -> bool:
        return self._apply(grid_config=replace(self.grid_config, r_max_factor=float(r_max_factor)))

    def set_time(self, t: float) -> None:
        t = min(max(float(t), self.view.t_min), self.view.t_max)
        self.view = replace(self.view, t=t)

    def set_boost(self, rapidity: float) -> None:
        self.view = replace(self.view, boost=float(rapidity))

    def set_rotation(self, angle: float) -> None:
        self.view = replace(self.view, rotation=float(angle))

    def set_time_range(self, t_min: float, t_max: float) -> None:
        low, high = sorted((float(t_min), float(t_max)))
        t = min(max(self.view.t, low), high)
        self.view = replace(self.view, t_min=low, t_max=high, t=t)

    def set_mode(self, mode: VizMode | str) -> None:
        next_mode = VizMode.parse(mode)
        if next_mode is not self.view.mode:
            logger.info("Switching visualization mode to %s", next_mode.value)
        self.view = replace(self.view, mode=next_mode)

    def frame(self) -> SceneFrame:
        return build_scene_frame(self.grid, self.params, self.view)


__all__ = [
    "REGEN_EPSILON",
    "RegenerationKey",
    "regeneration_key",
    "needs_regeneration",
    "VisualizerSession",
]
