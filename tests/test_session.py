import numpy as np
import pytest

from btzviz.params.coupling import ParamEdit
from btzviz.scene.pipeline import VizMode
from btzviz.scene.session import (
    RegenerationKey,
    VisualizerSession,
    needs_regeneration,
)


def test_needs_regeneration_ignores_sub_epsilon_changes() -> None:
    base = RegenerationKey(mass=1.0, ads_radius=1.0, phi_limit=1.5, r_max_factor=4.0)

    assert not needs_regeneration(base, base)
    assert not needs_regeneration(
        base, RegenerationKey(mass=1.0005, ads_radius=1.0, phi_limit=1.5, r_max_factor=4.0)
    )
    assert needs_regeneration(
        base, RegenerationKey(mass=1.0, ads_radius=1.0, phi_limit=1.5, r_max_factor=4.5)
    )


def test_parameter_edits_regenerate_grid() -> None:
    session = VisualizerSession()
    assert session.regeneration_count == 1

    assert session.edit_param(ParamEdit.MASS, 2.0)
    assert session.regeneration_count == 2
    assert session.grid.radii.min() == pytest.approx(session.params.horizon_radius)

    assert session.edit_param(ParamEdit.TAU, 0.5)
    assert session.params.mass == pytest.approx(4.0)
    assert session.regeneration_count == 3

    assert session.set_r_max_factor(6.0)
    assert session.grid.radii.max() == pytest.approx(6.0 * session.params.horizon_radius)
    assert session.set_phi_limit(0.9)
    assert session.regeneration_count == 5


def test_repeated_identical_edit_does_not_regenerate() -> None:
    session = VisualizerSession()
    session.edit_param(ParamEdit.ADS_RADIUS, 2.0)
    count = session.regeneration_count

    assert not session.edit_param(ParamEdit.ADS_RADIUS, 2.0)
    assert session.regeneration_count == count


def test_view_changes_never_regenerate() -> None:
    session = VisualizerSession()
    grid = session.grid

    session.set_time(1.2)
    session.set_boost(0.5)
    session.set_rotation(-0.3)
    session.set_mode(VizMode.POINCARE)
    session.set_mode("embedding")

    assert session.grid is grid
    assert session.regeneration_count == 1
    assert session.view.t == pytest.approx(1.2)


def test_time_range_orders_bounds_and_clamps_time() -> None:
    session = VisualizerSession()
    session.set_time(2.5)
    session.set_time_range(1.0, -1.0)

    assert session.view.t_min == -1.0
    assert session.view.t_max == 1.0
    assert session.view.t == 1.0


def test_frame_recomputes_from_current_state() -> None:
    session = VisualizerSession()
    before = session.frame().positions
    session.set_time(0.7)
    after = session.frame().positions

    assert not np.allclose(before, after)
    np.testing.assert_array_equal(after, session.frame().positions)


def test_set_time_clamps_into_time_range() -> None:
    session = VisualizerSession()

    session.set_time(5.0)
    assert session.view.t == 3.0
    session.set_time(-7.5)
    assert session.view.t == -3.0


def test_sub_epsilon_radial_edit_is_stored_without_rebuild() -> None:
    session = VisualizerSession()
    grid = session.grid

    assert not session.set_r_max_factor(4.0005)
    assert session.grid_config.r_max_factor == 4.0005
    assert session.grid is grid

    # Drift accumulates against the last rebuilt key, not the last stored value.
    assert not session.set_r_max_factor(4.0009)
    assert session.set_r_max_factor(4.0015)
    assert session.grid.radii.max() == pytest.approx(4.0015 * session.params.horizon_radius)
