def test_import():
    import btzviz

    assert btzviz.__version__ == "0.1.0"


def test_public_api_imports() -> None:
    from btzviz.geometry.embedding import embedding_coords, lorentz_boost, spatial_rotation
    from btzviz.geometry.poincare import horizon_disk_radius, poincare_disk_radius
    from btzviz.geometry.profile import radial_profile
    from btzviz.grid.mesh import GridConfig, build_grid
    from btzviz.params.coupling import BlackHoleParams, ParamEdit, derive_params
    from btzviz.render.export import export_scene
    from btzviz.render.figure import build_figure, build_time_animation
    from btzviz.scene.pipeline import ViewState, VizMode, update_positions
    from btzviz.scene.session import VisualizerSession

    assert embedding_coords is not None
    assert lorentz_boost is not None
    assert spatial_rotation is not None
    assert poincare_disk_radius is not None
    assert horizon_disk_radius is not None
    assert radial_profile is not None
    assert GridConfig is not None
    assert build_grid is not None
    assert BlackHoleParams is not None
    assert ParamEdit is not None
    assert derive_params is not None
    assert ViewState is not None
    assert VizMode is not None
    assert update_positions is not None
    assert VisualizerSession is not None
    assert build_figure is not None
    assert build_time_animation is not None
    assert export_scene is not None
