from btzviz.render.export import build_session, export_scene
from btzviz.render.figure import (
    build_figure,
    build_time_animation,
    plotly_camera,
    vertex_color_strings,
    wireframe_lines,
)

__all__ = [
    "build_figure",
    "build_time_animation",
    "plotly_camera",
    "vertex_color_strings",
    "wireframe_lines",
    "build_session",
    "export_scene",
]
