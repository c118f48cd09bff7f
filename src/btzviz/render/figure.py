from __future__ import annotations

import math
from dataclasses import replace

import numpy as np
import plotly.graph_objects as go

from btzviz.scene.pipeline import CameraPreset, SceneFrame, VizMode, build_scene_frame
from btzviz.scene.session import VisualizerSession

PLOT_TEMPLATE = "plotly_dark"
BACKGROUND = "#050505"
HORIZON_COLOR = "#ff0000"
WIREFRAME_COLOR = "rgba(255,255,255,0.10)"
AXIS_LENGTH = 5.0
AXIS_LABEL_OFFSET = 5.5
TICK_COLOR = "#888888"
POLAR_GRID_RADIUS = 1.0
POLAR_GRID_RADIALS = 8
POLAR_GRID_CIRCLES = 8
POLAR_GRID_SEGMENTS = 64
HORIZON_SEGMENTS = 100

AXES = (
    ("X⁻¹", (1.0, 0.0, 0.0), "#ff0000"),
    ("X¹", (0.0, 1.0, 0.0), "#00ff00"),
    ("X²", (0.0, 0.0, 1.0), "#0088ff"),
)
TICKS = (
    ("1", (1.0, 0.0, -0.2)),
    ("1", (0.0, 1.0, -0.2)),
    ("2", (2.0, 0.0, -0.2)),
    ("2", (0.0, 2.0, -0.2)),
    ("0", (-0.2, -0.2, -0.2)),
)

# Plotly camera eyes are in units of the scene box, not data units.
SCENE_EXTENT = {VizMode.EMBEDDING: AXIS_LENGTH, VizMode.POINCARE: 2.0}


def vertex_color_strings(colors: np.ndarray) -> list[str]:
    rgb = np.clip(np.rint(np.asarray(colors, dtype=float) * 255.0), 0, 255).astype(int)
    return [f"rgb({r},{g},{b})" for r, g, b in rgb]


def _polyline(points: list[np.ndarray]) -> tuple[list[float | None], ...]:
    xs: list[float | None] = []
    ys: list[float | None] = []
    zs: list[float | None] = []
    for line in points:
        xs.extend(line[:, 0].tolist() + [None])
        ys.extend(line[:, 1].tolist() + [None])
        zs.extend(line[:, 2].tolist() + [None])
    return xs, ys, zs


def wireframe_lines(
    positions: np.ndarray, grid_shape: tuple[int, int]
) -> tuple[list[float | None], ...]:
    """Grid lines of constant angle and constant radius, separated by None gaps."""
    width, height = grid_shape
    lattice = positions.reshape(height, width, 3)
    lines = [lattice[iy] for iy in range(height)] + [lattice[:, ix] for ix in range(width)]
    return _polyline(lines)


def circle_points(radius: float, segments: int, z: float = 0.0) -> np.ndarray:
    theta = np.linspace(0.0, 2.0 * math.pi, segments + 1)
    return np.stack(
        [radius * np.cos(theta), radius * np.sin(theta), np.full_like(theta, z)], axis=-1
    )


def plotly_camera(preset: CameraPreset, mode: VizMode) -> dict[str, dict[str, float]]:
    extent = SCENE_EXTENT[mode]
    eye = [value / extent for value in preset.eye]
    return {
        "eye": dict(x=eye[0], y=eye[1], z=eye[2]),
        "up": dict(x=preset.up[0], y=preset.up[1], z=preset.up[2]),
        "center": dict(x=preset.center[0], y=preset.center[1], z=preset.center[2]),
    }


def _surface_traces(frame: SceneFrame) -> list[go.Mesh3d | go.Scatter3d]:
    positions = frame.positions
    mesh = go.Mesh3d(
        x=positions[:, 0],
        y=positions[:, 1],
        z=positions[:, 2],
        i=frame.faces[:, 0],
        j=frame.faces[:, 1],
        k=frame.faces[:, 2],
        vertexcolor=vertex_color_strings(frame.colors),
        flatshading=False,
        lighting=dict(ambient=0.45, diffuse=0.8, specular=0.35, roughness=0.45),
        lightposition=dict(x=5, y=5, z=10),
        name="Surface",
        hoverinfo="skip",
        showscale=False,
    )
    wx, wy, wz = wireframe_lines(positions, frame.grid_shape)
    wire = go.Scatter3d(
        x=wx,
        y=wy,
        z=wz,
        mode="lines",
        line=dict(color=WIREFRAME_COLOR, width=1),
        name="Wireframe",
        hoverinfo="skip",
        showlegend=False,
    )
    return [mesh, wire]


def _horizon_trace(frame: SceneFrame) -> go.Scatter3d:
    ring = circle_points(frame.horizon_scale, HORIZON_SEGMENTS)
    return go.Scatter3d(
        x=ring[:, 0],
        y=ring[:, 1],
        z=ring[:, 2],
        mode="lines",
        line=dict(color=HORIZON_COLOR, width=5),
        name=f"Horizon (R={frame.horizon_scale:.4f})",
        visible=frame.horizon_visible,
        hoverinfo="name",
    )


def _axis_traces(visible: bool) -> list[go.Scatter3d]:
    traces = []
    for label, direction, color in AXES:
        end = [AXIS_LENGTH * component for component in direction]
        traces.append(
            go.Scatter3d(
                x=[0.0, end[0]],
                y=[0.0, end[1]],
                z=[0.0, end[2]],
                mode="lines",
                line=dict(color=color, width=4),
                name=label,
                visible=visible,
                showlegend=False,
                hoverinfo="skip",
            )
        )
    traces.append(
        go.Scatter3d(
            x=[AXIS_LABEL_OFFSET * d[0] for _, d, _ in AXES],
            y=[AXIS_LABEL_OFFSET * d[1] for _, d, _ in AXES],
            z=[AXIS_LABEL_OFFSET * d[2] for _, d, _ in AXES],
            mode="text",
            text=[label for label, _, _ in AXES],
            textfont=dict(color=[color for _, _, color in AXES], size=16),
            name="Axis labels",
            visible=visible,
            showlegend=False,
            hoverinfo="skip",
        )
    )
    traces.append(
        go.Scatter3d(
            x=[pos[0] for _, pos in TICKS],
            y=[pos[1] for _, pos in TICKS],
            z=[pos[2] for _, pos in TICKS],
            mode="text",
            text=[text for text, _ in TICKS],
            textfont=dict(color=TICK_COLOR, size=11),
            name="Ticks",
            visible=visible,
            showlegend=False,
            hoverinfo="skip",
        )
    )
    return traces


def _polar_grid_trace(visible: bool) -> go.Scatter3d:
    lines = [
        circle_points(POLAR_GRID_RADIUS * (idx + 1) / POLAR_GRID_CIRCLES, POLAR_GRID_SEGMENTS)
        for idx in range(POLAR_GRID_CIRCLES)
    ]
    for idx in range(POLAR_GRID_RADIALS):
        angle = 2.0 * math.pi * idx / POLAR_GRID_RADIALS
        tip = [POLAR_GRID_RADIUS * math.cos(angle), POLAR_GRID_RADIUS * math.sin(angle), 0.0]
        lines.append(np.array([[0.0, 0.0, 0.0], tip]))
    xs, ys, zs = _polyline(lines)
    return go.Scatter3d(
        x=xs,
        y=ys,
        z=zs,
        mode="lines",
        line=dict(color="#444444", width=1),
        name="Disk grid",
        visible=visible,
        showlegend=False,
        hoverinfo="skip",
    )


def build_figure(frame: SceneFrame, *, height: int = 720) -> go.Figure:
    """Assemble the plotly scene for one frame; surface traces come first."""
    fig = go.Figure(
        data=[
            *_surface_traces(frame),
            _horizon_trace(frame),
            *_axis_traces(frame.axes_visible),
            _polar_grid_trace(frame.polar_grid_visible),
        ]
    )
    axis_style = dict(visible=False, showbackground=False)
    fig.update_layout(
        template=PLOT_TEMPLATE,
        paper_bgcolor=BACKGROUND,
        height=height,
        margin=dict(l=0, r=0, t=30, b=0),
        uirevision=frame.mode.value,
        scene=dict(
            xaxis=axis_style,
            yaxis=axis_style,
            zaxis=axis_style,
            bgcolor=BACKGROUND,
            aspectmode="data",
            camera=plotly_camera(frame.camera, frame.mode),
        ),
        legend=dict(x=0.01, y=0.99),
    )
    return fig


def _scene_ranges(frames: list[SceneFrame]) -> dict[str, list[float]]:
    stacked = np.concatenate([frame.positions for frame in frames], axis=0)
    lows = np.minimum(stacked.min(axis=0), -AXIS_LABEL_OFFSET if frames[0].axes_visible else -1.0)
    highs = np.maximum(stacked.max(axis=0), AXIS_LABEL_OFFSET if frames[0].axes_visible else 1.0)
    return {axis: [float(lows[idx]), float(highs[idx])] for idx, axis in enumerate("xyz")}


def _aspect_ratio(ranges: dict[str, list[float]]) -> dict[str, float]:
    # Box proportions match the swept data extents on each axis.
    spans = {axis: max(high - low, 1e-9) for axis, (low, high) in ranges.items()}
    largest = max(spans.values())
    return {axis: span / largest for axis, span in spans.items()}


def build_time_animation(
    session: VisualizerSession,
    n_frames: int = 48,
    *,
    frame_duration_ms: int = 60,
    height: int = 720,
) -> go.Figure:
    """Sweep t across the session's time range, one full recomputation per frame."""
    if n_frames < 2:
        msg = "n_frames must be at least 2"
        raise ValueError(msg)
    if frame_duration_ms <= 0:
        msg = "frame_duration_ms must be positive"
        raise ValueError(msg)

    view = session.view
    times = np.linspace(view.t_min, view.t_max, n_frames)
    scene_frames = [
        build_scene_frame(session.grid, session.params, replace(view, t=float(t))) for t in times
    ]

    fig = build_figure(scene_frames[0], height=height)
    plotly_frames = []
    for scene_frame in scene_frames:
        mesh, wire = _surface_traces(scene_frame)
        plotly_frames.append(
            go.Frame(
                data=[
                    go.Mesh3d(x=mesh.x, y=mesh.y, z=mesh.z),
                    go.Scatter3d(x=wire.x, y=wire.y, z=wire.z),
                ],
                traces=[0, 1],
                name=f"{scene_frame.t:.3f}",
            )
        )
    fig.frames = plotly_frames

    ranges = _scene_ranges(scene_frames)
    fig.update_scenes(
        xaxis_range=ranges["x"],
        yaxis_range=ranges["y"],
        zaxis_range=ranges["z"],
        aspectmode="manual",
        aspectratio=_aspect_ratio(ranges),
    )
    play_args = dict(
        frame=dict(duration=frame_duration_ms, redraw=True),
        transition=dict(duration=0),
        fromcurrent=True,
        mode="immediate",
    )
    fig.update_layout(
        updatemenus=[
            dict(
                type="buttons",
                showactive=False,
                x=0.01,
                y=0.02,
                xanchor="left",
                yanchor="bottom",
                buttons=[
                    dict(label="Play", method="animate", args=[None, play_args]),
                    dict(
                        label="Pause",
                        method="animate",
                        args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate")],
                    ),
                ],
            )
        ],
        sliders=[
            dict(
                active=0,
                currentvalue=dict(prefix="t = "),
                pad=dict(t=20),
                steps=[
                    dict(
                        label=frame.name,
                        method="animate",
                        args=[[frame.name], dict(mode="immediate", frame=dict(redraw=True))],
                    )
                    for frame in plotly_frames
                ],
            )
        ],
    )
    return fig


__all__ = [
    "PLOT_TEMPLATE",
    "vertex_color_strings",
    "wireframe_lines",
    "circle_points",
    "plotly_camera",
    "build_figure",
    "build_time_animation",
]
