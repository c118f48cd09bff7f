from __future__ import annotations

import math

import plotly.graph_objects as go
import streamlit as st

from btzviz.geometry.poincare import horizon_disk_radius
from btzviz.geometry.profile import radial_profile
from btzviz.params.coupling import ParamEdit
from btzviz.render.figure import PLOT_TEMPLATE, build_figure, build_time_animation
from btzviz.scene.pipeline import VizMode
from btzviz.scene.session import VisualizerSession

st.set_page_config(page_title="BTZ Embedding Console", layout="wide")

st.markdown(
    """
<style>
.stApp {
    background-color: #050505;
    color: #e5edf7;
    font-family: "JetBrains Mono", "SFMono-Regular", monospace;
}
[data-testid="stSidebar"] {
    background-color: #0e1118;
    border-right: 1px solid #1f2a3f;
}
[data-testid="stMetric"] {
    background-color: #111b2f;
    border: 1px solid #2a3b58;
    border-radius: 8px;
    padding: 10px 12px;
}
</style>
""",
    unsafe_allow_html=True,
)

ACCENT_BLUE = "#4c8dff"
ACCENT_GREEN = "#33d17a"
ACCENT_ORANGE = "#f6a04d"
ACCENT_RED = "#ff4d4f"

MASS_BOUNDS = (0.01, 9.0)
ADS_RADIUS_BOUNDS = (0.1, 5.0)
TAU_BOUNDS = (0.05, 10.0)
MODE_LABELS = {VizMode.EMBEDDING: "Embedding R^{2,2}", VizMode.POINCARE: "Poincaré disk"}


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    return max(bounds[0], min(bounds[1], value))


def _session() -> VisualizerSession:
    if "btz_session" not in st.session_state:
        session = VisualizerSession()
        st.session_state["btz_session"] = session
        _sync_param_widgets(session)
        _seed_view_widgets(session)
    return st.session_state["btz_session"]


def _sync_param_widgets(session: VisualizerSession) -> None:
    params = session.params
    st.session_state["mass"] = _clamp(params.mass, MASS_BOUNDS)
    st.session_state["ads_radius"] = _clamp(params.ads_radius, ADS_RADIUS_BOUNDS)
    st.session_state["tau"] = _clamp(params.tau, TAU_BOUNDS)


def _seed_view_widgets(session: VisualizerSession) -> None:
    view = session.view
    st.session_state["phi_limit"] = view.phi_limit
    st.session_state["r_max_factor"] = session.grid_config.r_max_factor
    st.session_state["mode"] = view.mode.value
    st.session_state["t_min"] = view.t_min
    st.session_state["t_max"] = view.t_max
    st.session_state["t"] = view.t
    st.session_state["boost"] = view.boost
    st.session_state["rotation"] = view.rotation


def _on_param_edit(edit: ParamEdit) -> None:
    session = _session()
    session.edit_param(edit, float(st.session_state[edit.value]))
    _sync_param_widgets(session)


def _on_surface_edit() -> None:
    session = _session()
    session.set_phi_limit(float(st.session_state["phi_limit"]))
    session.set_r_max_factor(float(st.session_state["r_max_factor"]))


def _on_mode_change() -> None:
    _session().set_mode(st.session_state["mode"])


def _on_time_range_change() -> None:
    session = _session()
    t_min = float(st.session_state["t_min"])
    t_max = float(st.session_state["t_max"])
    if math.isclose(t_min, t_max):
        t_max = t_min + 1.0
    session.set_time_range(t_min, t_max)
    st.session_state["t_min"] = session.view.t_min
    st.session_state["t_max"] = session.view.t_max
    st.session_state["t"] = session.view.t


def _on_view_change() -> None:
    session = _session()
    session.set_time(float(st.session_state["t"]))
    session.set_boost(float(st.session_state["boost"]))
    session.set_rotation(float(st.session_state["rotation"]))


session = _session()

with st.sidebar:
    st.header("Black Hole")
    st.slider(
        "Mass M",
        min_value=MASS_BOUNDS[0],
        max_value=MASS_BOUNDS[1],
        step=0.01,
        key="mass",
        on_change=_on_param_edit,
        args=(ParamEdit.MASS,),
    )
    st.slider(
        "AdS radius l",
        min_value=ADS_RADIUS_BOUNDS[0],
        max_value=ADS_RADIUS_BOUNDS[1],
        step=0.01,
        key="ads_radius",
        on_change=_on_param_edit,
        args=(ParamEdit.ADS_RADIUS,),
    )
    st.slider(
        "Inverse temperature tau = l/sqrt(M)",
        min_value=TAU_BOUNDS[0],
        max_value=TAU_BOUNDS[1],
        step=0.01,
        key="tau",
        on_change=_on_param_edit,
        args=(ParamEdit.TAU,),
    )

    st.header("Surface")
    st.slider(
        "Angular half-width (rad)",
        min_value=0.1,
        max_value=3.0,
        step=0.1,
        key="phi_limit",
        on_change=_on_surface_edit,
    )
    st.slider(
        "Radial extent (x r_h)",
        min_value=1.5,
        max_value=10.0,
        step=0.5,
        key="r_max_factor",
        on_change=_on_surface_edit,
    )

    st.header("View")
    st.radio(
        "Visualization mode",
        options=[item.value for item in VizMode],
        format_func=lambda value: MODE_LABELS[VizMode(value)],
        key="mode",
        on_change=_on_mode_change,
    )

    range_cols = st.columns(2)
    range_cols[0].number_input("t min", step=0.5, key="t_min", on_change=_on_time_range_change)
    range_cols[1].number_input("t max", step=0.5, key="t_max", on_change=_on_time_range_change)

    st.slider(
        "Time t",
        min_value=float(session.view.t_min),
        max_value=float(session.view.t_max),
        step=0.01,
        key="t",
        on_change=_on_view_change,
    )
    st.slider(
        "Boost rapidity",
        min_value=-3.0,
        max_value=3.0,
        step=0.01,
        key="boost",
        on_change=_on_view_change,
    )
    st.slider(
        "Rotation (X¹, X²)",
        min_value=-math.pi,
        max_value=math.pi,
        step=0.01,
        key="rotation",
        on_change=_on_view_change,
    )
    animate = st.toggle("Animate time sweep", value=False)
    n_frames = st.slider(
        "Animation frames", min_value=8, max_value=120, value=48, step=4, disabled=not animate
    )

params = session.params

st.title("BTZ Black Hole Embedding Console")
st.caption("Hyperbolic embedding in R^{2,2} with boost and rotation, and the Poincaré disk view")

kpi_cols = st.columns(4)
kpi_cols[0].metric("Horizon r_h = l*sqrt(M)", f"{params.horizon_radius:.3f}")
kpi_cols[1].metric("tau = l/sqrt(M)", f"{params.tau:.3f}")
kpi_cols[2].metric("Disk horizon R_h", f"{horizon_disk_radius(params):.4f}")
kpi_cols[3].metric("Vertices", f"{session.grid.vertex_count}")

tab_surface, tab_profile = st.tabs(["Surface", "Radial Profile"])

with tab_surface:
    if animate:
        surface_fig = build_time_animation(session, n_frames=int(n_frames))
    else:
        surface_fig = build_figure(session.frame())
    st.plotly_chart(surface_fig, width="stretch")
    if session.view.mode is VizMode.EMBEDDING:
        st.caption(
            "Inside r_h the time-like radicand is clamped to zero: that part of the strip "
            "is drawn at X⁰ = X¹ = 0 and is not on the embedded surface."
        )

with tab_profile:
    profile = radial_profile(
        params,
        r_max_factor=session.grid_config.r_max_factor,
        t=session.view.t,
        rapidity=session.view.boost,
        rotation=session.view.rotation,
    )
    profile_cols = st.columns(2)

    coords_fig = go.Figure()
    for column, color in (
        ("x_minus1", ACCENT_RED),
        ("x0", ACCENT_ORANGE),
        ("x1", ACCENT_GREEN),
        ("x2", ACCENT_BLUE),
    ):
        coords_fig.add_trace(
            go.Scatter(
                x=profile["r_over_rh"],
                y=profile[column],
                mode="lines",
                name=column,
                line=dict(color=color, width=2.2),
            )
        )
    coords_fig.add_vline(x=1.0, line=dict(color="#888888", dash="dot"))
    coords_fig.update_layout(
        template=PLOT_TEMPLATE,
        title="Embedding coordinates along phi = 0",
        xaxis_title="r / r_h",
        yaxis_title="Coordinate value",
    )
    profile_cols[0].plotly_chart(coords_fig, width="stretch")

    disk_fig = go.Figure()
    disk_fig.add_trace(
        go.Scatter(
            x=profile["r_over_rh"],
            y=profile["disk_radius"],
            mode="lines",
            name="tanh(r / 2l)",
            line=dict(color=ACCENT_BLUE, width=2.5),
        )
    )
    disk_fig.add_hline(
        y=horizon_disk_radius(params),
        line=dict(color=ACCENT_RED, dash="dash"),
        annotation_text="R_h",
    )
    disk_fig.update_layout(
        template=PLOT_TEMPLATE,
        title="Poincaré disk radius",
        xaxis_title="r / r_h",
        yaxis_title="R",
        yaxis=dict(range=[0.0, 1.0]),
    )
    profile_cols[1].plotly_chart(disk_fig, width="stretch")

    st.dataframe(profile, width="stretch")
