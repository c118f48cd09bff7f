from __future__ import annotations

import argparse
from pathlib import Path

from btzviz.geometry.profile import radial_profile
from btzviz.grid.mesh import DEFAULT_GRID_PHI, DEFAULT_GRID_R, DEFAULT_R_MAX_FACTOR, GridConfig
from btzviz.params.coupling import DEFAULT_ADS_RADIUS, DEFAULT_MASS, BlackHoleParams, ParamEdit
from btzviz.render.figure import build_figure, build_time_animation
from btzviz.scene.pipeline import DEFAULT_PHI_LIMIT, DEFAULT_TIME_RANGE, ViewState, VizMode
from btzviz.scene.session import VisualizerSession

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "figures"
DEFAULT_OUTPUT_PATH = DEFAULT_OUTPUT_DIR / "btz_surface.html"


def build_session(
    *,
    mode: VizMode | str = VizMode.EMBEDDING,
    mass: float = DEFAULT_MASS,
    ads_radius: float = DEFAULT_ADS_RADIUS,
    tau: float | None = None,
    phi_limit: float = DEFAULT_PHI_LIMIT,
    r_max_factor: float = DEFAULT_R_MAX_FACTOR,
    t: float = 0.0,
    boost: float = 0.0,
    rotation: float = 0.0,
    t_min: float = DEFAULT_TIME_RANGE[0],
    t_max: float = DEFAULT_TIME_RANGE[1],
    grid_r: int = DEFAULT_GRID_R,
    grid_phi: int = DEFAULT_GRID_PHI,
) -> VisualizerSession:
    session = VisualizerSession(
        params=BlackHoleParams(mass=mass, ads_radius=ads_radius),
        grid_config=GridConfig(grid_r=grid_r, grid_phi=grid_phi, r_max_factor=r_max_factor),
        view=ViewState(phi_limit=phi_limit, mode=VizMode.parse(mode)),
    )
    if tau is not None:
        session.edit_param(ParamEdit.TAU, tau)
    session.set_time_range(t_min, t_max)
    session.set_time(t)
    session.set_boost(boost)
    session.set_rotation(rotation)
    return session


def export_scene(
    session: VisualizerSession,
    *,
    output_path: str | Path = DEFAULT_OUTPUT_PATH,
    animate_frames: int = 0,
    profile_csv: str | Path | None = None,
    verbose: bool = True,
) -> Path:
    """Write the scene as standalone HTML and optionally the radial profile as CSV."""
    target = Path(output_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if animate_frames:
        fig = build_time_animation(session, n_frames=animate_frames)
    else:
        fig = build_figure(session.frame())
    fig.write_html(target, include_plotlyjs="cdn", auto_play=False)

    if verbose:
        params = session.params
        print(f"Wrote {session.view.mode.value} scene to: {target}")
        print(f"  M={params.mass:.4f} l={params.ads_radius:.4f} tau={params.tau:.4f}")
        print(f"  vertices: {session.grid.vertex_count}")
        if animate_frames:
            print(f"  animation frames: {animate_frames}")

    if profile_csv is not None:
        profile_path = Path(profile_csv)
        profile_path.parent.mkdir(parents=True, exist_ok=True)
        profile = radial_profile(
            session.params,
            r_max_factor=session.grid_config.r_max_factor,
            t=session.view.t,
            rapidity=session.view.boost,
            rotation=session.view.rotation,
        )
        profile.to_csv(profile_path, index=False)
        if verbose:
            print(f"Wrote radial profile ({len(profile)} rows) to: {profile_path}")
    return target


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export the BTZ embedding or Poincare disk view as interactive HTML."
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in VizMode],
        default=VizMode.EMBEDDING.value,
        help="Embedding surface in R^{2,2} or flat Poincare disk.",
    )
    parser.add_argument("--mass", type=float, default=DEFAULT_MASS, help="Black hole mass M.")
    parser.add_argument(
        "--ads-radius", type=float, default=DEFAULT_ADS_RADIUS, help="AdS radius l."
    )
    parser.add_argument(
        "--tau",
        type=float,
        default=None,
        help="Inverse temperature; when given, M is re-derived as (l / tau)^2.",
    )
    parser.add_argument(
        "--phi-limit",
        type=float,
        default=DEFAULT_PHI_LIMIT,
        help="Angular half-width of the embedding strip.",
    )
    parser.add_argument(
        "--r-max-factor",
        type=float,
        default=DEFAULT_R_MAX_FACTOR,
        help="Outer radius in units of the horizon radius.",
    )
    parser.add_argument("--time", type=float, default=0.0, help="Boundary time t.")
    parser.add_argument("--t-min", type=float, default=DEFAULT_TIME_RANGE[0])
    parser.add_argument("--t-max", type=float, default=DEFAULT_TIME_RANGE[1])
    parser.add_argument("--boost", type=float, default=0.0, help="Boost rapidity.")
    parser.add_argument("--rotation", type=float, default=0.0, help="Rotation angle in (X1, X2).")
    parser.add_argument("--grid-r", type=int, default=DEFAULT_GRID_R)
    parser.add_argument("--grid-phi", type=int, default=DEFAULT_GRID_PHI)
    parser.add_argument(
        "--animate-frames",
        type=int,
        default=0,
        help="Number of time frames between t-min and t-max; 0 exports a static scene.",
    )
    parser.add_argument(
        "--output",
        default=str(DEFAULT_OUTPUT_PATH),
        help="Path of the HTML file to write.",
    )
    parser.add_argument(
        "--profile-csv",
        default=None,
        help="Optional path for the phi=0 radial profile table.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        session = build_session(
            mode=args.mode,
            mass=args.mass,
            ads_radius=args.ads_radius,
            tau=args.tau,
            phi_limit=args.phi_limit,
            r_max_factor=args.r_max_factor,
            t=args.time,
            boost=args.boost,
            rotation=args.rotation,
            t_min=args.t_min,
            t_max=args.t_max,
            grid_r=args.grid_r,
            grid_phi=args.grid_phi,
        )
        export_scene(
            session,
            output_path=args.output,
            animate_frames=args.animate_frames,
            profile_csv=args.profile_csv,
            verbose=True,
        )
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
