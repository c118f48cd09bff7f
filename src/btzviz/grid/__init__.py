from btzviz.grid.mesh import (
    GridConfig,
    LogicalGrid,
    build_grid,
    grid_faces,
    radial_bounds,
    radial_colors,
)

__all__ = [
    "GridConfig",
    "LogicalGrid",
    "build_grid",
    "grid_faces",
    "radial_bounds",
    "radial_colors",
]
