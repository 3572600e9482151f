"""
A Python package for static, publication-quality figures of spatial
measurements.

Sizes figures so the plot region keeps the data's aspect ratio, renders
irregularly sampled grids with explicit gaps, and adds color-bar legends
whose labels sit exactly on the color-bin boundaries.

Modules:
    - geometry: Figure sizing, ragged-grid rasterization, color binning, and
      legend layout (no matplotlib dependency).
    - plotting: Devices, canvas state, and the figure types built on them.
    - output: CSV side tables for grids and legends.
    - schema: Shared value types and configuration structures.
    - errors: Exception types.
"""

__version__ = "1.0.0"

from .errors import (
    DuplicateSampleError,
    InvalidCoordinateError,
    InvalidRangeError,
    InvalidSymbolError,
    MissingAxisInfoError,
    SpatialFigError,
    UnsupportedPlatformError,
)
from .geometry import (
    bin_boundaries,
    bin_midpoints,
    color_for_value,
    layout_legend,
    rasterize,
    resolve_figure_size,
)
from .output import save_grid_to_csv, save_legend_table
from .plotting import (
    aspect_ratio_plot,
    init_fig_dimen,
    kristen_colors,
    plot3d_points,
    ragged_image,
    vertical_image_legend,
)
from .schema import (
    AxisRange,
    CanvasConfig,
    ColorScale,
    DenseGrid,
    GridSample,
    LegendLayout,
    Margins,
    PlotConfig,
)

__all__ = [
    # Errors
    "SpatialFigError",
    "MissingAxisInfoError",
    "InvalidRangeError",
    "InvalidCoordinateError",
    "DuplicateSampleError",
    "UnsupportedPlatformError",
    "InvalidSymbolError",
    # Geometry
    "resolve_figure_size",
    "rasterize",
    "bin_boundaries",
    "bin_midpoints",
    "color_for_value",
    "layout_legend",
    # Plotting
    "aspect_ratio_plot",
    "init_fig_dimen",
    "ragged_image",
    "plot3d_points",
    "vertical_image_legend",
    "kristen_colors",
    # Output
    "save_grid_to_csv",
    "save_legend_table",
    # Types
    "AxisRange",
    "Margins",
    "CanvasConfig",
    "PlotConfig",
    "ColorScale",
    "GridSample",
    "DenseGrid",
    "LegendLayout",
]
