"""
Rendering geometry shared by every figure type.

Modules:
    figure_planner:
        Figure width/height resolution that preserves the data aspect ratio
        after margins are taken out.

    rasterizer:
        Ragged-grid construction from irregular (x, y, value) samples, with
        unfilled cells kept explicitly missing.

    color_scale:
        Equal-width value bins aligned to an ordered list of colors.

    legend_layout:
        Placement of a vertical color-legend strip and its bins.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib.
    Everything here is pure arithmetic over its inputs and can be tested
    without a drawing backend.
"""

from .color_scale import (
    bin_boundaries,
    bin_index,
    bin_indices,
    bin_midpoints,
    color_for_value,
)
from .figure_planner import (
    DEFAULT_FIGURE_WIDTH,
    plan_figure,
    resolve_canvas,
    resolve_axis_range,
    resolve_figure_size,
)
from .legend_layout import layout_legend, reserved_legend_region
from .rasterizer import cell_edges, rasterize, rasterize_arrays

__all__ = [
    "bin_boundaries",
    "bin_index",
    "bin_indices",
    "bin_midpoints",
    "color_for_value",
    "DEFAULT_FIGURE_WIDTH",
    "plan_figure",
    "resolve_canvas",
    "resolve_axis_range",
    "resolve_figure_size",
    "layout_legend",
    "reserved_legend_region",
    "cell_edges",
    "rasterize",
    "rasterize_arrays",
]
