"""Lay out a vertical color-legend strip to the right of the main plot.

The strip lives in the right margin of the figure, between the bottom and top
margins. A small gap separates it from the plot and a larger allowance to its
right is kept free for the tick labels.
"""

from __future__ import annotations

from typing import Sequence

from ..errors import InvalidRangeError
from ..schema import (
    AxisRange,
    Color,
    FigureSize,
    LegendBin,
    LegendLayout,
    Margins,
    NormalizedRect,
)
from .color_scale import bin_boundaries, bin_midpoints

LEGEND_GAP_FRACTION = 0.08
LEGEND_LABEL_FRACTION = 0.60


def reserved_legend_region(figure_size: FigureSize, margins: Margins) -> NormalizedRect:
    """Return the figure-fraction area right of the plot, inside the y margins."""
    if margins.right <= 0:
        raise InvalidRangeError("Right margin is zero; there is no room for a legend.")
    x0 = 1.0 - margins.right / figure_size.width
    y0 = margins.bottom / figure_size.height
    y1 = 1.0 - margins.top / figure_size.height
    if x0 < 0 or y1 <= y0:
        raise InvalidRangeError(
            f"Margins {margins} do not fit a {figure_size.width} x "
            f"{figure_size.height} figure."
        )
    return NormalizedRect(x0=x0, x1=1.0, y0=y0, y1=y1)


def layout_legend(
    figure_size: FigureSize,
    margins: Margins,
    value_range: AxisRange,
    colors: Sequence[Color],
) -> LegendLayout:
    """Compute the legend strip rectangle and one bin per color.

    Args:
        figure_size: Figure size in inches.
        margins: Figure margins in inches; the legend uses the right margin.
        value_range: Values mapped onto ``colors``.
        colors: Colors in value order.

    Returns:
        LegendLayout: ``strip_rect`` in figure fractions and contiguous bins
        whose first low boundary is ``value_range.min`` and last high boundary
        is ``value_range.max``.

    Raises:
        InvalidRangeError: If there are no colors, the range is degenerate, or
            the margins leave no room for a strip.
    """
    palette = list(colors)
    boundaries = bin_boundaries(value_range, len(palette))
    midpoints = bin_midpoints(boundaries)

    region = reserved_legend_region(figure_size, margins)
    span = region.width
    strip = NormalizedRect(
        x0=region.x0 + LEGEND_GAP_FRACTION * span,
        x1=region.x1 - LEGEND_LABEL_FRACTION * span,
        y0=region.y0,
        y1=region.y1,
    )

    bins = tuple(
        LegendBin(
            color=color,
            boundary_low=boundaries[i],
            boundary_high=boundaries[i + 1],
            midpoint=midpoints[i],
        )
        for i, color in enumerate(palette)
    )
    return LegendLayout(strip_rect=strip, bins=bins)
