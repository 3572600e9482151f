"""Scatter plots whose markers are colored and sized by an observed value."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from matplotlib.collections import PathCollection

from ..errors import InvalidSymbolError
from ..geometry.color_scale import bin_indices
from ..schema import AxisRange, CanvasConfig, Color, ColorScale, PlotConfig
from .aspect_plot import aspect_ratio_plot
from .canvas import CanvasContext
from .palette import kristen_colors
from .style import STYLE

# Bordered symbols only: the fill shows the value, the border the location.
SYMBOL_MARKERS = {
    21: "o",
    22: "s",
    23: "D",
    24: "^",
    25: "v",
}
MARKER_BASE_POINTS = 6.0


def marker_for_symbol(symbol: int) -> str:
    """Return the matplotlib marker for a bordered symbol code 21-25."""
    if symbol not in SYMBOL_MARKERS:
        raise InvalidSymbolError(
            f"Symbol must be one of {tuple(SYMBOL_MARKERS)}, got {symbol!r}."
        )
    return SYMBOL_MARKERS[symbol]


def plot3d_points(
    x,
    y,
    z,
    canvas: Optional[CanvasContext] = None,
    zlim: Optional[Tuple[float, float]] = None,
    colors: Optional[Sequence[Color]] = None,
    symbol: int = 21,
    size_min: float = 1.0,
    size_max: float = 1.0,
    border_color: Color = STYLE.BORDER_COLOR,
    *,
    output_path="points.pdf",
    fmt: str = "pdf",
    width: Optional[float] = None,
    height: Optional[float] = None,
    canvas_config: CanvasConfig = CanvasConfig(),
    plot_config: PlotConfig = PlotConfig(kind="n"),
) -> Tuple[CanvasContext, PathCollection]:
    """Draw a marker at each ``(x, y)`` colored and sized by ``z``.

    Args:
        x, y: Locations of the observations.
        z: Observed values. Points with a non-finite value are skipped.
        canvas: Canvas to draw on; a new one is opened when ``None``.
        zlim: Values given the first and last colors. Defaults to the range
            of the finite ``z``.
        colors: Colors in value order. Defaults to 12 :func:`kristen_colors`.
        symbol: Bordered symbol code: 21 circle, 22 square, 23 diamond,
            24 triangle up, 25 triangle down.
        size_min, size_max: Size multipliers given to ``zlim[0]`` and
            ``zlim[1]``; equal values draw every marker at the same size.
        border_color: Marker outline color; ``"none"`` drops the outline.

    Returns:
        tuple[CanvasContext, PathCollection]: Canvas and the drawn markers.

    Raises:
        InvalidSymbolError: If ``symbol`` is not 21-25.
        InvalidRangeError: If ``zlim`` is degenerate or ``colors`` is empty.
    """
    marker = marker_for_symbol(symbol)
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    z_arr = np.asarray(z, dtype=float).ravel()
    if not (len(x_arr) == len(y_arr) == len(z_arr)):
        raise ValueError("x, y and z must have equal lengths.")

    palette = list(colors) if colors is not None else kristen_colors(12)
    value_range = AxisRange(*zlim) if zlim is not None else AxisRange.from_data(z_arr, axis="z")
    scale = ColorScale(tuple(palette), value_range)

    if canvas is None:
        canvas = aspect_ratio_plot(
            x_arr,
            y_arr,
            output_path=output_path,
            fmt=fmt,
            width=width,
            height=height,
            canvas_config=canvas_config,
            plot_config=plot_config,
        )

    keep = np.isfinite(x_arr) & np.isfinite(y_arr) & np.isfinite(z_arr)
    x_arr, y_arr, z_arr = x_arr[keep], y_arr[keep], z_arr[keep]

    idx = bin_indices(z_arr, scale.value_range, scale.n_bins)
    fill = [scale.colors[i] for i in idx]

    rng = scale.value_range
    frac = (np.clip(z_arr, rng.min, rng.max) - rng.min) / rng.span
    size_scale = size_min + frac * (size_max - size_min)
    diameter = MARKER_BASE_POINTS * size_scale * canvas.config.cex

    return canvas, canvas.active_axes.scatter(
        x_arr,
        y_arr,
        s=diameter**2,
        c=fill,
        marker=marker,
        edgecolors=border_color,
        linewidths=STYLE.LINEWIDTH_THIN,
        zorder=3,
    )
