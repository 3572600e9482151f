"""Vertical color-bar legend drawn in the right margin of an existing plot.

Add the legend last. The strip is drawn in its own axes, and the canvas is
put back to the state it had before the call, so the main plot can still be
annotated afterwards. Tick labels mark the bin boundaries: the range ends
are the outer edges of the first and last colors, not their centres.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

import numpy as np
from matplotlib.axes import Axes

from ..geometry.legend_layout import layout_legend
from ..schema import AxisRange, CanvasConfig, Color, LegendLayout
from .canvas import CanvasContext, preserved_graphics_state
from .ragged_image import binned_colormap
from .style import STYLE, apply_canvas_config


def format_tick(value: float, precision: int = 6) -> str:
    return f"{value:.{precision}g}"


def format_ticks(values: Sequence[float]) -> List[str]:
    """Label boundaries with the fewest significant digits (at least 6) that
    keep labels distinct, each within 1% of the narrowest bin width of its
    boundary."""
    vals = np.asarray(values, dtype=float)
    tolerance = 0.01 * float(np.min(np.diff(vals))) if vals.size > 1 else np.inf
    for precision in range(6, 17):
        labels = [format_tick(v, precision) for v in vals]
        error = max(abs(float(s) - v) for s, v in zip(labels, vals))
        if len(set(labels)) == len(labels) and error <= tolerance:
            return labels
    return [format_tick(v, 17) for v in vals]


def legend_config(config: CanvasConfig) -> CanvasConfig:
    """Return the compact tick settings used inside the legend strip."""
    return replace(
        config,
        mgp=STYLE.LEGEND_MGP,
        tcl=STYLE.LEGEND_TICK_LENGTH,
        cex_axis=STYLE.LEGEND_TICK_FONT_SCALE,
    )


def _draw_strip(ax: Axes, layout: LegendLayout, config: CanvasConfig) -> None:
    n_bins = len(layout.bins)
    boundaries = np.asarray(layout.boundaries, dtype=float)
    cmap, norm = binned_colormap(layout.colors)
    ax.pcolormesh(
        np.array([0.0, 1.0]),
        boundaries,
        np.arange(n_bins, dtype=float).reshape(n_bins, 1),
        cmap=cmap,
        norm=norm,
        shading="flat",
    )
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(boundaries[0], boundaries[-1])
    ax.set_xticks([])
    ax.yaxis.tick_right()
    ax.set_yticks(list(layout.tick_positions))
    ax.set_yticklabels(format_ticks(layout.tick_positions))
    apply_canvas_config(ax, config)
    for spine in ax.spines.values():
        spine.set_visible(True)
        spine.set_linewidth(STYLE.LINEWIDTH_THIN)


def render_legend(layout: LegendLayout, canvas: CanvasContext) -> Axes:
    """Draw ``layout`` onto ``canvas`` and restore the canvas state.

    The canvas configuration captured on entry is restored on every exit
    path. If drawing fails, the half-drawn legend axes are removed before
    the error propagates.

    Returns:
        matplotlib.axes.Axes: The legend axes.
    """
    with preserved_graphics_state(canvas):
        canvas.config = legend_config(canvas.config)
        ax = canvas.open_region(layout.strip_rect)
        try:
            _draw_strip(ax, layout, canvas.config)
        except Exception:
            ax.remove()
            raise
    return ax


def vertical_image_legend(
    canvas: CanvasContext,
    value_range: AxisRange,
    colors: Sequence[Color],
) -> LegendLayout:
    """Put a vertical color-bar legend to the right of the plot on ``canvas``.

    Args:
        canvas: Canvas holding the main plot. Its right margin must be wide
            enough to hold the strip and its labels.
        value_range: Values assigned to ``colors``. Keep this and ``colors``
            identical across figures for consistent coloring.
        colors: Colors in value order.

    Returns:
        LegendLayout: The geometry that was drawn.
    """
    rng = value_range if isinstance(value_range, AxisRange) else AxisRange(*value_range)
    layout = layout_legend(canvas.size, canvas.margins, rng, colors)
    render_legend(layout, canvas)
    return layout
