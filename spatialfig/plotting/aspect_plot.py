"""Open a single-plot figure whose plot region keeps the data aspect ratio."""

from __future__ import annotations

import warnings
from typing import Optional, Tuple

import numpy as np

from ..geometry.figure_planner import plan_figure
from ..schema import CanvasConfig, PlotConfig
from .canvas import CanvasContext
from .devices import init_fig_dimen


def aspect_ratio_plot(
    x=None,
    y=None,
    output_path="figure.pdf",
    fmt: str = "pdf",
    xlim: Optional[Tuple[float, float]] = None,
    ylim: Optional[Tuple[float, float]] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    canvas_config: CanvasConfig = CanvasConfig(),
    plot_config: PlotConfig = PlotConfig(),
) -> CanvasContext:
    """Open a device sized to the data's aspect ratio and plot ``x`` vs ``y``.

    Args:
        x, y: Coordinates to plot. If either is missing, ``xlim``/``ylim``
            are used to initialize an empty plot.
        output_path: File the figure is written to on ``canvas.close()``.
        fmt: Output format, see :func:`spatialfig.plotting.devices.open_device`.
        xlim, ylim: Axis extents; default to the data range.
        width, height: Figure size in inches, margins included. Usually only
            one is given and the other follows from the aspect ratio. With
            neither, the width is 3.5 inches.
        canvas_config: Margins, text-line spacing, and size multipliers.
        plot_config: What the drawing call draws and how it is labelled.

    Returns:
        CanvasContext: Open canvas with the plot drawn (or initialized) on
        ``canvas.axes``.

    Raises:
        MissingAxisInfoError: If an axis has neither limits nor data.
        InvalidRangeError: If an axis range is degenerate or the margins do
            not fit.

    Note:
        Only one plot per device is supported; the main axes fill the region
        inside the margins.
    """
    x_range, y_range, size = plan_figure(
        x=x,
        y=y,
        xlim=xlim,
        ylim=ylim,
        margins=canvas_config.margins,
        width=width,
        height=height,
    )

    kind = plot_config.kind
    if x is None or y is None:
        if kind != "n":
            warnings.warn(
                'Setting kind="n", since x or y is missing.',
                UserWarning,
                stacklevel=2,
            )
        kind = "n"

    canvas = init_fig_dimen(
        output_path,
        fmt=fmt,
        width=size.width,
        height=size.height,
        config=canvas_config,
    )
    ax = canvas.axes
    ax.set_xlim(x_range.min, x_range.max)
    ax.set_ylim(y_range.min, y_range.max)

    if kind != "n":
        x_arr = np.asarray(x, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        marker = plot_config.marker if kind in ("p", "b") else None
        linestyle = "-" if kind in ("l", "b") else "none"
        ax.plot(
            x_arr,
            y_arr,
            linestyle=linestyle,
            marker=marker,
            markersize=plot_config.markersize * canvas_config.cex,
            linewidth=plot_config.linewidth,
            color=plot_config.color,
            markerfacecolor="none" if kind != "l" else None,
        )

    if plot_config.xlabel:
        ax.set_xlabel(plot_config.xlabel)
    if plot_config.ylabel:
        ax.set_ylabel(plot_config.ylabel)
    if plot_config.title:
        ax.set_title(plot_config.title)
    return canvas
