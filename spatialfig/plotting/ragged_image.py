"""Draw color-coded images of grids that are only partly sampled.

A regular image assumes a value for every (x, y) combination. Here the
samples may cover only part of the rectangle; cells with no sample stay
transparent instead of taking a fill color.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np
from matplotlib.collections import QuadMesh
from matplotlib.colors import ListedColormap, Normalize

from ..geometry.color_scale import bin_indices
from ..geometry.rasterizer import cell_edges, rasterize_arrays
from ..schema import AxisRange, CanvasConfig, Color, ColorScale, DenseGrid, PlotConfig
from .aspect_plot import aspect_ratio_plot
from .canvas import CanvasContext
from .palette import kristen_colors

DEFAULT_IMAGE_COLORS = 12


def binned_colormap(colors: Sequence[Color]) -> Tuple[ListedColormap, Normalize]:
    """Return a colormap and norm that map bin index ``k`` to ``colors[k]``.

    Masked entries are fully transparent.
    """
    palette = list(colors)
    cmap = ListedColormap(palette).with_extremes(bad=(0.0, 0.0, 0.0, 0.0))
    norm = Normalize(vmin=-0.5, vmax=len(palette) - 0.5)
    return cmap, norm


def draw_grid(
    ax, grid: DenseGrid, value_range: AxisRange, colors: Sequence[Color]
) -> QuadMesh:
    """Draw ``grid`` on ``ax`` with one solid color per value bin."""
    palette = list(colors)
    idx = bin_indices(grid.values.filled(np.nan), value_range, len(palette))
    cells = np.ma.masked_less(idx, 0)
    cmap, norm = binned_colormap(palette)
    return ax.pcolormesh(
        cell_edges(grid.x_ticks),
        cell_edges(grid.y_ticks),
        cells.T,
        cmap=cmap,
        norm=norm,
        shading="flat",
    )


def ragged_image(
    x,
    y,
    z,
    canvas: Optional[CanvasContext] = None,
    zlim: Optional[Tuple[float, float]] = None,
    colors: Optional[Sequence[Color]] = None,
    *,
    duplicates: str = "error",
    output_path="ragged_image.pdf",
    fmt: str = "pdf",
    width: Optional[float] = None,
    height: Optional[float] = None,
    canvas_config: CanvasConfig = CanvasConfig(),
    plot_config: PlotConfig = PlotConfig(kind="n"),
) -> Tuple[CanvasContext, DenseGrid]:
    """Render samples at grid-cell centres as a ragged image.

    Args:
        x, y: Coordinates of the cell centres that have values. No missing
            values are allowed.
        z: Values at those cells. NaN leaves the cell blank.
        canvas: Canvas to add the image to. When ``None`` a new figure is
            opened, sized so the cells keep the data's aspect ratio.
        zlim: Values assigned to the first and last colors. Defaults to the
            finite range of ``z``.
        colors: Colors in value order. Defaults to 12 :func:`kristen_colors`.
        duplicates: Policy for repeated coordinates, see
            :func:`spatialfig.geometry.rasterizer.rasterize`.
        output_path, fmt, width, height, canvas_config, plot_config: Used
            only when ``canvas`` is ``None``.

    Returns:
        tuple[CanvasContext, DenseGrid]: The canvas drawn on and the grid
        that was rendered.

    Raises:
        InvalidCoordinateError: If ``x`` or ``y`` contains missing values.
        InvalidRangeError: If ``zlim`` is degenerate or ``colors`` is empty.
    """
    grid = rasterize_arrays(x, y, z, duplicates=duplicates)
    palette = list(colors) if colors is not None else kristen_colors(DEFAULT_IMAGE_COLORS)
    value_range = (
        AxisRange(*zlim)
        if zlim is not None
        else AxisRange.from_data(grid.values.compressed(), axis="z")
    )
    scale = ColorScale(tuple(palette), value_range)

    if canvas is None:
        x_edges = cell_edges(grid.x_ticks)
        y_edges = cell_edges(grid.y_ticks)
        canvas = aspect_ratio_plot(
            output_path=output_path,
            fmt=fmt,
            xlim=(x_edges[0], x_edges[-1]),
            ylim=(y_edges[0], y_edges[-1]),
            width=width,
            height=height,
            canvas_config=canvas_config,
            plot_config=plot_config,
        )

    draw_grid(canvas.active_axes, grid, scale.value_range, scale.colors)
    return canvas, grid
