"""Size a figure so the plot region keeps the data's aspect ratio.

The figure size includes the margins, so the margins are subtracted before
the y-to-x proportion of the axis ranges is applied to the remaining plot
region. This keeps the on-page aspect ratio exact whatever the margins are.
"""

from __future__ import annotations

import warnings
from typing import Optional, Tuple

from ..errors import InvalidRangeError, MissingAxisInfoError
from ..schema import DEFAULT_MARGINS, AxisRange, CanvasSpec, FigureSize, Margins

# Roughly one column of a two-column journal page, in inches.
DEFAULT_FIGURE_WIDTH = 3.5


def resolve_axis_range(
    limits: Optional[Tuple[float, float]] = None,
    data=None,
    axis: str = "x",
) -> AxisRange:
    """Return explicit axis limits, or the range of the data when absent.

    Args:
        limits: Explicit ``(min, max)`` for the axis, or an ``AxisRange``.
        data: Coordinate values for the axis. NaNs are ignored.
        axis: Axis name used in error messages.

    Returns:
        AxisRange: The resolved range.

    Raises:
        MissingAxisInfoError: If both ``limits`` and ``data`` are missing.
        InvalidRangeError: If the resolved range has zero or negative width.
    """
    if limits is not None:
        if isinstance(limits, AxisRange):
            return limits
        lo, hi = limits
        return AxisRange(lo, hi)
    if data is None:
        raise MissingAxisInfoError(
            f"Need information about {axis}-axis; {axis}lim and {axis} are missing."
        )
    return AxisRange.from_data(data, axis=axis)


def resolve_figure_size(
    x_range: AxisRange,
    y_range: AxisRange,
    margins: Margins = DEFAULT_MARGINS,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> FigureSize:
    """Resolve the canvas width and height from at most one given dimension.

    Args:
        x_range: Range of the x-axis; an ``AxisRange`` or a ``(min, max)`` pair.
        y_range: Range of the y-axis, in the same forms.
        margins: Margins in inches.
        width: Total figure width in inches, margins included.
        height: Total figure height in inches, margins included.

    Returns:
        FigureSize: Width and height such that
        ``plot_height / plot_width == y_range.span / x_range.span``.

    Raises:
        InvalidRangeError: If the margins leave no room for the plot. Zero-width
            ranges are already rejected when the ``AxisRange`` is built.

    Note:
        When both dimensions are given they are returned unchanged and a
        ``UserWarning`` is issued, since the aspect ratio is not checked.
    """
    if width is not None and height is not None:
        warnings.warn(
            "Using provided 'height' and 'width' without checking aspect ratio.",
            UserWarning,
            stacklevel=2,
        )
        return FigureSize(float(width), float(height))

    x_range = resolve_axis_range(x_range, axis="x")
    y_range = resolve_axis_range(y_range, axis="y")
    prop_y_to_x = y_range.span / x_range.span

    if width is None and height is None:
        width = DEFAULT_FIGURE_WIDTH

    if height is None:
        plot_width = float(width) - margins.left - margins.right
        if plot_width <= 0:
            raise InvalidRangeError(
                f"Width {width} leaves no room for the plot after horizontal "
                f"margins of {margins.horizontal}."
            )
        plot_height = plot_width * prop_y_to_x
        return FigureSize(float(width), plot_height + margins.top + margins.bottom)

    plot_height = float(height) - margins.bottom - margins.top
    if plot_height <= 0:
        raise InvalidRangeError(
            f"Height {height} leaves no room for the plot after vertical "
            f"margins of {margins.vertical}."
        )
    plot_width = plot_height / prop_y_to_x
    return FigureSize(plot_width + margins.left + margins.right, float(height))


def plan_figure(
    x=None,
    y=None,
    xlim: Optional[Tuple[float, float]] = None,
    ylim: Optional[Tuple[float, float]] = None,
    margins: Margins = DEFAULT_MARGINS,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> Tuple[AxisRange, AxisRange, FigureSize]:
    """Resolve both axis ranges and the figure size in one call."""
    x_range = resolve_axis_range(xlim, x, axis="x")
    y_range = resolve_axis_range(ylim, y, axis="y")
    size = resolve_figure_size(x_range, y_range, margins, width, height)
    return x_range, y_range, size


def resolve_canvas(spec: CanvasSpec, x_range: AxisRange, y_range: AxisRange) -> FigureSize:
    """Resolve a partial :class:`CanvasSpec` against the axis ranges."""
    return resolve_figure_size(x_range, y_range, spec.margins, spec.width, spec.height)
