"""Define the value types shared by the geometry engine and the renderers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from .errors import InvalidRangeError, MissingAxisInfoError

Color = str


@dataclass(frozen=True)
class AxisRange:
    """Closed numeric interval used for axis limits and color scales.

    Attributes:
        min: Lower end of the interval.
        max: Upper end of the interval. Must be strictly greater than
            ``min``; zero-width and inverted ranges are rejected rather than
            silently widened.
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        lo = float(self.min)
        hi = float(self.max)
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise InvalidRangeError(f"Range bounds must be finite, got [{lo}, {hi}].")
        if hi <= lo:
            raise InvalidRangeError(
                f"Range maximum must exceed minimum, got [{lo}, {hi}]."
            )
        object.__setattr__(self, "min", lo)
        object.__setattr__(self, "max", hi)

    @property
    def span(self) -> float:
        return self.max - self.min

    @classmethod
    def from_data(cls, values, axis: str = "x") -> "AxisRange":
        """Return the range of the finite entries in ``values``.

        Raises:
            MissingAxisInfoError: If ``values`` holds no finite number.
            InvalidRangeError: If all finite values are equal.
        """
        arr = np.asarray(values, dtype=float).ravel()
        arr = arr[np.isfinite(arr)]
        if arr.size == 0:
            raise MissingAxisInfoError(
                f"Need information about {axis}-axis; no finite {axis} values."
            )
        return cls(float(arr.min()), float(arr.max()))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.min, self.max)


@dataclass(frozen=True)
class Margins:
    """Figure margins in inches, measured from each edge to the plot region."""

    left: float
    right: float
    top: float
    bottom: float

    def __post_init__(self) -> None:
        for name in ("left", "right", "top", "bottom"):
            value = float(getattr(self, name))
            if not math.isfinite(value) or value < 0:
                raise InvalidRangeError(
                    f"Margin '{name}' must be finite and non-negative, got {value}."
                )
            object.__setattr__(self, name, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class FigureSize:
    """Resolved physical canvas dimensions in inches."""

    width: float
    height: float

    def plot_area(self, margins: Margins) -> Tuple[float, float]:
        """Return the (width, height) left for the plot after margins."""
        return (self.width - margins.horizontal, self.height - margins.vertical)


@dataclass(frozen=True)
class CanvasSpec:
    """Partial canvas request; at most one dimension is normally omitted."""

    margins: Margins
    width: Optional[float] = None
    height: Optional[float] = None


@dataclass(frozen=True)
class ColorScale:
    """Ordered colors spread evenly over a value range."""

    colors: Tuple[Color, ...]
    value_range: AxisRange

    def __post_init__(self) -> None:
        colors = tuple(self.colors)
        if not colors:
            raise InvalidRangeError("A color scale needs at least one color.")
        object.__setattr__(self, "colors", colors)

    @property
    def n_bins(self) -> int:
        return len(self.colors)


@dataclass(frozen=True)
class GridSample:
    x: float
    y: float
    value: float


@dataclass(frozen=True, eq=False)
class DenseGrid:
    """Rectangular grid over the distinct sample coordinates.

    ``values[i, j]`` holds the sample at ``(x_ticks[i], y_ticks[j])``. Cells
    without a sample are masked; they are never zero-filled.
    """

    x_ticks: np.ndarray
    y_ticks: np.ndarray
    values: np.ma.MaskedArray

    @property
    def shape(self) -> Tuple[int, int]:
        return (len(self.x_ticks), len(self.y_ticks))

    @property
    def n_filled(self) -> int:
        return int(np.ma.count(self.values))

    def cell(self, i: int, j: int) -> Optional[float]:
        """Return the value at index ``(i, j)`` or ``None`` when missing."""
        if np.ma.is_masked(self.values[i, j]):
            return None
        return float(self.values[i, j])

    def to_frame(self) -> pd.DataFrame:
        """Return a long table with one row per cell; missing cells are NaN."""
        xx, yy = np.meshgrid(self.x_ticks, self.y_ticks, indexing="ij")
        return pd.DataFrame(
            {
                "x": xx.ravel(),
                "y": yy.ravel(),
                "value": self.values.filled(np.nan).ravel(),
            }
        )


@dataclass(frozen=True)
class NormalizedRect:
    """Rectangle in figure-fraction coordinates (0 to 1 on each axis)."""

    x0: float
    x1: float
    y0: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def as_bounds(self) -> Tuple[float, float, float, float]:
        """Return ``(left, bottom, width, height)`` as matplotlib expects."""
        return (self.x0, self.y0, self.width, self.height)


@dataclass(frozen=True)
class LegendBin:
    color: Color
    boundary_low: float
    boundary_high: float
    midpoint: float


@dataclass(frozen=True)
class LegendLayout:
    """Placement of a vertical color strip and its per-bin fills."""

    strip_rect: NormalizedRect
    bins: Tuple[LegendBin, ...]

    @property
    def colors(self) -> Tuple[Color, ...]:
        return tuple(b.color for b in self.bins)

    @property
    def boundaries(self) -> Tuple[float, ...]:
        return (self.bins[0].boundary_low,) + tuple(b.boundary_high for b in self.bins)

    @property
    def midpoints(self) -> Tuple[float, ...]:
        return tuple(b.midpoint for b in self.bins)

    @property
    def tick_positions(self) -> Tuple[float, ...]:
        """Label positions: the bin boundaries, not the bin midpoints."""
        return self.boundaries


DEFAULT_MARGINS = Margins(left=0.4, right=0.1, top=0.1, bottom=0.4)
INIT_MARGINS = Margins(left=0.6, right=0.1, top=0.1, bottom=0.6)


@dataclass(frozen=True)
class CanvasConfig:
    """Device-level graphics settings applied when a canvas is opened.

    Attributes:
        margins: Margins in inches around the plot region.
        mgp: Distances, in text lines, of the axis title, the tick labels,
            and the axis line from the plot region.
        tcl: Tick length in text lines; negative values point outward.
        cex: Symbol size multiplier.
        cex_axis, cex_lab, cex_main, cex_sub: Size multipliers for tick
            labels, axis titles, the main title, and the subtitle.

    The defaults are tuned for a 3.5 inch single-column figure.
    """

    margins: Margins = DEFAULT_MARGINS
    mgp: Tuple[float, float, float] = (1.4, 0.3, 0.0)
    tcl: float = -0.3
    cex: float = 0.8
    cex_axis: float = 0.8
    cex_lab: float = 0.8
    cex_main: float = 0.8
    cex_sub: float = 0.8


PLOT_KINDS: Tuple[str, ...] = ("p", "l", "b", "n")


@dataclass(frozen=True)
class PlotConfig:
    """Settings for the drawing call itself.

    ``kind`` follows the usual plot-type letters: ``"p"`` points, ``"l"``
    lines, ``"b"`` both, ``"n"`` set up the axes but draw nothing.
    """

    kind: str = "p"
    color: Color = "black"
    marker: str = "o"
    markersize: float = 4.0
    linewidth: float = 1.0
    xlabel: str = ""
    ylabel: str = ""
    title: str = ""

    def __post_init__(self) -> None:
        if self.kind not in PLOT_KINDS:
            raise ValueError(
                f"Unsupported plot kind '{self.kind}'. Expected one of {PLOT_KINDS}."
            )
