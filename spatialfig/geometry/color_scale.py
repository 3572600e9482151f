"""Partition a value range into equal-width color bins.

With N colors the range is cut at N+1 evenly spaced boundaries. The first
boundary is the range minimum and the last is the range maximum, so the
extreme colors are assigned to the extreme bins and not to the range ends
as though those were bin centres.
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from ..errors import InvalidRangeError
from ..schema import AxisRange, Color


def _check_count(color_count: int) -> int:
    count = int(color_count)
    if count < 1:
        raise InvalidRangeError(f"Color count must be at least 1, got {color_count}.")
    return count


def _check_range(value_range: AxisRange) -> AxisRange:
    if isinstance(value_range, AxisRange):
        return value_range
    lo, hi = value_range
    return AxisRange(lo, hi)


def bin_boundaries(value_range: AxisRange, color_count: int) -> List[float]:
    """Return ``color_count + 1`` evenly spaced bin boundaries.

    Args:
        value_range: Interval mapped onto the colors. A ``(min, max)`` pair is
            also accepted.
        color_count: Number of colors, i.e. number of bins.

    Returns:
        list[float]: Strictly increasing boundaries from ``value_range.min``
        to ``value_range.max`` inclusive.

    Raises:
        InvalidRangeError: If ``color_count < 1`` or the range is degenerate.
    """
    count = _check_count(color_count)
    rng = _check_range(value_range)
    edges = np.linspace(rng.min, rng.max, count + 1)
    # linspace already pins both ends; keep them bit-exact anyway.
    edges[0] = rng.min
    edges[-1] = rng.max
    return [float(v) for v in edges]


def bin_midpoints(boundaries: Sequence[float]) -> List[float]:
    """Return the arithmetic mean of each consecutive pair of boundaries."""
    edges = np.asarray(boundaries, dtype=float)
    if edges.size < 2:
        raise InvalidRangeError("At least two boundaries are needed for midpoints.")
    return [float(v) for v in (edges[:-1] + edges[1:]) / 2.0]


def bin_index(value: float, value_range: AxisRange, color_count: int) -> int:
    """Return the bin holding ``value`` after clamping it into the range.

    Values outside the range, including +/-inf, fall in the end bins. NaN has
    no bin and raises ``ValueError``.
    """
    count = _check_count(color_count)
    rng = _check_range(value_range)
    v = float(value)
    if math.isnan(v):
        raise ValueError("Cannot assign a color bin to NaN.")
    v = min(max(v, rng.min), rng.max)
    idx = int(math.floor((v - rng.min) / rng.span * count))
    return min(max(idx, 0), count - 1)


def bin_indices(values, value_range: AxisRange, color_count: int) -> np.ndarray:
    """Vectorised :func:`bin_index`.

    Out-of-range values, including +/-inf, are clamped into the end bins as
    in the scalar form. NaN entries map to ``-1``.
    """
    count = _check_count(color_count)
    rng = _check_range(value_range)
    arr = np.asarray(values, dtype=float)
    missing = np.isnan(arr)
    clipped = np.clip(np.where(missing, rng.min, arr), rng.min, rng.max)
    idx = np.floor((clipped - rng.min) / rng.span * count).astype(int)
    idx = np.clip(idx, 0, count - 1)
    return np.where(missing, -1, idx)


def color_for_value(value: float, value_range: AxisRange, colors: Sequence[Color]) -> Color:
    """Return the color of the bin that ``value`` falls in."""
    palette = list(colors)
    return palette[bin_index(value, value_range, len(palette))]
