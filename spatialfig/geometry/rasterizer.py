"""Turn irregular (x, y, value) samples into a dense grid with explicit gaps.

The grid axes are the sorted distinct x and y coordinates of the samples, so
the grid can be much larger than the sample count when the sampling is
sparse. Samples are matched to cells by exact float equality; nothing is
snapped, interpolated, or smoothed.
"""

# Algorithm summary: one pass over the samples fills a dict keyed by the
# (x, y) pair, then each filled key is placed through two tick->index dicts.
# Cost is O(n + nx*ny) for the grid allocation, never O(n*nx*ny).

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Tuple

import numpy as np

from ..errors import DuplicateSampleError, InvalidCoordinateError
from ..schema import DenseGrid, GridSample

logger = logging.getLogger(__name__)

DUPLICATE_POLICIES: Tuple[str, ...] = ("error", "first", "last")


def _check_coordinate(value, axis: str, index: int) -> float:
    try:
        coord = float(value)
    except (TypeError, ValueError):
        raise InvalidCoordinateError(
            f"Sample {index} has a missing {axis} coordinate ({value!r})."
        ) from None
    if not math.isfinite(coord):
        raise InvalidCoordinateError(
            f"Sample {index} has a non-finite {axis} coordinate ({coord})."
        )
    return coord


def _value_or_nan(value) -> float:
    if value is None:
        return math.nan
    return float(value)


def rasterize(
    samples: Iterable[GridSample], duplicates: str = "error"
) -> DenseGrid:
    """Build a dense grid from irregularly ordered samples.

    Args:
        samples: Samples with finite ``x`` and ``y``. ``value`` may be NaN or
            ``None``, which leaves the cell missing.
        duplicates: What to do when two samples share a coordinate:
            ``"error"`` raises, ``"first"`` keeps the earliest sample,
            ``"last"`` keeps the latest.

    Returns:
        DenseGrid: Grid of shape ``(len(x_ticks), len(y_ticks))``. Cells
        without a sample are masked.

    Raises:
        InvalidCoordinateError: If any sample coordinate is missing or
            non-finite.
        DuplicateSampleError: If ``duplicates="error"`` and two samples share
            the same ``(x, y)``.
        ValueError: If ``duplicates`` is not a known policy.
    """
    if duplicates not in DUPLICATE_POLICIES:
        raise ValueError(
            f"Unknown duplicate policy '{duplicates}'. "
            f"Expected one of {DUPLICATE_POLICIES}."
        )

    by_coord: Dict[Tuple[float, float], float] = {}
    for idx, sample in enumerate(samples):
        x = _check_coordinate(sample.x, "x", idx)
        y = _check_coordinate(sample.y, "y", idx)
        key = (x, y)
        if key in by_coord:
            if duplicates == "error":
                raise DuplicateSampleError(
                    f"Sample {idx} repeats coordinate ({x}, {y})."
                )
            if duplicates == "first":
                continue
        by_coord[key] = _value_or_nan(sample.value)

    x_ticks = np.array(sorted({x for x, _ in by_coord}), dtype=float)
    y_ticks = np.array(sorted({y for _, y in by_coord}), dtype=float)
    x_index = {x: i for i, x in enumerate(x_ticks.tolist())}
    y_index = {y: j for j, y in enumerate(y_ticks.tolist())}

    data = np.full((len(x_ticks), len(y_ticks)), np.nan)
    for (x, y), value in by_coord.items():
        data[x_index[x], y_index[y]] = value

    values = np.ma.masked_invalid(data)
    logger.debug(
        "Rasterized %d samples onto a %dx%d grid (%d cells filled)",
        len(by_coord),
        len(x_ticks),
        len(y_ticks),
        int(np.ma.count(values)),
    )
    return DenseGrid(x_ticks=x_ticks, y_ticks=y_ticks, values=values)


def rasterize_arrays(x, y, z, duplicates: str = "error") -> DenseGrid:
    """Rasterize parallel coordinate and value arrays.

    Raises:
        ValueError: If ``x``, ``y`` and ``z`` differ in length.
    """
    x_arr = np.asarray(x, dtype=object).ravel()
    y_arr = np.asarray(y, dtype=object).ravel()
    z_arr = np.asarray(z, dtype=object).ravel()
    if not (len(x_arr) == len(y_arr) == len(z_arr)):
        raise ValueError(
            f"x, y and z must have equal lengths, got "
            f"{len(x_arr)}, {len(y_arr)} and {len(z_arr)}."
        )
    samples = (GridSample(xi, yi, zi) for xi, yi, zi in zip(x_arr, y_arr, z_arr))
    return rasterize(samples, duplicates=duplicates)


def cell_edges(ticks) -> np.ndarray:
    """Return cell edges for cells centred on ``ticks``.

    Inner edges sit midway between neighbouring ticks and the outer edges
    extend half a step beyond the first and last tick. A single tick gets a
    unit-wide cell.
    """
    centers = np.asarray(ticks, dtype=float)
    if centers.size == 0:
        raise ValueError("At least one tick is required to build cell edges.")
    if centers.size == 1:
        return np.array([centers[0] - 0.5, centers[0] + 0.5])
    mids = (centers[:-1] + centers[1:]) / 2.0
    first = centers[0] - (mids[0] - centers[0])
    last = centers[-1] + (centers[-1] - mids[-1])
    return np.concatenate(([first], mids, [last]))
