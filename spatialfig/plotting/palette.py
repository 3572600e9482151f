"""Default color palette for value-coded figures."""

from __future__ import annotations

from typing import List

import numpy as np
from matplotlib.colors import to_hex, to_rgb

from ..errors import InvalidRangeError

# grey90, darkorchid4, blue, darkgreen, yellow, orange, red, brown
KRISTEN_ANCHORS = (
    "#E6E6E6",
    "#68228B",
    "#0000FF",
    "#006400",
    "#FFFF00",
    "#FFA500",
    "#FF0000",
    "#A52A2A",
)


def color_ramp(anchors, n: int) -> List[str]:
    """Return ``n`` colors linearly interpolated in RGB through ``anchors``."""
    if int(n) < 1:
        raise InvalidRangeError(f"Palette size must be at least 1, got {n}.")
    rgb = np.array([to_rgb(c) for c in anchors])
    stops = np.linspace(0.0, 1.0, len(rgb))
    t = np.linspace(0.0, 1.0, int(n))
    channels = np.column_stack([np.interp(t, stops, rgb[:, k]) for k in range(3)])
    return [to_hex(c) for c in channels]


def kristen_colors(n: int = 64) -> List[str]:
    """Return ``n`` colors running grey -> purple -> blue -> green -> yellow ->
    orange -> red -> brown."""
    return color_ramp(KRISTEN_ANCHORS, n)
