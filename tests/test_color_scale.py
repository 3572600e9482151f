import numpy as np
import pytest

from spatialfig.errors import InvalidRangeError
from spatialfig.geometry.color_scale import (
    bin_boundaries,
    bin_index,
    bin_indices,
    bin_midpoints,
    color_for_value,
)
from spatialfig.schema import AxisRange, ColorScale

COLORS = ["#000000", "#555555", "#AAAAAA", "#FFFFFF"]


def test_four_bins_over_zero_to_ten():
    bounds = bin_boundaries(AxisRange(0, 10), 4)
    assert bounds == [0.0, 2.5, 5.0, 7.5, 10.0]
    assert bin_midpoints(bounds) == [1.25, 3.75, 6.25, 8.75]


@pytest.mark.parametrize("count", [1, 2, 3, 7, 64, 255])
@pytest.mark.parametrize("lo,hi", [(0.0, 1.0), (-3.2, 7.9), (1e-6, 2e-6), (-500.0, -499.0)])
def test_boundaries_and_midpoints_properties(count, lo, hi):
    bounds = bin_boundaries(AxisRange(lo, hi), count)
    assert len(bounds) == count + 1
    assert bounds[0] == lo
    assert bounds[-1] == hi
    assert all(b1 < b2 for b1, b2 in zip(bounds, bounds[1:]))

    mids = bin_midpoints(bounds)
    assert len(mids) == count
    assert all(bounds[i] < m < bounds[i + 1] for i, m in enumerate(mids))


def test_zero_colors_is_invalid():
    with pytest.raises(InvalidRangeError):
        bin_boundaries(AxisRange(0, 1), 0)
    with pytest.raises(InvalidRangeError):
        color_for_value(0.5, AxisRange(0, 1), [])
    with pytest.raises(InvalidRangeError):
        ColorScale((), AxisRange(0, 1))


def test_degenerate_value_range_is_invalid():
    with pytest.raises(InvalidRangeError):
        bin_boundaries((2.0, 2.0), 4)
    with pytest.raises(InvalidRangeError):
        bin_boundaries((3.0, 2.0), 4)


def test_color_for_value_bins_and_clamps():
    rng = AxisRange(0, 10)
    assert color_for_value(0.0, rng, COLORS) == COLORS[0]
    assert color_for_value(2.49, rng, COLORS) == COLORS[0]
    assert color_for_value(2.5, rng, COLORS) == COLORS[1]
    assert color_for_value(7.5, rng, COLORS) == COLORS[3]
    assert color_for_value(10.0, rng, COLORS) == COLORS[3]
    assert color_for_value(-50.0, rng, COLORS) == COLORS[0]
    assert color_for_value(1e9, rng, COLORS) == COLORS[3]


def test_bin_index_rejects_nan():
    with pytest.raises(ValueError):
        bin_index(np.nan, AxisRange(0, 1), 3)


def test_vectorised_indices_match_scalar():
    rng = AxisRange(-1.0, 3.0)
    values = np.linspace(-2.0, 4.0, 61)
    expected = [bin_index(v, rng, 5) for v in values]
    assert bin_indices(values, rng, 5).tolist() == expected


def test_vectorised_indices_flag_nan_only():
    out = bin_indices(np.array([np.nan, 0.5, np.inf, -np.inf]), AxisRange(0, 1), 2)
    assert out.tolist() == [-1, 1, 1, 0]


@pytest.mark.parametrize("value,expected", [(np.inf, 2), (-np.inf, 0), (1e300, 2)])
def test_infinite_values_clamp_in_both_forms(value, expected):
    rng = AxisRange(0, 1)
    assert bin_index(value, rng, 3) == expected
    assert bin_indices([value], rng, 3).tolist() == [expected]


def test_color_scale_bin_count():
    scale = ColorScale(COLORS, AxisRange(0, 10))
    assert scale.n_bins == 4
    assert scale.colors == tuple(COLORS)
