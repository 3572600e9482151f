import numpy as np
import pytest

from spatialfig.errors import DuplicateSampleError, InvalidCoordinateError
from spatialfig.geometry.rasterizer import cell_edges, rasterize, rasterize_arrays
from spatialfig.schema import GridSample


def test_three_samples_leave_one_missing_cell():
    grid = rasterize(
        [GridSample(1, 1, 10), GridSample(1, 2, 20), GridSample(2, 1, 30)]
    )
    assert grid.x_ticks.tolist() == [1.0, 2.0]
    assert grid.y_ticks.tolist() == [1.0, 2.0]
    assert grid.cell(0, 0) == 10
    assert grid.cell(0, 1) == 20
    assert grid.cell(1, 0) == 30
    assert grid.cell(1, 1) is None
    assert grid.n_filled == 3


def test_unordered_samples_are_sorted_into_ticks():
    grid = rasterize_arrays([5.0, -1.0, 2.5], [0.0, 3.0, 0.0], [1.0, 2.0, 3.0])
    assert grid.x_ticks.tolist() == [-1.0, 2.5, 5.0]
    assert grid.y_ticks.tolist() == [0.0, 3.0]
    assert grid.cell(0, 1) == 2.0
    assert grid.cell(1, 0) == 3.0
    assert grid.cell(2, 0) == 1.0


@pytest.mark.parametrize("seed", range(5))
def test_sparse_grid_dimensions_and_values(seed):
    rng = np.random.default_rng(seed)
    xs = rng.choice(np.linspace(-3.0, 3.0, 25), size=120)
    ys = rng.choice(np.linspace(0.0, 1.0, 13), size=120)
    pairs = {}
    for x, y in zip(xs, ys):
        pairs.setdefault((float(x), float(y)), float(rng.normal()))

    x_in = [p[0] for p in pairs]
    y_in = [p[1] for p in pairs]
    z_in = list(pairs.values())
    grid = rasterize_arrays(x_in, y_in, z_in)

    assert grid.shape == (len(set(x_in)), len(set(y_in)))
    assert grid.values.shape == grid.shape
    x_pos = {x: i for i, x in enumerate(grid.x_ticks.tolist())}
    y_pos = {y: j for j, y in enumerate(grid.y_ticks.tolist())}
    for (x, y), value in pairs.items():
        assert grid.cell(x_pos[x], y_pos[y]) == value
    assert grid.n_filled == len(pairs)
    assert int(np.ma.count_masked(grid.values)) == grid.shape[0] * grid.shape[1] - len(pairs)


def test_complete_rectangle_has_no_missing_cells():
    xs, ys = np.meshgrid([0.0, 1.0, 2.0], [10.0, 20.0], indexing="ij")
    grid = rasterize_arrays(xs.ravel(), ys.ravel(), np.arange(6.0))
    assert grid.shape == (3, 2)
    assert grid.n_filled == 6
    assert not np.ma.is_masked(grid.values)


def test_missing_cells_are_masked_not_zero():
    grid = rasterize_arrays([0.0, 1.0], [0.0, 1.0], [5.0, 6.0])
    assert grid.values.mask[0, 1]
    assert grid.values.mask[1, 0]
    assert grid.to_frame()["value"].isna().sum() == 2


def test_nan_value_leaves_cell_missing():
    grid = rasterize([GridSample(0, 0, np.nan), GridSample(1, 0, 2.0)])
    assert grid.cell(0, 0) is None
    assert grid.cell(1, 0) == 2.0


@pytest.mark.parametrize("bad", [np.nan, np.inf, None])
def test_non_finite_coordinate_rejected(bad):
    with pytest.raises(InvalidCoordinateError):
        rasterize([GridSample(0.0, 0.0, 1.0), GridSample(bad, 1.0, 2.0)])
    with pytest.raises(InvalidCoordinateError):
        rasterize([GridSample(0.0, bad, 1.0)])


def test_exact_equality_no_snapping():
    grid = rasterize_arrays([0.1 + 0.2, 0.3], [0.0, 0.0], [1.0, 2.0])
    assert grid.shape == (2, 1)


def test_duplicate_policies():
    samples = [GridSample(0, 0, 1.0), GridSample(0, 0, 2.0)]
    with pytest.raises(DuplicateSampleError):
        rasterize(samples)
    assert rasterize(samples, duplicates="first").cell(0, 0) == 1.0
    assert rasterize(samples, duplicates="last").cell(0, 0) == 2.0
    with pytest.raises(ValueError, match="duplicate policy"):
        rasterize(samples, duplicates="mean")


def test_unequal_lengths_rejected():
    with pytest.raises(ValueError, match="equal lengths"):
        rasterize_arrays([0.0, 1.0], [0.0], [1.0, 2.0])


def test_cell_edges_midway_and_extended():
    edges = cell_edges([0.0, 1.0, 3.0])
    assert edges.tolist() == [-0.5, 0.5, 2.0, 4.0]
    assert cell_edges([2.0]).tolist() == [1.5, 2.5]


def test_to_frame_covers_every_cell():
    grid = rasterize_arrays([1.0, 1.0, 2.0], [1.0, 2.0, 1.0], [10.0, 20.0, 30.0])
    frame = grid.to_frame()
    assert len(frame) == 4
    row = frame[(frame["x"] == 2.0) & (frame["y"] == 2.0)].iloc[0]
    assert np.isnan(row["value"])


def test_large_partial_lattice():
    rng = np.random.default_rng(2024)
    xs, ys = np.meshgrid(np.arange(300.0), np.linspace(-1.0, 1.0, 300), indexing="ij")
    keep = rng.choice(xs.size, size=40_000, replace=False)
    x = xs.ravel()[keep]
    y = ys.ravel()[keep]
    z = rng.normal(size=keep.size)
    reference = {(float(a), float(b)): float(c) for a, b, c in zip(x, y, z)}

    grid = rasterize_arrays(x, y, z)

    assert grid.shape == (len(set(x.tolist())), len(set(y.tolist())))
    assert grid.n_filled == 40_000
    assert int(np.ma.count_masked(grid.values)) == grid.shape[0] * grid.shape[1] - 40_000
    x_pos = {v: i for i, v in enumerate(grid.x_ticks.tolist())}
    y_pos = {v: j for j, v in enumerate(grid.y_ticks.tolist())}
    for k in rng.choice(keep.size, size=200, replace=False):
        key = (float(x[k]), float(y[k]))
        assert grid.cell(x_pos[key[0]], y_pos[key[1]]) == reference[key]
