import math

import numpy as np
import pytest

from spatialfig.errors import InvalidCoordinateError, InvalidRangeError, InvalidSymbolError
from spatialfig.plotting.aspect_plot import aspect_ratio_plot
from spatialfig.plotting.palette import KRISTEN_ANCHORS, kristen_colors
from spatialfig.plotting.points import SYMBOL_MARKERS, plot3d_points
from spatialfig.plotting.ragged_image import binned_colormap, ragged_image
from spatialfig.schema import PlotConfig


def test_aspect_ratio_plot_sizes_figure_from_data(tmp_path):
    canvas = aspect_ratio_plot([0, 10], [0, 5], output_path=tmp_path / "a.pdf")
    width, height = canvas.figure.get_size_inches()
    assert math.isclose(width, 3.5)
    assert math.isclose(height, 2.0)
    assert canvas.axes.get_xlim() == (0.0, 10.0)
    assert canvas.axes.get_ylim() == (0.0, 5.0)
    assert len(canvas.axes.lines) == 1
    assert canvas.close().exists()


def test_missing_data_falls_back_to_empty_plot(tmp_path):
    with pytest.warns(UserWarning, match='kind="n"'):
        canvas = aspect_ratio_plot(xlim=(0, 4), ylim=(0, 2), output_path=tmp_path / "a.pdf")
    assert len(canvas.axes.lines) == 0
    assert canvas.axes.get_xlim() == (0.0, 4.0)


def test_both_dimensions_warn_and_are_kept(tmp_path):
    with pytest.warns(UserWarning, match="without checking aspect ratio"):
        canvas = aspect_ratio_plot(
            [0, 1], [0, 3], width=3.0, height=3.0, output_path=tmp_path / "a.pdf"
        )
    assert tuple(canvas.figure.get_size_inches()) == (3.0, 3.0)


def test_plot_config_labels_and_line_kind(tmp_path):
    config = PlotConfig(kind="l", xlabel="Easting (m)", ylabel="Northing (m)", title="Site")
    canvas = aspect_ratio_plot(
        [0, 1, 2], [0, 1, 0], output_path=tmp_path / "a.pdf", plot_config=config
    )
    assert canvas.axes.get_xlabel() == "Easting (m)"
    assert canvas.axes.get_ylabel() == "Northing (m)"
    assert canvas.axes.get_title() == "Site"
    assert canvas.axes.lines[0].get_linestyle() == "-"


def test_invalid_plot_kind_rejected():
    with pytest.raises(ValueError):
        PlotConfig(kind="h")


def test_ragged_image_leaves_missing_cell_transparent(tmp_path):
    canvas, grid = ragged_image(
        [1, 1, 2], [1, 2, 1], [10, 20, 30], colors=["#000000", "#808080", "#FFFFFF"],
        output_path=tmp_path / "r.pdf",
    )
    mesh = canvas.axes.collections[0]
    cells = mesh.get_array()
    assert np.ma.count_masked(cells) == 1
    assert sorted(np.ma.compressed(cells).tolist()) == [0, 1, 2]
    assert grid.shape == (2, 2)
    assert canvas.axes.get_xlim() == (0.5, 2.5)


def test_ragged_image_draws_on_existing_canvas(tmp_path):
    canvas = aspect_ratio_plot(xlim=(0, 3), ylim=(0, 3), output_path=tmp_path / "r.pdf",
                               plot_config=PlotConfig(kind="n"))
    same, _ = ragged_image([1, 2], [1, 2], [0.0, 1.0], canvas=canvas, zlim=(0, 1))
    assert same is canvas
    assert len(canvas.axes.collections) == 1
    assert canvas.axes.get_xlim() == (0.0, 3.0)


def test_ragged_image_rejects_missing_coordinates(tmp_path):
    with pytest.raises(InvalidCoordinateError):
        ragged_image([1.0, np.nan], [1.0, 2.0], [1.0, 2.0], output_path=tmp_path / "r.pdf")


def test_ragged_image_rejects_degenerate_zlim(tmp_path):
    with pytest.raises(InvalidRangeError):
        ragged_image([1, 2], [1, 2], [1.0, 2.0], zlim=(1.0, 1.0), output_path=tmp_path / "r.pdf")


def test_binned_colormap_maps_index_to_color():
    cmap, norm = binned_colormap(["#ff0000", "#00ff00", "#0000ff"])
    assert cmap.N == 3
    assert tuple(cmap(norm(2))) == (0.0, 0.0, 1.0, 1.0)
    assert cmap(np.ma.masked_array([0.0], mask=[True]))[0][3] == 0.0


def test_points_colored_and_sized_by_value(tmp_path):
    canvas, points = plot3d_points(
        [0, 1, 2, 3], [0, 1, 2, 3], [0.0, 5.0, 10.0, np.nan],
        colors=["#000000", "#FFFFFF"], size_min=1.0, size_max=2.0,
        output_path=tmp_path / "p.pdf",
    )
    faces = points.get_facecolors()
    assert len(faces) == 3
    assert tuple(faces[0][:3]) == (0.0, 0.0, 0.0)
    assert tuple(faces[-1][:3]) == (1.0, 1.0, 1.0)
    sizes = points.get_sizes()
    assert sizes[0] < sizes[1] < sizes[2]
    assert math.isclose(sizes[2] / sizes[0], 4.0)


@pytest.mark.parametrize("symbol", sorted(SYMBOL_MARKERS))
def test_points_accept_bordered_symbols(tmp_path, symbol):
    _, points = plot3d_points([0, 1], [0, 1], [0, 1], symbol=symbol,
                              output_path=tmp_path / "p.pdf")
    assert len(points.get_offsets()) == 2


@pytest.mark.parametrize("symbol", [1, 20, 26, "o"])
def test_points_reject_unbordered_symbols(symbol):
    with pytest.raises(InvalidSymbolError):
        plot3d_points([0, 1], [0, 1], [0, 1], symbol=symbol)


def test_plotting_does_not_mutate_inputs(tmp_path):
    x = np.array([3.0, 1.0, 2.0])
    y = np.array([1.0, 1.0, 2.0])
    z = np.array([0.5, np.nan, 1.5])
    before = (x.copy(), y.copy(), z.copy())
    ragged_image(x, y, z, output_path=tmp_path / "r.pdf")
    plot3d_points(x, y, z, output_path=tmp_path / "p.pdf")
    for original, arr in zip(before, (x, y, z)):
        np.testing.assert_array_equal(original, arr)


def test_kristen_colors_ramp_endpoints():
    colors = kristen_colors()
    assert len(colors) == 64
    assert colors[0] == KRISTEN_ANCHORS[0].lower() == "#e6e6e6"
    assert colors[-1] == "#a52a2a"
    assert kristen_colors(len(KRISTEN_ANCHORS)) == [c.lower() for c in KRISTEN_ANCHORS]
    assert kristen_colors(1) == ["#e6e6e6"]


def test_kristen_colors_requires_positive_count():
    with pytest.raises(InvalidRangeError):
        kristen_colors(0)
