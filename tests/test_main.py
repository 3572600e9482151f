import logging

import numpy as np

import main


def test_demo_samples_leave_lattice_partly_empty():
    x, y, z = main.make_demo_samples(seed=1)
    assert len(x) == len(y) == len(z)
    assert 0 < len(x) < 40 * 20
    assert np.all(np.isfinite(z))


def test_main_writes_figures_and_tables(caplog, tmp_path):
    caplog.set_level(logging.INFO)
    assert main.main(["--output-dir", str(tmp_path), "--colors", "6"]) == 0

    for name in (
        "sample_locations.pdf",
        "ragged_image.pdf",
        "value_points.pdf",
        "ragged_image_cells.csv",
        "ragged_image_bins.csv",
    ):
        assert (tmp_path / name).exists(), name
    assert "Closed canvas" in caplog.text
