#!/usr/bin/env python3
"""
Main script for rendering the demonstration figure set.
"""

# Pipeline overview (README-style):
# 1) Build a synthetic, irregularly sampled field on a coarse lattice.
# 2) Size an aspect-preserving scatter of the sample locations.
# 3) Rasterize the samples into a ragged grid and color it by value bin.
# 4) Add a vertical legend labelled at bin boundaries.
# 5) Draw value-coded point symbols and export the CSV side tables.

import argparse
import logging
import os
import sys
import time

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from spatialfig.output import save_grid_to_csv, save_legend_table
from spatialfig.plotting import (
    aspect_ratio_plot,
    kristen_colors,
    plot3d_points,
    ragged_image,
    vertical_image_legend,
)
from spatialfig.schema import CanvasConfig, Margins, PlotConfig


def make_demo_samples(seed: int = 7, keep_fraction: float = 0.6):
    """Return x, y, z for a partly sampled 40 x 20 lattice."""
    rng = np.random.default_rng(seed)
    xs, ys = np.meshgrid(np.arange(40.0), np.arange(20.0), indexing="ij")
    keep = rng.random(xs.shape) < keep_fraction
    x = xs[keep]
    y = ys[keep]
    z = np.sin(x / 6.0) + np.cos(y / 4.0)
    return x, y, z


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--format", default="pdf", choices=["eps", "pdf", "wmf", "tif"])
    parser.add_argument("--colors", type=int, default=12)
    return parser.parse_args(argv)


def main(argv=None):
    """Main execution function with step timing logs."""
    args = parse_args(argv)
    os.makedirs(args.output_dir, exist_ok=True)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                os.path.join(args.output_dir, "spatialfig.log"), mode="w"
            ),
        ],
    )

    start_time = time.time()
    logging.info("Initializing figure rendering pipeline")

    x, y, z = make_demo_samples()
    logging.info("Generated %d samples on a partial lattice", len(x))

    step_start = time.time()
    canvas = aspect_ratio_plot(
        x,
        y,
        output_path=os.path.join(args.output_dir, f"sample_locations.{args.format}"),
        fmt=args.format,
        plot_config=PlotConfig(kind="p", markersize=2.0),
    )
    locations_path = canvas.close()
    logging.info(
        "Sample location figure completed in %.2f seconds",
        time.time() - step_start,
    )

    step_start = time.time()
    colors = kristen_colors(args.colors)
    zlim = (float(np.min(z)), float(np.max(z)))
    legend_config = CanvasConfig(margins=Margins(left=0.4, right=0.8, top=0.1, bottom=0.4))
    canvas, grid = ragged_image(
        x,
        y,
        z,
        zlim=zlim,
        colors=colors,
        output_path=os.path.join(args.output_dir, f"ragged_image.{args.format}"),
        fmt=args.format,
        canvas_config=legend_config,
    )
    layout = vertical_image_legend(canvas, zlim, colors)
    image_path = canvas.close()
    logging.info(
        "Ragged image (%d x %d grid, %d cells filled) completed in %.2f seconds",
        grid.shape[0],
        grid.shape[1],
        grid.n_filled,
        time.time() - step_start,
    )

    step_start = time.time()
    canvas, _ = plot3d_points(
        x,
        y,
        z,
        zlim=zlim,
        colors=colors,
        symbol=21,
        size_min=0.6,
        size_max=1.4,
        output_path=os.path.join(args.output_dir, f"value_points.{args.format}"),
        fmt=args.format,
        canvas_config=legend_config,
    )
    vertical_image_legend(canvas, zlim, colors)
    points_path = canvas.close()
    logging.info("Point figure completed in %.2f seconds", time.time() - step_start)

    grid_csv = save_grid_to_csv(grid, args.output_dir, name="ragged_image")
    legend_csv = save_legend_table(layout, args.output_dir, name="ragged_image")

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    logging.info("  - Sample locations: %s", locations_path)
    logging.info("  - Ragged image: %s", image_path)
    logging.info("  - Value points: %s", points_path)
    logging.info("  - Grid cells CSV: %s", grid_csv)
    logging.info("  - Legend bins CSV: %s", legend_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
