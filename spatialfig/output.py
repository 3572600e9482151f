"""Write the tables behind a figure to reproducible CSV files.

Each figure can ship with the exact cells and color bins it was drawn from,
so readers can check a value without digitizing the image.
"""

from __future__ import annotations

import os

import pandas as pd

from .schema import DenseGrid, LegendLayout


def legend_table(layout: LegendLayout) -> pd.DataFrame:
    """Return one row per color bin with its boundaries and midpoint."""
    return pd.DataFrame(
        {
            "Bin": range(1, len(layout.bins) + 1),
            "Color": [b.color for b in layout.bins],
            "Lower Boundary": [b.boundary_low for b in layout.bins],
            "Upper Boundary": [b.boundary_high for b in layout.bins],
            "Midpoint": [b.midpoint for b in layout.bins],
        }
    )


def save_grid_to_csv(grid: DenseGrid, output_dir: str = "output", name: str = "grid") -> str:
    """Save every grid cell (missing cells as empty fields) to CSV.

    Returns:
        str: Path of the written CSV.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{name}_cells.csv")
    grid.to_frame().to_csv(path, index=False)
    return path


def save_legend_table(
    layout: LegendLayout, output_dir: str = "output", name: str = "legend"
) -> str:
    """Save the legend's color bins to CSV.

    Returns:
        str: Path of the written CSV.
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{name}_bins.csv")
    legend_table(layout).to_csv(path, index=False)
    return path
