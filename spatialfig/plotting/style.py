"""Centralized plotting style and canvas-setting helpers."""

from __future__ import annotations

from dataclasses import dataclass

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from ..schema import CanvasConfig

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    LINE_HEIGHT: float = 1.2
    LINEWIDTH: float = 1.0
    LINEWIDTH_THIN: float = 0.6
    LEGEND_TICK_FONT_SCALE: float = 0.5
    LEGEND_TICK_LENGTH: float = -0.1
    LEGEND_MGP: tuple[float, float, float] = (3.0, 0.2, 0.0)
    BORDER_COLOR: str = "black"


STYLE = StyleConfig()


def line_height_points(base_fontsize: float = STYLE.BASE_FONTSIZE) -> float:
    """Return the height of one text line in points."""
    return float(base_fontsize) * STYLE.LINE_HEIGHT


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style, scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["STIXGeneral", "DejaVu Serif"],
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "mathtext.default": "regular",
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": True,
            "axes.spines.right": True,
            "axes.grid": False,
            "axes.xmargin": 0.0,
            "axes.ymargin": 0.0,
            "xtick.major.width": STYLE.LINEWIDTH_THIN,
            "ytick.major.width": STYLE.LINEWIDTH_THIN,
            "lines.linewidth": STYLE.LINEWIDTH,
            "figure.constrained_layout.use": False,
            "figure.autolayout": False,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "standard",
            "savefig.pad_inches": 0.0,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def apply_canvas_config(ax: Axes, config: CanvasConfig) -> None:
    """Map text-line based canvas settings onto one axes.

    ``mgp`` and ``tcl`` are measured in text lines from the plot edge, as in
    most statistical plotting systems; they are converted to points here.
    The ``cex_*`` multipliers scale the base font size.
    """
    line = line_height_points()
    tick_size = STYLE.BASE_FONTSIZE * config.cex_axis
    label_size = STYLE.BASE_FONTSIZE * config.cex_lab
    title_size = STYLE.BASE_FONTSIZE * config.cex_main
    tick_length = abs(config.tcl) * line
    direction = "out" if config.tcl < 0 else "in"
    outward = tick_length if direction == "out" else 0.0

    title_line, label_line, axis_line = config.mgp
    tick_pad = max(label_line * line - outward, 0.0)
    label_pad = max((title_line - label_line) * line - tick_size, 0.0)

    ax.tick_params(
        axis="both",
        which="both",
        labelsize=tick_size,
        length=tick_length,
        direction=direction,
        pad=tick_pad,
    )
    for axis in (ax.xaxis, ax.yaxis):
        axis.labelpad = label_pad
        axis.label.set_size(label_size)
    ax.title.set_size(title_size)

    if axis_line:
        for side in ("bottom", "left"):
            ax.spines[side].set_position(("outward", axis_line * line))
