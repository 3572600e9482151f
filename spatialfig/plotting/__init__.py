"""
Publication-quality figure rendering on top of the geometry engine.

This subpackage opens fixed-size output devices and draws onto them. All
sizing, gridding, and color binning is delegated to ``spatialfig.geometry``;
nothing here decides where a boundary or a cell goes.

Modules:
    canvas:
        CanvasContext and the scoped save/restore of graphics state.

    devices:
        EPS, PDF, Windows metafile, and 300 dpi TIFF devices of a given
        physical size, with margins placed exactly in inches.

    aspect_plot:
        Single-plot figures sized to keep the data aspect ratio.

    ragged_image:
        Color images of partially sampled grids; unsampled cells stay blank.

    points:
        Scatter plots colored and sized by an observed value.

    legend:
        Vertical color-bar legend in the right margin, labelled at bin
        boundaries.

    palette:
        Default grey-to-brown color ramp.

Styling:
    Serif fonts, thin axis lines, no automatic margins around the data, and
    default sizes tuned for a 3.5 inch single-column figure.
"""

from .aspect_plot import aspect_ratio_plot
from .canvas import CanvasContext, GraphicsState, preserved_graphics_state
from .devices import DEVICE_FORMATS, init_fig_dimen, open_device
from .legend import render_legend, vertical_image_legend
from .palette import kristen_colors
from .points import plot3d_points
from .ragged_image import ragged_image
from .style import set_global_style

__all__ = [
    "aspect_ratio_plot",
    "CanvasContext",
    "GraphicsState",
    "preserved_graphics_state",
    "DEVICE_FORMATS",
    "init_fig_dimen",
    "open_device",
    "render_legend",
    "vertical_image_legend",
    "kristen_colors",
    "plot3d_points",
    "ragged_image",
    "set_global_style",
]
