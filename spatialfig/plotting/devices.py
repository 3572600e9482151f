"""Open output devices of a fixed physical size.

Supported formats:
    eps: encapsulated PostScript (vector).
    pdf: PDF (vector, default).
    wmf: Windows metafile; Windows only, and only when a metafile writer is
        registered with matplotlib.
    tif: TIFF raster at 300 dpi.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..errors import UnsupportedPlatformError
from ..schema import INIT_MARGINS, CanvasConfig
from .canvas import CanvasContext
from .style import FIGURE_DPI, apply_canvas_config, set_global_style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviceFormat:
    name: str
    extension: str
    writer_format: str
    dpi: Optional[int] = None


DEVICE_FORMATS = {
    "eps": DeviceFormat("eps", "eps", "eps"),
    "pdf": DeviceFormat("pdf", "pdf", "pdf"),
    "wmf": DeviceFormat("wmf", "wmf", "wmf"),
    "tif": DeviceFormat("tif", "tif", "tiff", dpi=FIGURE_DPI),
}


def _host_is_windows() -> bool:
    return sys.platform.startswith("win")


@dataclass
class Device:
    """A figure of fixed size bound to one output file and format."""

    figure: Figure
    output_path: Path
    fmt: DeviceFormat

    def write(self) -> Path:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(
            str(self.output_path),
            format=self.fmt.writer_format,
            dpi=self.fmt.dpi,
        )
        logger.info("Wrote %s figure to %s", self.fmt.name, self.output_path)
        return self.output_path

    def close(self) -> None:
        plt.close(self.figure)


def open_device(
    output_path,
    fmt: str = "pdf",
    width: float = 3.5,
    height: float = 3.5,
) -> Device:
    """Open a drawing surface of ``width`` x ``height`` inches.

    Args:
        output_path: File the figure is written to when the device is saved.
            The format's extension is appended when the path has none.
        fmt: One of ``"eps"``, ``"pdf"``, ``"wmf"``, ``"tif"``.
        width, height: Figure size in inches, margins included.

    Returns:
        Device: Open device; nothing is written until ``write()``.

    Raises:
        ValueError: If ``fmt`` is unknown or a dimension is not positive.
        UnsupportedPlatformError: If ``fmt="wmf"`` on a host other than
            Windows, or no metafile writer is available.
    """
    if fmt not in DEVICE_FORMATS:
        raise ValueError(
            f'"{fmt}" is not a valid option for argument \'fmt\'. '
            f"Expected one of {tuple(DEVICE_FORMATS)}."
        )
    if width <= 0 or height <= 0:
        raise ValueError(f"Figure dimensions must be positive, got {width} x {height}.")
    spec = DEVICE_FORMATS[fmt]

    if spec.name == "wmf" and not _host_is_windows():
        raise UnsupportedPlatformError(
            f'Cannot use format "{fmt}" on a non-Windows platform.'
        )

    path = Path(output_path)
    if not path.suffix:
        path = path.with_suffix(f".{spec.extension}")

    figure = plt.figure(figsize=(float(width), float(height)))
    if spec.writer_format not in figure.canvas.get_supported_filetypes():
        plt.close(figure)
        raise UnsupportedPlatformError(
            f'No writer for format "{fmt}" is registered with matplotlib.'
        )

    logger.debug("Opened %s device %.3f x %.3f in -> %s", fmt, width, height, path)
    return Device(figure=figure, output_path=path, fmt=spec)


def init_fig_dimen(
    output_path,
    fmt: str = "pdf",
    width: Optional[float] = None,
    height: Optional[float] = None,
    config: CanvasConfig = CanvasConfig(margins=INIT_MARGINS),
) -> CanvasContext:
    """Open a device and place the main plot region inside fixed margins.

    The total size includes the margins; whatever is left after the margins
    is the plot region. Only one plot per device is supported.

    Raises:
        ValueError: If ``width`` or ``height`` is missing, or ``fmt`` is
            unknown.
        UnsupportedPlatformError: See :func:`open_device`.
    """
    if width is None and height is None:
        raise ValueError("Missing arguments 'height' and 'width'.")
    if height is None:
        raise ValueError("Missing argument 'height'.")
    if width is None:
        raise ValueError("Missing argument 'width'.")

    set_global_style()
    device = open_device(output_path, fmt=fmt, width=width, height=height)
    canvas = CanvasContext(device, config)
    apply_canvas_config(canvas.axes, config)
    return canvas
