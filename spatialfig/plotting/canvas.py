"""Canvas state passed explicitly to everything that draws on a figure.

A :class:`CanvasContext` owns one matplotlib figure, its main axes, the
active :class:`~spatialfig.schema.CanvasConfig`, and the plot region that
drawing currently targets. Code that temporarily changes any of these (the
color legend, for instance) snapshots the state first and restores it on
every exit path through :func:`preserved_graphics_state`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Tuple

from matplotlib.axes import Axes

from ..schema import CanvasConfig, FigureSize, Margins, NormalizedRect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphicsState:
    """Immutable snapshot of a canvas's graphics configuration."""

    figure_size: Tuple[float, float]
    config: CanvasConfig
    plot_region: NormalizedRect
    active_axes: Axes


def plot_region_for(size: FigureSize, margins: Margins) -> NormalizedRect:
    """Return the figure-fraction rectangle left inside the margins."""
    return NormalizedRect(
        x0=margins.left / size.width,
        x1=1.0 - margins.right / size.width,
        y0=margins.bottom / size.height,
        y1=1.0 - margins.top / size.height,
    )


class CanvasContext:
    """One figure under construction, bound to its output device.

    Args:
        device: Open output device (see :func:`spatialfig.plotting.devices.open_device`).
        config: Graphics settings; its margins place the main axes.
    """

    def __init__(self, device, config: CanvasConfig):
        self.device = device
        self.figure = device.figure
        self.config = config
        self.plot_region = plot_region_for(self.size, config.margins)
        self.axes = self.figure.add_axes(self.plot_region.as_bounds())
        self._active = self.axes
        self._closed = False

    def __enter__(self) -> "CanvasContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self.device.close()
            self._closed = True

    @property
    def size(self) -> FigureSize:
        width, height = self.figure.get_size_inches()
        return FigureSize(float(width), float(height))

    @property
    def margins(self) -> Margins:
        return self.config.margins

    @property
    def active_axes(self) -> Axes:
        return self._active

    def graphics_state(self) -> GraphicsState:
        """Capture the current graphics configuration."""
        width, height = self.figure.get_size_inches()
        return GraphicsState(
            figure_size=(float(width), float(height)),
            config=self.config,
            plot_region=self.plot_region,
            active_axes=self._active,
        )

    def restore(self, state: GraphicsState) -> None:
        """Put back exactly the configuration captured in ``state``."""
        if self.graphics_state().figure_size != state.figure_size:
            self.figure.set_size_inches(*state.figure_size)
        self.config = state.config
        self.plot_region = state.plot_region
        self._active = state.active_axes
        if state.active_axes in self.figure.axes:
            self.figure.sca(state.active_axes)

    def open_region(self, rect: NormalizedRect) -> Axes:
        """Add axes at ``rect`` and make them the drawing target."""
        ax = self.figure.add_axes(rect.as_bounds())
        self.plot_region = rect
        self._active = ax
        self.figure.sca(ax)
        return ax

    def save(self):
        """Write the figure to its output target and return the path."""
        return self.device.write()

    def close(self):
        """Write the figure, release it, and return the output path."""
        if self._closed:
            return self.device.output_path
        path = self.save()
        self.device.close()
        self._closed = True
        logger.info("Closed canvas %s", path)
        return path


@contextmanager
def preserved_graphics_state(canvas: CanvasContext) -> Iterator[GraphicsState]:
    """Snapshot the canvas state and restore it however the block exits.

    Nested uses restore in stack order: each exit puts back the state seen
    on the matching entry, including when an exception is propagating.
    """
    state = canvas.graphics_state()
    try:
        yield state
    finally:
        canvas.restore(state)
