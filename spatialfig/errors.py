"""Exception types raised by figure planning, rasterization, and rendering."""

from __future__ import annotations


class SpatialFigError(Exception):
    """Base class for every error raised by this package."""


class MissingAxisInfoError(SpatialFigError, ValueError):
    """Neither explicit limits nor coordinate data exist for an axis."""


class InvalidRangeError(SpatialFigError, ValueError):
    """A numeric range is degenerate or inverted, or a bin count is < 1."""


class InvalidCoordinateError(SpatialFigError, ValueError):
    """A sample has a missing or non-finite x/y coordinate."""


class DuplicateSampleError(InvalidCoordinateError):
    """Two samples share the exact same (x, y) coordinate."""


class UnsupportedPlatformError(SpatialFigError, RuntimeError):
    """An output format cannot be produced on this host."""


class InvalidSymbolError(SpatialFigError, ValueError):
    """A point symbol is outside the bordered-symbol set."""
