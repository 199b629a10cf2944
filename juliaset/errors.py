"""Exception hierarchy for Julia renders."""

from __future__ import annotations


class JuliaRenderError(Exception):
    """Base class for failures that abort a render."""


class ChannelReceiveError(JuliaRenderError):
    """The result channel disconnected before every pixel arrived."""


class ChannelClosedError(JuliaRenderError):
    """A row job tried to send after the receiver hung up."""


class PixelOverwriteError(JuliaRenderError):
    """A pixel was delivered twice or outside the raster."""


class ImageWriteError(JuliaRenderError):
    """The finished raster could not be encoded or written."""


class ConfigurationError(ValueError):
    """The built-in gradient table is malformed."""


class IncompleteRasterError(JuliaRenderError):
    """The raster was saved before every pixel arrived."""
