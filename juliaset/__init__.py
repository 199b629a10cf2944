"""Public API for Julia-set rendering utilities."""

from .assembler import FrameAssembler, ImageSink, PillowImageSink
from .channel import PixelResult, ResultChannel, Sender
from .errors import (
    ChannelClosedError,
    ChannelReceiveError,
    ConfigurationError,
    ImageWriteError,
    IncompleteRasterError,
    JuliaRenderError,
    PixelOverwriteError,
)
from .escape import julia, pixel_to_complex
from .gradient import ANCHOR_COLORS, ANCHOR_WAVELENGTHS, hex_to_rgb, wavelength_to_rgb
from .renderer import RenderParameters, RenderResult, render_frame
from .scheduler import WorkScheduler, iteration_to_wavelength, render_row

__all__ = [
    "ANCHOR_COLORS",
    "ANCHOR_WAVELENGTHS",
    "ChannelClosedError",
    "ChannelReceiveError",
    "ConfigurationError",
    "FrameAssembler",
    "ImageSink",
    "ImageWriteError",
    "IncompleteRasterError",
    "JuliaRenderError",
    "PillowImageSink",
    "PixelOverwriteError",
    "PixelResult",
    "RenderParameters",
    "RenderResult",
    "ResultChannel",
    "Sender",
    "WorkScheduler",
    "hex_to_rgb",
    "iteration_to_wavelength",
    "julia",
    "pixel_to_complex",
    "render_frame",
    "render_row",
    "wavelength_to_rgb",
]
