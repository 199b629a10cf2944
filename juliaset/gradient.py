"""Wavelength keyed color gradient used to colorize escape counts."""

from __future__ import annotations

import string
from bisect import bisect_left

from .errors import ConfigurationError

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)

ANCHOR_HEX = ("#000000", "#05F2DB", "#05C7F2", "#3805F2", "#7C05F2", "#F205CB", "#000000")
ANCHOR_WAVELENGTHS = (380, 439, 489, 509, 579, 644, 780)


def hex_to_rgb(hex_color: str) -> RGB:
    """Decode ``#RRGGBB`` into an integer triple."""

    if len(hex_color) != 7 or not hex_color.startswith("#"):
        raise ConfigurationError(f"Invalid hex color {hex_color!r}: expected the form #RRGGBB.")
    digits = hex_color[1:]
    if any(ch not in string.hexdigits for ch in digits):
        raise ConfigurationError(f"Invalid hex color {hex_color!r}: non-hexadecimal digit.")
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def _anchor_table(hex_colors: tuple[str, ...]) -> tuple[RGB, ...]:
    colors = [hex_to_rgb(element) for element in hex_colors]
    while len(colors) < len(ANCHOR_WAVELENGTHS):
        colors.insert(0, BLACK)
    return tuple(colors)


ANCHOR_COLORS = _anchor_table(ANCHOR_HEX)


def color_blend_norm(start: float, end: float, wave: float, c1: RGB, c2: RGB) -> RGB:
    """Linearly blend ``c1`` into ``c2`` as ``wave`` runs from ``start`` to ``end``.

    Each channel is truncated toward zero independently.
    """

    return tuple(
        int(a + (b - a) * (wave - start) / (end - start))
        for a, b in zip(c1, c2)
    )


def wavelength_to_rgb(wavelength: int) -> RGB:
    """Map an integer wavelength in nanometres onto the anchor gradient.

    Wavelengths outside ``[380, 780]`` are black. A wavelength that sits on
    an anchor belongs to the band ending there, so it returns that anchor's
    color exactly.
    """

    if wavelength < ANCHOR_WAVELENGTHS[0] or wavelength > ANCHOR_WAVELENGTHS[-1]:
        return BLACK

    band = max(bisect_left(ANCHOR_WAVELENGTHS, wavelength) - 1, 0)
    return color_blend_norm(
        float(ANCHOR_WAVELENGTHS[band]),
        float(ANCHOR_WAVELENGTHS[band + 1]),
        float(wavelength),
        ANCHOR_COLORS[band],
        ANCHOR_COLORS[band + 1],
    )
