"""Shared fixtures: a small deterministic render configuration."""

from __future__ import annotations

import numpy as np
import pytest

from juliaset import RenderParameters, julia, wavelength_to_rgb
from juliaset.scheduler import iteration_to_wavelength

SAMPLE_C = complex(-0.6000935097734532, -0.427862402050194)


class RecordingSink:
    """Image sink that keeps every put_pixel call."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels: dict[tuple[int, int], tuple[int, int, int]] = {}
        self.saved_to = None

    @classmethod
    def new(cls, width: int, height: int) -> "RecordingSink":
        return cls(width, height)

    def put_pixel(self, x: int, y: int, color) -> None:
        self.pixels[(x, y)] = color

    def save(self, path) -> None:
        self.saved_to = path


def serial_raster(params: RenderParameters) -> np.ndarray:
    """Single-threaded reference for the pipeline output."""

    raster = np.zeros((params.height, params.width, 3), dtype=np.uint8)
    for y in range(params.height):
        for x in range(params.width):
            i = julia(params.c, x, y, params.width, params.height, params.max_iterations)
            raster[y, x] = wavelength_to_rgb(iteration_to_wavelength(i, params.max_iterations))
    return raster


@pytest.fixture()
def small_params() -> RenderParameters:
    return RenderParameters(width=4, height=4, max_iterations=10, c=SAMPLE_C, workers=4)


@pytest.fixture()
def recording_sink() -> RecordingSink:
    return RecordingSink(4, 4)
