"""Raster assembly and the Pillow-backed image sink."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Protocol, Union

import numpy as np
import PIL.Image

from .channel import ResultChannel
from .errors import ImageWriteError, IncompleteRasterError, PixelOverwriteError
from .gradient import RGB

PathLike = Union[str, Path]
ProgressCallback = Callable[[int, int], None]


class ImageSink(Protocol):
    """Destination for a finished raster."""

    @classmethod
    def new(cls, width: int, height: int) -> ImageSink: ...

    def put_pixel(self, x: int, y: int, color: RGB) -> None: ...

    def save(self, path: PathLike) -> None: ...


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper or "PNG"


class PillowImageSink:
    """RGB raster held in a numpy buffer and encoded with Pillow."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    @classmethod
    def new(cls, width: int, height: int) -> PillowImageSink:
        return cls(width, height)

    def put_pixel(self, x: int, y: int, color: RGB) -> None:
        self.pixels[y, x] = color

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(self.pixels)

    def save(self, path: PathLike) -> None:
        """Write the raster to ``path``, choosing the format from its suffix."""

        output_path = Path(path)
        pil_format = _pil_format_name(output_path.suffix.lstrip("."))
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self.to_image().save(str(output_path), format=pil_format)
        except (OSError, ValueError, KeyError) as exc:
            raise ImageWriteError(f"Could not write {output_path}: {exc}") from exc


class FrameAssembler:
    """Drain pixel results into a sink until the raster is complete.

    Only the thread calling :meth:`collect` touches the sink, so pixel
    writes need no locking. Results may arrive in any order; each one
    carries its own coordinates.
    """

    def __init__(
        self,
        width: int,
        height: int,
        sink: ImageSink,
        *,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.sink = sink
        self.progress = progress
        self._written = np.zeros((height, width), dtype=bool)
        self.received = 0

    @property
    def expected(self) -> int:
        return self.width * self.height

    @property
    def complete(self) -> bool:
        return self.received == self.expected

    def collect(self, channel: ResultChannel) -> int:
        """Receive exactly ``width * height`` results from ``channel``.

        Raises :class:`~juliaset.errors.ChannelReceiveError` when the channel
        disconnects early and :class:`~juliaset.errors.PixelOverwriteError`
        for a coordinate that is out of range or already written.
        """

        expected = self.expected
        while self.received < expected:
            x, y, color = channel.recv()
            self._write(x, y, color)
            self.received += 1
            if self.progress is not None and self.received % self.width == 0:
                self.progress(self.received, expected)
        return self.received

    def _write(self, x: int, y: int, color: RGB) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOverwriteError(f"Pixel ({x}, {y}) lies outside the {self.width}x{self.height} raster.")
        if self._written[y, x]:
            raise PixelOverwriteError(f"Pixel ({x}, {y}) was delivered more than once.")
        self._written[y, x] = True
        self.sink.put_pixel(x, y, color)

    def save(self, path: PathLike) -> None:
        if not self.complete:
            raise IncompleteRasterError(
                f"Raster incomplete: {self.received} of {self.expected} pixels received."
            )
        self.sink.save(path)
