"""Render pipeline for Julia-set frames."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from .assembler import FrameAssembler, ImageSink, PillowImageSink, ProgressCallback
from .channel import ResultChannel
from .errors import ChannelReceiveError, JuliaRenderError
from .scheduler import WorkScheduler


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of a Julia set."""

    width: int
    height: int
    max_iterations: int
    c: complex
    workers: Optional[int] = None
    channel_capacity: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Raster size must be positive, got {self.width}x{self.height}.")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1.")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1 when given.")
        if self.channel_capacity < 0:
            raise ValueError("channel_capacity must be 0 (unbounded) or positive.")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class RenderResult:
    """Container for an assembled Julia frame."""

    assembler: FrameAssembler
    pixels_received: int
    rows_dispatched: int
    workers: int
    elapsed_seconds: float

    @property
    def sink(self) -> ImageSink:
        return self.assembler.sink

    def save(self, path) -> None:
        self.assembler.save(path)


def render_frame(
    params: RenderParameters,
    *,
    sink: Optional[ImageSink] = None,
    progress: Optional[ProgressCallback] = None,
) -> RenderResult:
    """Render a Julia frame given the supplied parameters."""

    if sink is None:
        sink = PillowImageSink.new(params.width, params.height)
    channel = ResultChannel(capacity=params.channel_capacity)
    assembler = FrameAssembler(params.width, params.height, sink, progress=progress)

    start = time.perf_counter()
    with WorkScheduler(params) as scheduler:
        rows = scheduler.dispatch(channel)
        try:
            received = assembler.collect(channel)
        except JuliaRenderError as exc:
            channel.close()
            failure = scheduler.failure()
            if failure is None or not isinstance(exc, ChannelReceiveError):
                raise
            raise ChannelReceiveError(f"{exc} A row job failed: {failure!r}") from failure
    elapsed = time.perf_counter() - start

    return RenderResult(
        assembler=assembler,
        pixels_received=received,
        rows_dispatched=rows,
        workers=scheduler.workers,
        elapsed_seconds=elapsed,
    )
