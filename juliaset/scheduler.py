"""Row-level work distribution over a fixed thread pool."""

from __future__ import annotations

import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Optional

from .channel import PixelResult, ResultChannel, Sender
from .escape import julia
from .gradient import ANCHOR_WAVELENGTHS, wavelength_to_rgb

if TYPE_CHECKING:
    from .renderer import RenderParameters

WAVELENGTH_SPAN = 400


def default_worker_count() -> int:
    return os.cpu_count() or 1


def iteration_to_wavelength(iterations: int, max_iter: int) -> int:
    return ANCHOR_WAVELENGTHS[0] + iterations * WAVELENGTH_SPAN // max_iter


def render_row(sender: Sender, y: int, params: RenderParameters) -> None:
    """Compute and send every pixel of row ``y``.

    A failed send aborts the row immediately. The sender is released
    whether the row completes or not.
    """

    width = params.width
    with sender:
        for x in range(width):
            i = julia(params.c, x, y, width, params.height, params.max_iterations)
            color = wavelength_to_rgb(iteration_to_wavelength(i, params.max_iterations))
            sender.send(PixelResult(x, y, color))


class WorkScheduler:
    """Fan image rows out to a thread pool sized to the available CPUs."""

    def __init__(self, params: RenderParameters) -> None:
        self.params = params
        self.workers = params.workers or default_worker_count()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._futures: list[Future] = []

    def dispatch(self, channel: ResultChannel) -> int:
        """Submit one job per row without waiting on any of them."""

        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.workers,
                thread_name_prefix="julia-row",
            )

        # hold a sender so the channel cannot disconnect before the last row is queued
        with channel.sender():
            for y in range(self.params.height):
                sender = channel.sender()
                self._futures.append(self._executor.submit(render_row, sender, y, self.params))
        return len(self._futures)

    def failure(self) -> Optional[BaseException]:
        """Wait for the dispatched rows and return the first error raised by one."""

        for future in self._futures:
            exc = future.exception()
            if exc is not None:
                return exc
        return None

    def shutdown(self, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self) -> WorkScheduler:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
