"""Multiple-producer, single-consumer channel carrying pixel results."""

from __future__ import annotations

import queue
import threading
import time
from typing import NamedTuple, Optional

from .errors import ChannelClosedError, ChannelReceiveError
from .gradient import RGB

_POLL_INTERVAL = 0.1


class PixelResult(NamedTuple):
    x: int
    y: int
    color: RGB


class Sender:
    """Producer handle registered with a :class:`ResultChannel`."""

    def __init__(self, channel: ResultChannel) -> None:
        self._channel = channel
        self._open = True

    def send(self, item: PixelResult) -> None:
        if not self._open:
            raise ChannelClosedError("Sender was already released.")
        self._channel._put(item)

    def close(self) -> None:
        if self._open:
            self._open = False
            self._channel._release_sender()

    def __enter__(self) -> Sender:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ResultChannel:
    """Queue of :class:`PixelResult` items fed by many row jobs.

    The channel disconnects once every registered sender has been released;
    ``recv`` then fails as soon as the buffered items run out. ``close`` is
    the receiver hanging up, after which every send fails.
    """

    def __init__(self, capacity: int = 0) -> None:
        self._queue: queue.Queue = queue.Queue(maxsize=capacity)
        self._lock = threading.Lock()
        self._senders = 0
        self._disconnected = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def sender(self) -> Sender:
        with self._lock:
            if self._disconnected:
                raise ChannelClosedError("Channel already disconnected; no new senders allowed.")
            self._senders += 1
        return Sender(self)

    def recv(self, timeout: Optional[float] = None) -> PixelResult:
        """Block until a result arrives.

        Raises :class:`~juliaset.errors.ChannelReceiveError` once the channel
        is disconnected and drained, or when ``timeout`` seconds pass first.
        """

        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            wait = _POLL_INTERVAL
            if deadline is not None:
                wait = max(0.0, min(wait, deadline - time.monotonic()))
            try:
                return self._queue.get(timeout=wait)
            except queue.Empty as exc:
                # senders only deregister after their last put, so an empty
                # queue seen under the lock after disconnection stays empty
                with self._lock:
                    drained = self._disconnected and self._queue.empty()
                if drained:
                    raise ChannelReceiveError("Result channel disconnected before all pixels arrived.") from exc
                if deadline is not None and time.monotonic() >= deadline:
                    raise ChannelReceiveError(f"No pixel result arrived within {timeout} seconds.") from exc

    def close(self) -> None:
        self._closed = True

    def _put(self, item: PixelResult) -> None:
        # bounded queues poll so a blocked producer notices the hang-up
        while not self._closed:
            try:
                self._queue.put(item, timeout=_POLL_INTERVAL)
                return
            except queue.Full:
                continue
        raise ChannelClosedError("Result receiver hung up.")

    def _release_sender(self) -> None:
        with self._lock:
            self._senders -= 1
            if self._senders == 0:
                self._disconnected = True
