from __future__ import annotations

import logging
import re
import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from typing import Any

from nfcframe.core.reader.errors import FrameError, InvalidInput
from nfcframe.core.reader.logging import PROTOCOL, log_hex
from nfcframe.core.reader.types import Pending

lg = logging.getLogger(__name__)

# Node id used when the transport does not tag its chunks.
DEFAULT_SOURCE = "0"

_HEX = re.compile(r"[0-9a-fA-F]+")


def unhex(chunk: str) -> bytes:
    """Convert a hex chunk to bytes, raising InvalidInput if it is not one."""
    if not isinstance(chunk, str) or not _HEX.fullmatch(chunk) or len(chunk) % 2:
        raise InvalidInput("Input data is not hex string")
    return bytes.fromhex(chunk)


class Accumulator:
    """Reassembles frames from hex chunks, one buffer per source id.

    Subclasses provide the wire format: complete() inspects the buffer
    and returns a structural frame once one is whole (None while more
    data is needed), and decode() turns that frame into a record.

    Buffers for different sources never interact. A source holds a lock
    only while it has a buffer, so threads feeding distinct sources do
    not contend and finished sources leave nothing behind. Both maps are
    changed only under _guard.
    """

    def __init__(self) -> None:
        self._buffers: dict[Hashable, bytearray] = {}
        self._locks: dict[Hashable, threading.Lock] = {}
        self._guard = threading.Lock()

    # -- wire format hooks --

    def complete(self, data: bytearray) -> Any | None:
        """Return the frame held in *data*, or None if it is incomplete."""
        raise NotImplementedError

    def decode(self, frame: Any) -> Any:
        """Turn a completed frame into a decoded record."""
        raise NotImplementedError

    # -- per-source state --

    @contextmanager
    def _holding(self, source: Hashable) -> Iterator[None]:
        """Hold *source*'s lock; drop the lock entry if no buffer remains."""
        while True:
            with self._guard:
                lock = self._locks.setdefault(source, threading.Lock())
            lock.acquire()
            with self._guard:
                if self._locks.get(source) is lock:
                    break
            # The entry was dropped while waiting; take the current one.
            lock.release()
        try:
            yield
        finally:
            with self._guard:
                if source not in self._buffers:
                    del self._locks[source]
            lock.release()

    def _drop(self, source: Hashable) -> bytearray | None:
        with self._guard:
            return self._buffers.pop(source, None)

    def submit(self, chunk: str, source: Hashable = DEFAULT_SOURCE) -> Any:
        """Append a hex chunk for *source*.

        Returns Pending while the frame is incomplete, else the frame.
        A FrameError discards everything buffered for *source*.
        """
        data = unhex(chunk)
        log_hex(lg, f"[{source}] << ", data)
        with self._holding(source):
            with self._guard:
                buf = self._buffers.setdefault(source, bytearray())
            buf += data
            try:
                frame = self.complete(buf)
            except FrameError as exc:
                self._drop(source)
                lg.log(PROTOCOL, "[%s] dropped %d bytes: %s", source, len(buf), exc)
                raise
            if frame is None:
                return Pending(source=source, buffered=len(buf))
            self._drop(source)
        lg.log(PROTOCOL, "[%s] frame complete, %d bytes", source, len(buf))
        return frame

    def feed(self, chunk: str, source: Hashable = DEFAULT_SOURCE) -> Any | None:
        """Submit a chunk and decode the frame it completes, if any."""
        frame = self.submit(chunk, source)
        if isinstance(frame, Pending):
            return None
        return self.decode(frame)

    def reset(self, source: Hashable = DEFAULT_SOURCE) -> None:
        """Drop any partial frame for *source*. No-op if nothing is buffered."""
        with self._guard:
            if source not in self._buffers:
                return
        with self._holding(source):
            dropped = self._drop(source)
        if dropped:
            lg.debug("[%s] reset, %d bytes dropped", source, len(dropped))

    def buffered(self, source: Hashable = DEFAULT_SOURCE) -> int:
        """Number of bytes held for *source*."""
        with self._guard:
            buf = self._buffers.get(source)
            return len(buf) if buf is not None else 0

    def sources(self) -> list[Hashable]:
        """Source ids with a partial frame buffered."""
        with self._guard:
            return list(self._buffers)
