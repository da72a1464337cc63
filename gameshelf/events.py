"""Background producers feeding key and tick events to the main loop.

A keyboard reader and a fixed-interval ticker each run on a daemon thread and
push into one unbounded queue. The main loop is the only consumer.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from queue import Queue

from .input import read_key

logger = logging.getLogger(__name__)

KEY_POLL_MS = 50
PAUSE_HANDSHAKE_SECONDS = 1.0


@dataclass(frozen=True)
class InputEvent:
    """One decoded key press."""

    key: str


@dataclass(frozen=True)
class TickEvent:
    """Periodic redraw request from the ticker thread."""


Event = InputEvent | TickEvent


class EventSource:
    """Merge keyboard and timer producers into one ordered channel."""

    def __init__(
        self,
        stdin_fd: int,
        tick_seconds: float,
        read_key_fn: Callable[..., str] = read_key,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.tick_seconds = tick_seconds
        self._read_key = read_key_fn
        self._events: Queue[Event] = Queue()
        self._stopped = threading.Event()
        self._paused = threading.Event()
        self._reader_idle = threading.Event()
        self._threads: list[threading.Thread] = []

    def start(self) -> None:
        if self._threads:
            return
        for name, target in (("gameshelf-keys", self._keyboard_worker), ("gameshelf-tick", self._tick_worker)):
            worker = threading.Thread(target=target, name=name, daemon=True)
            worker.start()
            self._threads.append(worker)

    def next(self) -> Event:
        """Block until the next event is available."""
        return self._events.get()

    def put(self, event: Event) -> None:
        self._events.put(event)

    def close(self) -> None:
        """Ask both producers to stop; they exit within one poll interval."""
        self._stopped.set()
        self._reader_idle.set()

    @property
    def closed(self) -> bool:
        return self._stopped.is_set()

    @contextlib.contextmanager
    def paused(self) -> Iterator[None]:
        """Stop reading stdin while a child process owns the terminal.

        Blocks until the keyboard reader has left ``read_key``; a key it was
        already reading is dropped rather than queued.
        """
        self._reader_idle.clear()
        self._paused.set()
        if self._threads and self._threads[0].is_alive() and not self._stopped.is_set():
            if not self._reader_idle.wait(PAUSE_HANDSHAKE_SECONDS):
                logger.warning("keyboard reader did not go idle within %.1fs", PAUSE_HANDSHAKE_SECONDS)
        try:
            yield
        finally:
            self._paused.clear()

    def _keyboard_worker(self) -> None:
        while not self._stopped.is_set():
            if self._paused.is_set():
                self._reader_idle.set()
                self._stopped.wait(KEY_POLL_MS / 1000.0)
                continue
            try:
                key = self._read_key(self.stdin_fd, timeout_ms=KEY_POLL_MS)
            except OSError as exc:
                logger.warning("keyboard reader stopped: %s", exc)
                self._reader_idle.set()
                return
            if self._paused.is_set():
                if key:
                    logger.debug("dropped key %r read after pause", key)
                continue
            if key:
                self._events.put(InputEvent(key))

    def _tick_worker(self) -> None:
        while not self._stopped.wait(self.tick_seconds):
            self._events.put(TickEvent())
