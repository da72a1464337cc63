"""Tests for the keyboard/ticker producers feeding the event channel."""

from __future__ import annotations

import threading
import time
import unittest

from gameshelf.events import EventSource, InputEvent, TickEvent


class _ScriptedKeys:
    """Stand-in for ``read_key`` that returns queued tokens, then idles."""

    def __init__(self, keys: list[str]) -> None:
        self.keys = list(keys)
        self.calls = 0
        self.lock = threading.Lock()

    def __call__(self, fd: int, timeout_ms: int | None = None) -> str:
        with self.lock:
            self.calls += 1
            if self.keys:
                return self.keys.pop(0)
        time.sleep((timeout_ms or 0) / 1000.0)
        return ""


def _next_input(source: EventSource, timeout: float = 2.0) -> InputEvent:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        event = source.next()
        if isinstance(event, InputEvent):
            return event
    raise AssertionError("no input event arrived")


class EventSourceTests(unittest.TestCase):
    def test_keys_arrive_in_order(self) -> None:
        source = EventSource(0, tick_seconds=60.0, read_key_fn=_ScriptedKeys(["RIGHT", "a", "ESC"]))
        source.start()
        try:
            keys = [_next_input(source).key for _ in range(3)]
        finally:
            source.close()
        self.assertEqual(keys, ["RIGHT", "a", "ESC"])

    def test_ticker_produces_tick_events(self) -> None:
        source = EventSource(0, tick_seconds=0.01, read_key_fn=_ScriptedKeys([]))
        source.start()
        try:
            event = source.next()
        finally:
            source.close()
        self.assertIsInstance(event, TickEvent)

    def test_close_stops_both_producers(self) -> None:
        source = EventSource(0, tick_seconds=0.01, read_key_fn=_ScriptedKeys([]))
        source.start()
        source.close()
        for worker in source._threads:
            worker.join(timeout=1.0)
            self.assertFalse(worker.is_alive())
        self.assertTrue(source.closed)

    def test_paused_source_does_not_read_stdin(self) -> None:
        keys = _ScriptedKeys([])
        source = EventSource(0, tick_seconds=60.0, read_key_fn=keys)
        with source.paused():
            source.start()
            time.sleep(0.15)
            calls_while_paused = keys.calls
        source.close()
        self.assertEqual(calls_while_paused, 0)

    def test_key_read_across_pause_is_not_queued(self) -> None:
        reading = threading.Event()
        release = threading.Event()
        calls = []

        def read_key_fn(fd: int, timeout_ms: int | None = None) -> str:
            calls.append(fd)
            if len(calls) == 1:
                reading.set()
                release.wait(2.0)
                return "x"
            time.sleep((timeout_ms or 0) / 1000.0)
            return ""

        source = EventSource(0, tick_seconds=60.0, read_key_fn=read_key_fn)
        source.start()
        try:
            self.assertTrue(reading.wait(2.0))
            threading.Timer(0.05, release.set).start()
            with source.paused():
                queued_while_paused = list(source._events.queue)
            time.sleep(0.1)
            queued_after = list(source._events.queue)
        finally:
            source.close()

        self.assertEqual(queued_while_paused, [])
        self.assertEqual(queued_after, [])

    def test_pause_waits_for_reader_to_leave_read_key(self) -> None:
        reading = threading.Event()
        release = threading.Event()
        returned = threading.Event()

        def read_key_fn(fd: int, timeout_ms: int | None = None) -> str:
            if not reading.is_set():
                reading.set()
                release.wait(2.0)
                returned.set()
                return ""
            time.sleep((timeout_ms or 0) / 1000.0)
            return ""

        source = EventSource(0, tick_seconds=60.0, read_key_fn=read_key_fn)
        source.start()
        try:
            self.assertTrue(reading.wait(2.0))
            threading.Timer(0.05, release.set).start()
            with source.paused():
                self.assertTrue(returned.is_set())
        finally:
            source.close()

    def test_put_injects_events_for_the_consumer(self) -> None:
        source = EventSource(0, tick_seconds=60.0)
        source.put(InputEvent("UP"))
        self.assertEqual(source.next(), InputEvent("UP"))


if __name__ == "__main__":
    unittest.main()
