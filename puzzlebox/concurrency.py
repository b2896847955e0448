"""Threads, waiting for them, and passing values through queues."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable


class _EventLog:
    """A thread-safe list of messages in the order they happened."""

    def __init__(self, *initial: str) -> None:
        self._lock = threading.Lock()
        self.events = list(initial)

    def record(self, message: str) -> None:
        with self._lock:
            self.events.append(message)


def _run_all(log: _EventLog, *targets: Callable[[], str | None]) -> None:
    """Run every target on its own thread, record what each returns, wait for all."""

    def runner(target: Callable[[], str | None]) -> None:
        result = target()
        if result is not None:
            log.record(result)

    threads = [threading.Thread(target=runner, args=(target,)) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def concurrent_greetings(delay: float = 5.0) -> list[str]:
    """Greet twice in sequence, then twice on threads; the delayed one finishes last."""
    log = _EventLog()

    def slow() -> str:
        time.sleep(delay)
        return "Hello"

    def fast() -> str:
        return "Ashish"

    log.record(slow())
    log.record(fast())
    log.record("Working with Concurrency")
    _run_all(log, slow, fast)
    return log.events


def buffered_channel_demo(delay: float = 5.0) -> tuple[list[str], str]:
    """Pass names through a bounded queue; return the events and the name left over."""
    log = _EventLog("Working with Concurrency", "Working with Buffered channel")
    channel: queue.Queue[str] = queue.Queue(maxsize=5)
    channel.put("Ashish")

    def sender() -> None:
        time.sleep(delay)
        log.record("Hello")
        channel.put("Tyler")

    def receiver() -> str:
        return channel.get()

    _run_all(log, sender, receiver)
    return log.events, channel.get_nowait()


def unbuffered_channel_demo(delay: float = 5.0) -> list[str]:
    """Hand a name from one thread to another, the sender waiting until it is taken."""
    log = _EventLog("Working with Concurrency", "Working with UnBuffered channel")
    channel: queue.Queue[str] = queue.Queue(maxsize=1)

    def sender() -> None:
        time.sleep(delay)
        log.record("Hello")
        channel.put("Tyler")
        channel.join()

    def receiver() -> str:
        name = channel.get()
        channel.task_done()
        return name

    _run_all(log, sender, receiver)
    return log.events