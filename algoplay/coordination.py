"""Small thread-coordination exercises: turn taking, fan-out and sums."""

from __future__ import annotations

import queue
import threading
from typing import Any, Hashable, Iterable

_DONE = object()


def take_turns(names: Iterable[Hashable], rounds: int = 5) -> list[Hashable]:
    """Run one thread per name, each emitting its name ``rounds`` times in turn.

    Returns the names in the order they were emitted: a, b, c, a, b, c, ...
    """
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    names = list(names)
    if not names:
        return []
    turns = [threading.Semaphore(0) for _ in names]
    emitted: list[Hashable] = []

    def run(position: int, name: Hashable) -> None:
        following = turns[(position + 1) % len(names)]
        for _ in range(rounds):
            turns[position].acquire()
            emitted.append(name)
            following.release()

    threads = [
        threading.Thread(target=run, args=(position, name))
        for position, name in enumerate(names)
    ]
    for thread in threads:
        thread.start()
    turns[0].release()
    for thread in threads:
        thread.join()
    return emitted


def fan_out(items: Iterable[Any], workers: int = 4) -> list[tuple[int, Any]]:
    """One producer hands ``items`` to ``workers`` consumer threads.

    Returns ``(worker_index, item)`` pairs in the order they were handled.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1")
    items = list(items)
    channel: queue.Queue[Any] = queue.Queue(maxsize=1)
    handled: list[tuple[int, Any]] = []
    lock = threading.Lock()

    def produce() -> None:
        for item in items:
            channel.put(item)
        for _ in range(workers):
            channel.put(_DONE)

    def consume(index: int) -> None:
        while True:
            item = channel.get()
            if item is _DONE:
                return
            with lock:
                handled.append((index, item))

    threads = [threading.Thread(target=produce)]
    threads.extend(
        threading.Thread(target=consume, args=(index,)) for index in range(workers)
    )
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return handled


def threaded_sum(workers: int = 10, chunk: int = 10) -> int:
    """Sum 0 .. workers*chunk-1, each worker adding its own run of ``chunk`` values."""
    if workers < 0 or chunk < 0:
        raise ValueError("workers and chunk must not be negative")
    total = 0
    lock = threading.Lock()

    def add_chunk(index: int) -> None:
        nonlocal total
        for value in range(index * chunk, index * chunk + chunk):
            with lock:
                total += value

    threads = [threading.Thread(target=add_chunk, args=(i,)) for i in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return total


def ping_pong(limit: int = 100) -> list[tuple[int, int]]:
    """Two threads take turns counting from 1 up to ``limit``.

    Returns ``(worker, count)`` pairs; worker 0 counts the odd numbers and
    worker 1 the even ones.
    """
    turns = [threading.Semaphore(0), threading.Semaphore(0)]
    count = 0
    emitted: list[tuple[int, int]] = []

    def run(worker: int) -> None:
        nonlocal count
        other = turns[1 - worker]
        while True:
            turns[worker].acquire()
            if count >= limit:
                other.release()
                return
            count += 1
            emitted.append((worker, count))
            other.release()

    threads = [threading.Thread(target=run, args=(worker,)) for worker in (0, 1)]
    for thread in threads:
        thread.start()
    turns[0].release()
    for thread in threads:
        thread.join()
    return emitted