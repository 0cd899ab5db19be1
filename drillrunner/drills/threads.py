"""Thread drills: shared data, joining workers, a locked counter and a channel."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_DONE = object()


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value from each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


def run_sleepers(count: int = 10, delay: float = 0.25) -> int:
    """Start threads that sleep, wait for all of them and return how many finished."""

    def sleeper(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=sleeper, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()
    completed = 0
    for handle in handles:
        handle.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """A counter of completed jobs, shared between threads."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run jobs in threads that each bump the shared counter under its lock."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Values split in two halves, to be sent by two threads."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(
    queue: Queue, channel: SimpleQueue, delay: float = 1.0
) -> list[threading.Thread]:
    """Start one sender per half; each ends its stream with a completion marker."""

    def sender(values: Sequence[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(delay)
        finally:
            channel.put(_DONE)

    threads = [
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive every value sent for the queue, in arrival order."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    open_senders = len(senders)
    received: list[int] = []
    while open_senders:
        item = channel.get()
        if item is _DONE:
            open_senders -= 1
            continue
        print(f"Got: {item}")
        received.append(item)
    for sender in senders:
        sender.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} values, expected {queue.length}"
        )
    return received