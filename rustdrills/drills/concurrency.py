"""Sharing read-only data between threads and tracking shared progress."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th value from each offset, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_from(offset: int) -> int:
        total = sum(shared[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_from, range(workers)))


class JobStatus:
    """A count of completed jobs that several threads may update."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._completed = 0

    def complete_one(self) -> None:
        with self._lock:
            self._completed += 1

    def jobs_completed(self) -> int:
        with self._lock:
            return self._completed


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_interval: float = 0.5) -> int:
    """Complete jobs on a worker thread while polling; return how many polls waited."""
    status = JobStatus()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            status.complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while status.jobs_completed() < jobs:
        print("waiting... ")
        waits += 1
        time.sleep(poll_interval)
    worker.join()
    return waits