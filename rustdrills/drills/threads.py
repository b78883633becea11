"""A worker thread completing jobs while the caller polls its progress."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass
class JobStatus:
    """How many jobs the worker has finished."""

    jobs_completed: int = 0


def monitor_jobs(
    total_jobs: int = 10,
    work_interval: float = 0.25,
    poll_interval: float = 0.5,
) -> list[str]:
    """Run jobs in a background thread and poll until all are done.

    Returns the "waiting..." lines printed while jobs were outstanding.
    """
    if total_jobs < 0:
        raise ValueError("total_jobs must not be negative")
    if work_interval < 0 or poll_interval < 0:
        raise ValueError("intervals must not be negative")

    status = JobStatus()
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(total_jobs):
            time.sleep(work_interval)
            with lock:
                status.jobs_completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()

    lines = []
    while True:
        time.sleep(poll_interval)
        with lock:
            completed = status.jobs_completed
        if completed >= total_jobs:
            break
        line = "waiting..."
        print(line)
        lines.append(line)
    thread.join()
    return lines