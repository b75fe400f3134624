"""A worker thread completing jobs while the caller waits for it."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass
class JobStatus:
    """How many jobs have been completed so far."""

    jobs_completed: int = 0


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> JobStatus:
    """Complete jobs on a worker thread, printing "waiting... " on each poll.

    Returns the final status once every job is done.
    """
    if jobs < 0:
        raise ValueError("the number of jobs cannot be negative")
    status = JobStatus()
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                status.jobs_completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while True:
        with lock:
            if status.jobs_completed >= jobs:
                break
        print("waiting... ")
        time.sleep(poll_delay)
    thread.join()
    return status