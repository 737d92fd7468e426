"""Simulated CPU that runs a task for a slice of time."""

from __future__ import annotations

from .task import Task


def run(task: Task, quantum: int, time_now: int) -> int:
    """Run ``task`` for up to ``quantum`` time units starting at ``time_now``.

    Updates the task in place and returns the clock after the slice. When the
    task finishes, its completion, turnaround, waiting and response times are set.
    """
    if task.start_time == -1:
        task.start_time = time_now

    if task.remaining_burst <= quantum:
        time_now += task.remaining_burst
        task.remaining_burst = 0
        task.completion_time = time_now
        task.turnaround_time = task.completion_time - task.arrival_time
        task.waiting_time = task.turnaround_time - task.burst
        task.response_time = task.start_time - task.arrival_time
    else:
        time_now += quantum
        task.remaining_burst -= quantum
    return time_now