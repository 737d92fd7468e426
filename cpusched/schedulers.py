"""CPU scheduling policies: FCFS, SJF, priority, round robin and priority round robin."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable

from .cpu import run
from .task import Task, TaskReport


def _emit(report: TaskReport | None, task: Task) -> None:
    if report is not None:
        report.print_task(task)


def _check_quantum(quantum: int) -> None:
    if quantum <= 0:
        raise ValueError(f"quantum must be positive, got {quantum}")


def _run_to_completion(
    ordered: Iterable[Task], report: TaskReport | None
) -> list[Task]:
    """Run each task once, without preemption, in the given order."""
    time_now = 0
    finished = []
    for task in ordered:
        time_now = run(task, task.remaining_burst, time_now)
        _emit(report, task)
        finished.append(task)
    return finished


def _round_robin(
    ready: deque[Task], quantum: int, time_now: int, report: TaskReport | None
) -> tuple[list[Task], int]:
    """Cycle through ``ready`` until it is empty; return finished tasks and the clock."""
    finished = []
    while ready:
        task = ready.popleft()
        time_now = run(task, min(quantum, task.remaining_burst), time_now)
        if task.remaining_burst > 0:
            ready.append(task)
        else:
            _emit(report, task)
            finished.append(task)
    return finished, time_now


def fcfs_schedule(tasks: list[Task], report: TaskReport | None = None) -> list[Task]:
    """Run the tasks in the order given. Returns them in completion order."""
    return _run_to_completion(tasks, report)


def sjf_schedule(tasks: list[Task], report: TaskReport | None = None) -> list[Task]:
    """Sort ``tasks`` in place by burst, shortest first, and run them in that order."""
    tasks.sort(key=lambda task: task.burst)
    return _run_to_completion(tasks, report)


def priority_schedule(
    tasks: list[Task], report: TaskReport | None = None
) -> list[Task]:
    """Sort ``tasks`` in place by priority, lowest number first, and run them."""
    tasks.sort(key=lambda task: task.priority)
    return _run_to_completion(tasks, report)


def rr_schedule(
    tasks: list[Task], quantum: int, report: TaskReport | None = None
) -> list[Task]:
    """Run the tasks in round robin with the given quantum.

    Returns the tasks in completion order.
    """
    _check_quantum(quantum)
    finished, _ = _round_robin(deque(tasks), quantum, 0, report)
    return finished


def priority_rr_schedule(
    tasks: list[Task], quantum: int, report: TaskReport | None = None
) -> list[Task]:
    """Run each priority level in round robin, lowest priority number first.

    Returns the tasks in completion order.
    """
    _check_quantum(quantum)
    levels: defaultdict[int, deque[Task]] = defaultdict(deque)
    for task in tasks:
        levels[task.priority].append(task)

    time_now = 0
    finished: list[Task] = []
    for priority in sorted(levels):
        done, time_now = _round_robin(levels[priority], quantum, time_now, report)
        finished.extend(done)
    return finished