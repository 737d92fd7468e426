"""Reading task lists from schedule files."""

from __future__ import annotations

import re
from itertools import count
from os import PathLike

from .task import Task

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(token: str, field: str) -> int:
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"invalid {field}: {token!r}")
    return int(match.group(1))


def parse_task(line: str, task_id: int) -> Task:
    """Build a task from a ``name,priority,burst`` line.

    The name in the line is ignored; the task gets ``task_id`` instead.
    """
    fields = line.split(",")
    if len(fields) < 3:
        raise ValueError(f"expected name, priority and burst: {line!r}")
    priority = _leading_int(fields[1], "priority")
    burst = _leading_int(fields[2], "burst")
    return Task(id=task_id, priority=priority, burst=burst)


def parse_schedule(filename: str | PathLike) -> list[Task]:
    """Read every line of a schedule file as a task, numbering them from 1."""
    ids = count(1)
    with open(filename, encoding="utf-8") as handle:
        return [parse_task(line.rstrip("\n"), next(ids)) for line in handle]