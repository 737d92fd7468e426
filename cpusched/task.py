"""Task records and the tabular report of scheduling results."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, NamedTuple, TextIO

TASK_ROW_BORDER = (
    "+----+------------+-------+--------+-----------+------------+---------+----------+"
)
TASK_HEADER = (
    "| ID | Prioridade | Burst | Inicio | Termino   | Retorno    | Espera  | Resposta |"
)
STATS_BORDER = "+---------------------------+---------------+"

COLOR_HEADER = "\033[1;33m"
COLOR_TITLE = "\033[1;36m"
COLOR_RESET = "\033[0m"


@dataclass
class Task:
    """A unit of work with its scheduling statistics.

    Times that have not been computed yet hold -1.
    """

    id: int
    priority: int
    burst: int
    remaining_burst: int | None = None
    arrival_time: int = 0
    start_time: int = -1
    completion_time: int = -1
    response_time: int = -1
    turnaround_time: int = -1
    waiting_time: int = -1

    def __post_init__(self) -> None:
        if self.remaining_burst is None:
            self.remaining_burst = self.burst

    @property
    def finished(self) -> bool:
        return self.remaining_burst == 0


class _AverageTimes(NamedTuple):
    turnaround: float
    waiting: float
    response: float


def format_task_row(task: Task) -> str:
    """Return the table row describing one task."""
    return (
        f"| {task.id:>2} | {task.priority:>10} | {task.burst:>5}"
        f" | {task.start_time:>6} | {task.completion_time:>9}"
        f" | {task.turnaround_time:>10} | {task.waiting_time:>7}"
        f" | {task.response_time:>8} |"
    )


class TaskReport:
    """Writes finished tasks as table rows, with the header before the first."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._header_printed = False

    def _write(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def print_task(self, task: Task) -> None:
        if not self._header_printed:
            self._write()
            self._write(f"{COLOR_HEADER}{TASK_ROW_BORDER}{COLOR_RESET}")
            self._write(f"{COLOR_HEADER}{TASK_HEADER}{COLOR_RESET}")
            self._write(f"{COLOR_HEADER}{TASK_ROW_BORDER}{COLOR_RESET}")
            self._header_printed = True
        self._write(format_task_row(task))


def average_times(tasks: Iterable[Task]) -> _AverageTimes:
    """Return the mean turnaround, waiting and response times.

    Raises ValueError when there are no tasks.
    """
    tasks = list(tasks)
    if not tasks:
        raise ValueError("Nenhuma task para calcular estatisticas!")
    count = len(tasks)
    return _AverageTimes(
        turnaround=sum(t.turnaround_time for t in tasks) / count,
        waiting=sum(t.waiting_time for t in tasks) / count,
        response=sum(t.response_time for t in tasks) / count,
    )


def show_avg_times(tasks: Iterable[Task], stream: TextIO | None = None) -> None:
    """Write the closing border of the task table and the averages summary."""
    out = stream if stream is not None else sys.stdout
    averages = average_times(tasks)
    lines = [
        TASK_ROW_BORDER,
        "",
        f"{COLOR_TITLE}Resumo de Desempenho{COLOR_RESET}",
        STATS_BORDER,
        "| Metrica                   | Media (ms)    |",
        STATS_BORDER,
        f"| Tempo de Retorno          | {averages.turnaround:>13.2f} |",
        f"| Tempo de Espera           | {averages.waiting:>13.2f} |",
        f"| Tempo de Resposta         | {averages.response:>13.2f} |",
        STATS_BORDER,
    ]
    out.write("\n".join(lines) + "\n")