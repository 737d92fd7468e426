"""Command-line entry point for the scheduling simulator."""

from __future__ import annotations

import sys
from typing import Callable, Sequence

from .driver import parse_schedule
from .schedulers import (
    fcfs_schedule,
    priority_rr_schedule,
    priority_schedule,
    rr_schedule,
    sjf_schedule,
)
from .task import Task, TaskReport, show_avg_times

SCHEDULE_FILE = "schedule.txt"
QUANTUM = 10

_RED = "\033[1;31m"
_BLUE = "\033[1;34m"
_BOLD = "\033[1m"
_RESET = "\033[0m"

_Scheduler = Callable[[list[Task], int, TaskReport], object]

ALGORITHMS: dict[str, _Scheduler] = {
    "fcfs": lambda tasks, quantum, report: fcfs_schedule(tasks, report),
    "sjf": lambda tasks, quantum, report: sjf_schedule(tasks, report),
    "rr": lambda tasks, quantum, report: rr_schedule(tasks, quantum, report),
    "priority": lambda tasks, quantum, report: priority_schedule(tasks, report),
    "priority_rr": lambda tasks, quantum, report: priority_rr_schedule(
        tasks, quantum, report
    ),
}

_AVAILABLE = "Algoritmos disponiveis: " + ", ".join(ALGORITHMS)


def _banner(algorithm: str, task_count: int) -> str:
    rule = "=" * 40
    return "\n".join(
        [
            "",
            f"{_BLUE}{rule}{_RESET}",
            f"{_BLUE}     Simulador de Escalonamento CPU     {_RESET}",
            f"{_BLUE}{rule}{_RESET}",
            f"Algoritmo: {_BOLD}{algorithm}{_RESET}",
            f"Arquivo de entrada: {SCHEDULE_FILE}",
            f"Tarefas: {task_count}",
            f"Quantum: {QUANTUM} ms",
            f"{_BLUE}{'-' * 40}{_RESET}",
            "",
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the algorithm named in ``argv`` over ``schedule.txt``; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout

    if not args:
        print(f"{_RED}Erro: Nenhum algoritmo especificado!{_RESET}", file=out)
        print("\nUso: ./scheduler <algoritmo>", file=out)
        print(_AVAILABLE, file=out)
        return 1

    algorithm = args[0]

    try:
        tasks = parse_schedule(SCHEDULE_FILE)
    except OSError:
        print(f"Error: Could not open file {SCHEDULE_FILE}", file=out)
        tasks = []
    except ValueError as exc:
        print(f"Error: {exc}", file=out)
        return 1

    if not tasks:
        print(f"Error: No tasks found in {SCHEDULE_FILE}!", file=out)
        return 1

    print(_banner(algorithm, len(tasks)), file=out)

    scheduler = ALGORITHMS.get(algorithm)
    if scheduler is None:
        print(f"{_RED}Erro: Algoritmo desconhecido '{algorithm}'{_RESET}", file=out)
        print(_AVAILABLE, file=out)
        return 1

    scheduler(tasks, QUANTUM, TaskReport(out))
    show_avg_times(tasks, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())