import io

import pytest

from cpusched.task import (
    STATS_BORDER,
    TASK_HEADER,
    TASK_ROW_BORDER,
    Task,
    TaskReport,
    average_times,
    format_task_row,
    show_avg_times,
)


def _done(task_id, turnaround, waiting, response):
    return Task(
        id=task_id,
        priority=1,
        burst=5,
        remaining_burst=0,
        start_time=response,
        completion_time=turnaround,
        turnaround_time=turnaround,
        waiting_time=waiting,
        response_time=response,
    )


def test_new_task_defaults():
    task = Task(id=1, priority=3, burst=20)
    assert task.remaining_burst == 20
    assert task.arrival_time == 0
    assert task.start_time == -1
    assert task.completion_time == -1
    assert task.turnaround_time == -1
    assert task.waiting_time == -1
    assert task.response_time == -1
    assert not task.finished


def test_row_width_matches_border():
    row = format_task_row(Task(id=1, priority=3, burst=20))
    assert len(row) == len(TASK_ROW_BORDER)
    assert len(TASK_HEADER) == len(TASK_ROW_BORDER)


def test_row_fields_in_order():
    task = _done(4, 30, 25, 10)
    cells = [c.strip() for c in format_task_row(task).split("|")[1:-1]]
    assert cells == ["4", "1", "5", "10", "30", "30", "25", "10"]


def test_report_prints_header_once():
    stream = io.StringIO()
    report = TaskReport(stream)
    report.print_task(_done(1, 5, 0, 0))
    report.print_task(_done(2, 10, 5, 5))
    text = stream.getvalue()
    assert text.count(TASK_HEADER) == 1
    assert format_task_row(_done(1, 5, 0, 0)) in text
    assert text.rstrip("\n").endswith(format_task_row(_done(2, 10, 5, 5)))


def test_separate_reports_each_print_header():
    for _ in range(2):
        stream = io.StringIO()
        TaskReport(stream).print_task(_done(1, 5, 0, 0))
        assert TASK_HEADER in stream.getvalue()


def test_average_times():
    averages = average_times([_done(1, 10, 5, 0), _done(2, 30, 15, 10)])
    assert averages.turnaround == 20
    assert averages.waiting == 10
    assert averages.response == 5


def test_average_of_identical_tasks_is_their_value():
    tasks = [_done(i, 7, 2, 2) for i in range(1, 5)]
    averages = average_times(tasks)
    assert (averages.turnaround, averages.waiting, averages.response) == (7, 2, 2)


def test_average_times_empty_raises():
    with pytest.raises(ValueError):
        average_times([])


def test_show_avg_times_output():
    stream = io.StringIO()
    show_avg_times([_done(1, 10, 5, 0), _done(2, 30, 15, 10)], stream)
    lines = stream.getvalue().splitlines()
    assert lines[0] == TASK_ROW_BORDER
    assert lines[-1] == STATS_BORDER
    retorno = next(line for line in lines if "Tempo de Retorno" in line)
    assert retorno.endswith("20.00 |")
    assert len(retorno) == len(STATS_BORDER)


def test_show_avg_times_empty_raises():
    with pytest.raises(ValueError):
        show_avg_times([], io.StringIO())