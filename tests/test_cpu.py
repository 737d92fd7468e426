from cpusched.cpu import run
from cpusched.task import Task


def test_partial_run_advances_clock_by_quantum():
    task = Task(id=1, priority=1, burst=25)
    now = run(task, 10, 0)
    assert now == 10
    assert task.remaining_burst == 15
    assert task.start_time == 0
    assert task.completion_time == -1
    assert not task.finished


def test_start_time_set_only_once():
    task = Task(id=1, priority=1, burst=25)
    now = run(task, 10, 40)
    run(task, 10, now + 30)
    assert task.start_time == 40


def test_finishing_run_computes_statistics():
    task = Task(id=1, priority=1, burst=8)
    now = run(task, 10, 12)
    assert now == 12 + 8
    assert task.finished
    assert task.completion_time == now
    assert task.turnaround_time == task.completion_time - task.arrival_time
    assert task.waiting_time == task.turnaround_time - task.burst
    assert task.response_time == task.start_time - task.arrival_time


def test_exact_quantum_finishes():
    task = Task(id=1, priority=1, burst=10)
    now = run(task, 10, 0)
    assert now == 10
    assert task.finished


def test_repeated_slices_consume_whole_burst():
    task = Task(id=1, priority=1, burst=37)
    now = 0
    while not task.finished:
        now = run(task, 10, now)
    assert now == task.burst
    assert task.waiting_time == 0
    assert task.response_time == 0