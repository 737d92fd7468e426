# cpusched

A small CPU scheduling simulator for teaching. It reads a list of tasks from
`schedule.txt` in the current directory and runs them under the chosen
scheduling algorithm. It then prints a table with one row per task, giving the
start, completion, turnaround, waiting and response times. After the table it
prints the average turnaround, waiting and response times. The output uses ANSI
colour codes.

## Installation

```
pip install .
```

## Input format

`schedule.txt` holds one task per line, in the form `name,priority,burst`:

```
T1,4,20
T2,2,25
T3,3,25
T4,3,15
T5,10,10
```

The name in the first field is ignored. Tasks are numbered 1, 2, 3, ... in file
order, and every task arrives at time 0. Each line must have at least three
comma-separated fields, and the priority and burst fields must start with an
integer. Any other line, including a blank one, makes the file invalid.

## Usage

```
cpusched <algorithm>
```

The same command can also be run as `python -m cpusched.cli <algorithm>`.

The available algorithms are:

- `fcfs`: first come, first served, in file order.
- `sjf`: shortest job first, smallest burst first. Each task runs to completion.
- `priority`: lowest priority number first. Each task runs to completion.
- `rr`: round robin with a quantum of 10 ms.
- `priority_rr`: round robin within each priority level, with a quantum of 10 ms. Levels run in order, lowest priority number first.

For example:

```
cpusched rr
```

The command prints an error and exits with status 1 in these cases:

- no algorithm is given;
- `schedule.txt` cannot be opened or holds no tasks;
- a line in `schedule.txt` is invalid;
- the algorithm is unknown. This check comes after the opening banner has been printed.

## Using it as a library

```python
import sys

from cpusched.driver import parse_schedule
from cpusched.schedulers import rr_schedule
from cpusched.task import TaskReport, average_times, show_avg_times

tasks = parse_schedule("schedule.txt")
finished = rr_schedule(tasks, 10, TaskReport(sys.stdout))
show_avg_times(tasks, sys.stdout)
print(average_times(tasks))
```

### `cpusched.task`

- `Task` is a dataclass with these fields: `id`, `priority`, `burst`, `remaining_burst`, `arrival_time` and the computed times. Any time that has not been computed yet holds -1.
- `TaskReport(stream)` writes rows to `stream`, or to standard output if no stream is given. `print_task(task)` writes one row and prints the header before the first row.
- `format_task_row(task)` returns a single row as a string.
- `average_times(tasks)` returns a named tuple of the mean turnaround, waiting and response times. It raises `ValueError` when there are no tasks.
- `show_avg_times(tasks, stream)` writes the closing border of the table and then the averages summary.

### `cpusched.schedulers`

Each scheduler runs the tasks, fills in their timing fields and returns them in completion order. If you pass a `TaskReport`, each task is written to it as it finishes.

- `fcfs_schedule(tasks, report)`
- `sjf_schedule(tasks, report)`
- `priority_schedule(tasks, report)`
- `rr_schedule(tasks, quantum, report)`
- `priority_rr_schedule(tasks, quantum, report)`

`sjf_schedule` and `priority_schedule` sort the list they are given in place. The two round-robin schedulers raise `ValueError` if the quantum is not positive.

### `cpusched.cpu` and `cpusched.driver`

- `run(task, quantum, time_now)` runs one task for one quantum and returns the new clock value. It fills in the task's timing fields once the task finishes.
- `parse_task(line, task_id)` builds a `Task` from one line.
- `parse_schedule(filename)` reads a whole file into a list of tasks.

## Limitations

Every task arrives at time 0, and there is no way to give an arrival time. The
input file name (`schedule.txt`) and the quantum (10 ms) are fixed on the
command line; only the library functions accept other values.

## Running the tests

```
pip install .[test]
pytest
```