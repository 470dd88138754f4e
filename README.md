# schedsim

A small simulator of round-robin process scheduling. It reads a list of
processes from a text file and admits them to an active queue as the clock
reaches their entry time. It runs the process at the front of the active queue
one instruction per tick. A process that has held the processor for several
ticks in a row goes back to the inactive queue. When every process is done, it
prints each one's start and end ticks.

## Installing

```
pip install .
```

## Input file

Each line describes one process. A line holds three whole numbers: the entry
time, the process id and the instruction count. One non-digit character, such
as a single space, separates the numbers:

```
0 1 7
2 2 3
4 3 5
```

Blank lines are skipped. A file may describe at most 10 processes. If two
separators follow each other, or a line has fewer than three fields, a
`ValueError` is raised.

## Running

```
schedsim processes.txt
```

With no file given, `schedsim` reads `test3.txt` in the current directory.

The queues are printed before the first tick and again after every tick. A
table of finished processes follows at the end. A new entry is admitted from
the inactive queue at most once every two ticks.

Options:

- `--log PATH`: where the log of scheduler actions is written. The default is
  `operations.log`. The file is truncated at the start of each run.
- `--delay SECONDS`: the pause between ticks. The default is `1.0`, and `0`
  runs without pausing.

If the file cannot be read or is malformed, the command prints the error to
standard error and exits with status 1.

## Using it from Python

```python
import sys
from schedsim.cli import run

scheduler = run("processes.txt", "operations.log", 0.0, sys.stdout)
```

`run` returns the `Scheduler` once every process has finished.

You can also drive the pieces by hand:

```python
from schedsim.operations import OperationLog, load_processes
from schedsim.process_control import Scheduler

log = OperationLog("operations.log")
scheduler = Scheduler(load_processes("processes.txt", log), log)
scheduler.check_move(0)
scheduler.execute()
print(scheduler.format_queues())
```

The simulation is stepped with these `Scheduler` methods:

- `check_move(clock)` moves the first inactive process whose entry time is at
  or before `clock` into the active queue.
- `execute()` runs one instruction of the front active process. It raises
  `IndexError` if the active queue is empty.
- `finished()` reports whether both the inactive and the active queue are
  empty.

`format_queues()` and `format_final()` render the state as text. The queues
are `SlotQueue` objects: `inactive`, `active` and `final`. Each holds up to 10
`Process` records.

## Limits

This is a teaching model. It does not run real programs or measure real time.
Each "instruction" is a counter being decremented.

## Tests

```
pip install .[test]
pytest
```