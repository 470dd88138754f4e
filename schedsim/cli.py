"""Command-line driver that runs the scheduling simulation on a process file."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence, TextIO

from .operations import OperationLog, load_processes
from .process_control import Scheduler

_INITIAL = "################### Initial #########################\n"
_RUNNING = "################### Running #########################\n"


def run(
    path: str,
    log_path: str = "operations.log",
    delay: float = 1.0,
    out: Optional[TextIO] = None,
) -> Scheduler:
    """Simulate the processes in a file, printing the queues every cycle."""
    out = sys.stdout if out is None else out
    log = OperationLog(log_path)
    log.log("Info", "Log Initialized")

    scheduler = Scheduler(load_processes(path, log), log)
    log.log("Info", "Queues Initialized")

    out.write(_INITIAL)
    out.write(scheduler.format_queues())

    clock = 0
    while True:
        if not scheduler.inactive.is_empty() and clock % 2 == 0:
            scheduler.check_move(clock)
        if not scheduler.active.is_empty():
            log.log("Info", "Executing instruction")
            scheduler.execute()
        if scheduler.finished():
            break
        clock += 1
        out.write(_RUNNING)
        out.write(scheduler.format_queues())
        if delay > 0:
            time.sleep(delay)

    out.write(scheduler.format_final())
    return scheduler


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the simulation; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="schedsim", description="Round-robin process scheduling simulation."
    )
    parser.add_argument("path", nargs="?", default="test3.txt", help="process file")
    parser.add_argument("--log", default="operations.log", help="log file")
    parser.add_argument(
        "--delay", type=float, default=1.0, help="seconds to wait between cycles"
    )
    args = parser.parse_args(argv)
    try:
        run(args.path, args.log, args.delay, sys.stdout)
    except (OSError, ValueError, OverflowError) as error:
        print(f"schedsim: {error}", file=sys.stderr)
        return 1
    return 0