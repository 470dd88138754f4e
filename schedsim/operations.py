"""Process records, the operations log and the process-file reader."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

MAX_PROCESSES = 10
"""Largest number of processes a process file may describe."""

TOKENS_PER_LINE = 3

_SEPARATOR = re.compile(r"[^0-9]")

StrPath = Union[str, "PathLike[str]"]


@dataclass
class Process:
    """A simulated process and the clock ticks at which it started and ended."""

    entry: int
    id: int
    instructions: int
    start: int = -1
    end: int = 0

    def is_done(self) -> bool:
        """Return True once the process has no instructions left."""
        return self.instructions < 1


class OperationLog:
    """A plain-text log of ``code | note`` lines, truncated when created."""

    def __init__(self, path: StrPath = "operations.log") -> None:
        self.path = Path(path)
        self.path.write_text("", encoding="utf-8")

    def log(self, code: str, note: str) -> None:
        """Append one entry to the log."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{code} | {note}\n")


def tokenize(line: str) -> list[str]:
    """Split a line into its first three digit fields.

    Every character that is not an ASCII digit ends a field, so two
    separators in a row give an empty field.
    """
    tokens = _SEPARATOR.split(line)
    if len(tokens) < TOKENS_PER_LINE:
        raise ValueError(f"expected {TOKENS_PER_LINE} fields in {line!r}")
    return tokens[:TOKENS_PER_LINE]


def parse_process(line: str) -> Process:
    """Build a process from a line holding entry time, id and instruction count."""
    tokens = tokenize(line)
    if not all(tokens):
        raise ValueError(f"empty field in {line!r}")
    entry, pid, instructions = (int(token) for token in tokens)
    return Process(entry=entry, id=pid, instructions=instructions)


def load_processes(path: StrPath, log: OperationLog) -> list[Process]:
    """Read every process described in a process file, in file order."""
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError:
        log.log("ERROR", "Could not open file")
        raise

    processes = []
    for line in lines:
        if not line.strip():
            continue
        if len(processes) >= MAX_PROCESSES:
            raise ValueError(f"more than {MAX_PROCESSES} processes in {path}")
        log.log("Info", "Tokenizing..")
        processes.append(parse_process(line))
        log.log("Info", "Created Process")
    return processes