"""Slot-based queues and the round-robin scheduler that moves processes between them."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .operations import MAX_PROCESSES, OperationLog, Process

QUANTUM = 5
"""Consecutive instructions a process may run before it is sent back."""


class SlotQueue:
    """A fixed number of slots; processes join after the last occupied slot."""

    def __init__(self, capacity: int = MAX_PROCESSES) -> None:
        self.slots: list[Optional[Process]] = [None] * capacity

    def __len__(self) -> int:
        return sum(1 for slot in self.slots if slot is not None)

    def __getitem__(self, index: int) -> Optional[Process]:
        return self.slots[index]

    def is_empty(self) -> bool:
        """Return True if no slot holds a process."""
        return all(slot is None for slot in self.slots)

    def front_index(self) -> int:
        """Index of the first occupied slot, or 0 if there is none."""
        return next(
            (index for index, slot in enumerate(self.slots) if slot is not None), 0
        )

    def back_index(self) -> int:
        """Index just after the last occupied slot, or 0 if there is none."""
        for index in reversed(range(len(self.slots))):
            if self.slots[index] is not None:
                return index + 1
        return 0

    def append(self, process: Process) -> int:
        """Put a process after the last occupied slot and return its index."""
        index = self.back_index()
        if index >= len(self.slots):
            raise OverflowError("queue has no free slot at the back")
        self.slots[index] = process
        return index

    def take(self, index: int) -> Process:
        """Remove and return the process in a slot."""
        process = self.slots[index]
        if process is None:
            raise IndexError(f"slot {index} is empty")
        self.slots[index] = None
        return process

    def occupied(self) -> Iterator[tuple[int, Process]]:
        """Yield (index, process) for every occupied slot, front to back."""
        for index, slot in enumerate(self.slots):
            if slot is not None:
                yield index, slot


class Scheduler:
    """Runs processes round-robin between an inactive and an active queue."""

    def __init__(self, processes: Iterable[Process], log: OperationLog) -> None:
        self.log = log
        self.inactive = SlotQueue()
        self.active = SlotQueue()
        self.final = SlotQueue()
        self.ticks = 0
        self.executions = 0
        for process in processes:
            self.inactive.append(process)

    def _stamp(self, process: Process) -> None:
        if process.start == -1:
            process.start = self.ticks
        else:
            process.end = self.ticks

    def _move(self, source: SlotQueue, index: int, destination: SlotQueue) -> None:
        process = source.take(index)
        destination.append(process)
        self._stamp(process)
        self.log.log("Info", "Process Moved To destination Queue")

    def check_move(self, clock: int) -> None:
        """Move the first inactive process whose entry time has come to the active queue."""
        for index, process in self.inactive.occupied():
            if process.entry <= clock:
                self._move(self.inactive, index, self.active)
                break

    def execute(self) -> None:
        """Run one instruction of the process at the front of the active queue."""
        if self.active.is_empty():
            raise IndexError("no active process to execute")
        index = self.active.front_index()
        process = self.active[index]
        assert process is not None
        process.instructions -= 1
        if process.is_done():
            self._stamp(process)
            self.final.append(self.active.take(index))
            self.log.log("Info", "Process finished")
            self.executions = 0
        elif self.executions >= QUANTUM:
            self._move(self.active, index, self.inactive)
            self.executions = 0
        else:
            self.executions += 1
        self.ticks += 1

    def finished(self) -> bool:
        """Return True once both the inactive and the active queue are empty."""
        return self.inactive.is_empty() and self.active.is_empty()

    def format_queues(self) -> str:
        """Render the inactive and active queues."""
        parts = [
            "--------------------\n",
            "INACTIVE QUEUE:\n",
            "--------------------\n\n",
        ]
        parts.extend(_queue_line(i, p) for i, p in self.inactive.occupied())
        parts.extend(
            [
                "\n--------------------\n",
                "ACTIVE QUEUE:\n",
                "--------------------\n\n",
            ]
        )
        parts.extend(_queue_line(i, p) for i, p in self.active.occupied())
        return "".join(parts)

    def format_final(self) -> str:
        """Render the finished processes with their start and end ticks."""
        parts = [
            "--------------------\n",
            "Final Processes:\n",
            "--------------------\n\n",
        ]
        parts.extend(
            f"[{i}] ID: {p.id} | Instructions: {p.instructions} | Entry: {p.entry}"
            f" | Start: {p.start} | End: {p.end}\n"
            for i, p in self.final.occupied()
        )
        return "".join(parts)


def _queue_line(index: int, process: Process) -> str:
    return (
        f"[{index}] ID: {process.id} | Instructions: {process.instructions}"
        f" | Entry:{process.entry}\n"
    )