"""One-shot deferred callbacks on a host-driven clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count

from helm.api.scheduler import TaskCallback


@dataclass(order=True, slots=True)
class _Entry:
    due_seconds: float
    task_id: int
    callback: TaskCallback = field(compare=False)


class RuntimeScheduler:
    """Runs callbacks once the host has advanced the clock past their due time.

    The clock starts at zero and never moves on its own. Callbacks due at the
    same time run in the order they were scheduled; a callback scheduled with
    zero delay from inside another callback runs in the same pass.
    """

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._ids = count(1)
        self._heap: list[_Entry] = []
        self._live: set[int] = set()

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def queued_task_count(self) -> int:
        return len(self._live)

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> int:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        task_id = next(self._ids)
        heappush(self._heap, _Entry(self._now_seconds + delay_seconds, task_id, callback))
        self._live.add(task_id)
        return task_id

    def cancel(self, task_id: int) -> bool:
        """Forget a queued task. Returns ``False`` if it already ran or was unknown."""
        if task_id not in self._live:
            return False
        self._live.remove(task_id)
        return True

    def advance(self, delta_seconds: float) -> int:
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Move the clock to ``now_seconds`` and run what is due; return the count run."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        ran = 0
        while self._heap and self._heap[0].due_seconds <= now_seconds:
            entry = heappop(self._heap)
            if entry.task_id not in self._live:
                continue
            self._live.remove(entry.task_id)
            entry.callback()
            ran += 1
        return ran
