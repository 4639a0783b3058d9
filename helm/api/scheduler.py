"""Deferred-callback scheduler contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

TaskCallback = Callable[[], None]


@runtime_checkable
class SchedulerPort(Protocol):
    """One-shot callbacks on a clock the host advances explicitly."""

    @property
    def now_seconds(self) -> float: ...

    @property
    def queued_task_count(self) -> int: ...

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> int:
        """Queue ``callback`` and return its task id."""

    def cancel(self, task_id: int) -> bool:
        """Return whether a queued task was removed."""

    def advance(self, delta_seconds: float) -> int:
        """Move the clock forward and return how many callbacks ran."""


def create_scheduler() -> SchedulerPort:
    from helm.runtime.scheduler import RuntimeScheduler

    return RuntimeScheduler()
