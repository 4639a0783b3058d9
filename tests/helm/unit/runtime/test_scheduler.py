import pytest

from helm.api.scheduler import SchedulerPort, create_scheduler
from helm.runtime.scheduler import RuntimeScheduler


def test_call_later_runs_when_due() -> None:
    scheduler = RuntimeScheduler()
    calls: list[str] = []
    scheduler.call_later(1.0, lambda: calls.append("a"))
    scheduler.call_later(0.5, lambda: calls.append("b"))
    assert scheduler.queued_task_count == 2
    assert scheduler.advance(0.6) == 1
    assert calls == ["b"]
    assert scheduler.advance(0.4) == 1
    assert calls == ["b", "a"]
    assert scheduler.now_seconds == pytest.approx(1.0)
    assert scheduler.queued_task_count == 0


def test_cancelled_task_never_runs() -> None:
    scheduler = RuntimeScheduler()
    calls: list[int] = []
    task_id = scheduler.call_later(0.1, lambda: calls.append(1))
    assert scheduler.cancel(task_id)
    assert not scheduler.cancel(task_id)
    assert not scheduler.cancel(999)
    assert scheduler.queued_task_count == 0
    assert scheduler.advance(1.0) == 0
    assert calls == []


def test_zero_delay_task_scheduled_from_callback_runs_same_tick() -> None:
    scheduler = RuntimeScheduler()
    calls: list[str] = []

    def _first() -> None:
        calls.append("first")
        scheduler.call_later(0.0, lambda: calls.append("second"))

    scheduler.call_later(0.0, _first)
    assert scheduler.advance(0.0) == 2
    assert calls == ["first", "second"]


def test_scheduler_rejects_negative_time() -> None:
    scheduler = RuntimeScheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-0.1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-1.0)
    scheduler.advance(2.0)
    with pytest.raises(ValueError):
        scheduler.run_due(1.0)


def test_same_due_time_runs_in_schedule_order() -> None:
    scheduler = RuntimeScheduler()
    calls: list[int] = []
    for index in range(3):
        scheduler.call_later(1.0, lambda index=index: calls.append(index))
    scheduler.run_due(1.0)
    assert calls == [0, 1, 2]


def test_cancel_after_run_reports_false() -> None:
    scheduler = RuntimeScheduler()
    task_id = scheduler.call_later(0.0, lambda: None)
    scheduler.advance(0.0)
    assert not scheduler.cancel(task_id)


def test_create_scheduler_returns_runtime_scheduler() -> None:
    scheduler = create_scheduler()
    assert isinstance(scheduler, RuntimeScheduler)
    assert isinstance(scheduler, SchedulerPort)
    assert scheduler.now_seconds == 0.0
