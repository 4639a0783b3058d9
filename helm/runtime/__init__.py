"""Helm runtime modules."""

from helm.runtime.events import EventBus, RuntimeEventBus
from helm.runtime.logging import configure_runtime_logging, shutdown_runtime_logging
from helm.runtime.scheduler import RuntimeScheduler

__all__ = [
    "EventBus",
    "RuntimeEventBus",
    "RuntimeScheduler",
    "configure_runtime_logging",
    "shutdown_runtime_logging",
]
