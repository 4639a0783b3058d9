"""Public helm API contracts."""

from helm.api.ai import Agent, Blackboard, DecisionContext, create_blackboard
from helm.api.env import env_float, env_int, resolve_log_level_name
from helm.api.events import EventBus, Subscription, create_event_bus
from helm.api.logging import (
    JsonFormatter,
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from helm.api.scheduler import SchedulerPort, create_scheduler

__all__ = [
    "Agent",
    "Blackboard",
    "DecisionContext",
    "EventBus",
    "JsonFormatter",
    "LoggingConfig",
    "SchedulerPort",
    "Subscription",
    "configure_logging",
    "create_blackboard",
    "create_event_bus",
    "create_scheduler",
    "env_float",
    "env_int",
    "get_logger",
    "resolve_log_level_name",
    "shutdown_logging",
]
