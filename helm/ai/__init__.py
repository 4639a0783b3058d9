"""AI primitive implementations."""

from helm.ai.blackboard import RuntimeBlackboard

__all__ = ["RuntimeBlackboard"]
