"""Event bus contract."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Handle returned by ``subscribe``; pass it back to ``unsubscribe``."""

    id: int
    event_type: type


class EventBus(Protocol):
    """Synchronous in-process publish/subscribe.

    A handler subscribed to a base class also receives its subclasses.
    Handlers run in subscription order on the publishing thread.
    """

    def subscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> Subscription: ...

    def unsubscribe(self, subscription: Subscription) -> bool:
        """Return whether the subscription was still active."""

    def publish(self, event: object) -> int:
        """Deliver ``event`` and return how many handlers ran."""


def create_event_bus() -> EventBus:
    from helm.runtime.events import RuntimeEventBus

    return RuntimeEventBus()
