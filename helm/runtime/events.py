"""In-process event bus."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from itertools import count
from typing import Any, TypeVar

from helm.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]

logger = logging.getLogger(__name__)


class RuntimeEventBus:
    """Handlers are grouped by subscribed type and matched along the event's MRO."""

    def __init__(self) -> None:
        self._ids = count(1)
        self._handlers: defaultdict[type, dict[int, EventHandler]] = defaultdict(dict)

    def subscribe(self, event_type: type[TEvent], handler: Callable[[TEvent], None]) -> Subscription:
        subscription = Subscription(id=next(self._ids), event_type=event_type)
        self._handlers[event_type][subscription.id] = handler
        return subscription

    def unsubscribe(self, subscription: Subscription) -> bool:
        handlers = self._handlers.get(subscription.event_type)
        if handlers is None or handlers.pop(subscription.id, None) is None:
            return False
        if not handlers:
            del self._handlers[subscription.event_type]
        return True

    def publish(self, event: object) -> int:
        matched: list[tuple[int, EventHandler]] = []
        for event_type in type(event).__mro__:
            handlers = self._handlers.get(event_type)
            if handlers:
                matched.extend(handlers.items())
        matched.sort(key=lambda item: item[0])
        for _, handler in matched:
            handler(event)
        if not matched:
            logger.debug("event_unhandled type=%s", type(event).__name__)
        return len(matched)


EventBus = RuntimeEventBus
