"""Revalidate signal.

A tiny synchronous observer list. The constraint store and the presentation
configuration broadcast on it whenever rules or classes change, so host
bindings can re-run validation for the fields they display.

Usage:
    signal = Signal(RULES_CHANGED)

    unsubscribe = signal.subscribe(revalidate_visible_fields)
    signal.broadcast()
    unsubscribe()
"""

from typing import Callable

from fieldcheck.utils.logging import get_logger

logger = get_logger(__name__)

RULES_CHANGED = "fieldcheck-rules-changed"


class Signal:
    """Named broadcast signal with synchronous delivery.

    Every subscriber is invoked exactly once per broadcast, over a snapshot
    of the subscriber list taken when the broadcast starts. Exceptions raised
    by a subscriber propagate to the broadcaster.
    """

    def __init__(self, name: str = RULES_CHANGED):
        self.name = name
        self._subscribers: list[Callable[[], None]] = []

    def subscribe(self, fn: Callable[[], None]) -> Callable[[], None]:
        """Register ``fn`` and return a function that removes it again."""
        if fn not in self._subscribers:
            self._subscribers.append(fn)

        def unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return unsubscribe

    def connect(self, fn: Callable[[], None]) -> Callable[[], None]:
        """Decorator form of ``subscribe``."""
        self.subscribe(fn)
        return fn

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def broadcast(self) -> None:
        subscribers = list(self._subscribers)
        logger.debug("Broadcasting", signal=self.name, subscribers=len(subscribers))
        for fn in subscribers:
            fn()
