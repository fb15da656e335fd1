"""
Property change notification.

Objects deriving from :class:`PropertyChangedNotifier` call registered
callbacks synchronously, with the property name, right after an observable
property changed. Callbacks run in subscription order; an exception raised by
a callback propagates to the code that triggered the change.
"""
from __future__ import annotations
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

PropertyChangedCallback = Callable[[str], None]


class PropertyChangedNotifier:
    __slots__ = ('_subscribers',)

    def __init__(self) -> None:
        self._subscribers: List[PropertyChangedCallback] = []

    def subscribe(self, callback: PropertyChangedCallback) -> PropertyChangedCallback:
        """Register ``callback``; returns it so it can be used as a decorator."""
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: PropertyChangedCallback) -> bool:
        """Remove ``callback``. Returns False if it was not registered."""
        try:
            self._subscribers.remove(callback)
        except ValueError:
            return False
        return True

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self, property_name: str) -> None:
        if not self._subscribers:
            return
        logger.debug("%s: %r changed, notifying %d subscriber(s)",
                     type(self).__name__, property_name, len(self._subscribers))
        # Copy so callbacks may unsubscribe themselves
        for callback in list(self._subscribers):
            callback(property_name)


__all__ = ["PropertyChangedNotifier", "PropertyChangedCallback"]
