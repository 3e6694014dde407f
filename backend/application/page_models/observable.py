"""
Property-change notification for page models.

Listeners are plain callables `listener(property_name, value)`,
called synchronously in the thread that changed the property.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)

PropertyListener = Callable[[str, Any], None]


class ObservableObject:
    """Base class for objects that publish property changes."""

    def __init__(self) -> None:
        self._listeners: List[PropertyListener] = []

    def subscribe(self, listener: PropertyListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return

        return _unsubscribe

    def notify(self, name: str) -> None:
        value = getattr(self, name)
        for listener in list(self._listeners):
            try:
                listener(name, value)
            except Exception:
                logger.exception("Property listener failed for %s.%s", type(self).__name__, name)

    def _set_property(self, name: str, value: Any) -> bool:
        """Store `value` in `_<name>` and notify when it changed."""
        attr = f'_{name}'
        if getattr(self, attr, None) is value:
            return False
        setattr(self, attr, value)
        self.notify(name)
        return True
