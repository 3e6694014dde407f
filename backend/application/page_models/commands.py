"""
Async commands exposed by page models to their pages.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class AsyncRelayCommand:
    """
    Wraps a coroutine function as a bindable command.

    While an execution is in flight `can_execute()` is False and a
    second `execute()` is a no-op.
    """

    def __init__(
        self,
        execute: Callable[..., Awaitable[Any]],
        can_execute: Optional[Callable[..., bool]] = None,
    ):
        self._execute = execute
        self._can_execute = can_execute
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def can_execute(self, *args: Any) -> bool:
        if self._running:
            return False
        if self._can_execute is None:
            return True
        return bool(self._can_execute(*args))

    async def execute(self, *args: Any) -> Any:
        if not self.can_execute(*args):
            logger.debug("Command %s skipped", getattr(self._execute, '__name__', self._execute))
            return None
        self._running = True
        try:
            return await self._execute(*args)
        finally:
            self._running = False
