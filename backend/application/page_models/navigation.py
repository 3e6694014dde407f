"""
Route strings and navigators.

Routes look like `project?id=<uuid>`; `..` goes back one page.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

logger = logging.getLogger(__name__)

BACK = '..'

RouteHandler = Callable[[Mapping[str, str]], Any]


def build_route(name: str, **params: Any) -> str:
    """build_route('project', id=42) -> 'project?id=42'"""
    query = {key: str(value) for key, value in params.items() if value is not None}
    if not query:
        return name
    return f"{name}?{urlencode(query)}"


def parse_route(route: str) -> Tuple[str, Dict[str, str]]:
    name, _, query = route.partition('?')
    return name, dict(parse_qsl(query))


class Navigator(ABC):
    """What page models use to move between pages."""

    @abstractmethod
    async def go_to(self, route: str) -> None:
        pass


class ShellNavigator(Navigator):
    """
    In-process navigator keeping a history stack.

    Handlers registered per route name receive the parsed query
    and may be coroutine functions.
    """

    def __init__(self, root: str = 'main'):
        self.history: List[str] = [root]
        self._handlers: Dict[str, RouteHandler] = {}

    @property
    def current_route(self) -> str:
        return self.history[-1]

    def register(self, name: str, handler: RouteHandler) -> None:
        self._handlers[name] = handler

    async def go_to(self, route: str) -> None:
        if route == BACK:
            if len(self.history) > 1:
                self.history.pop()
            logger.debug("Navigated back to %s", self.current_route)
            return

        name, query = parse_route(route)
        self.history.append(route)
        logger.debug("Navigated to %s", route)

        handler: Optional[RouteHandler] = self._handlers.get(name)
        if handler is not None:
            result = handler(query)
            if inspect.isawaitable(result):
                await result
