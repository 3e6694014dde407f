"""
Facility Domain - facility context.

A FacilityProvider publishes the current facility to everything that runs
inside its `with` block (thread- and task-local through contextvars).
Consumers read it with use_facility_context(), which raises
FacilityContextMissingException when no provider is active.

Code that already holds a Facility should pass it explicitly instead
(see domain.facility.formatting).
"""

from __future__ import annotations

import inspect
import logging
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Optional, Union

from domain.shared.exceptions import FacilityContextMissingException

from .mock import MOCK_FACILITY
from .value_objects import Facility

logger = logging.getLogger(__name__)

FacilityLoader = Callable[[], Union[Facility, Awaitable[Facility]]]


@dataclass(frozen=True)
class FacilityContextValue:
    facility: Facility
    is_loading: bool = False
    error: Optional[str] = None


_current_provider: ContextVar[Optional['FacilityProvider']] = ContextVar(
    'current_facility_provider', default=None
)


class FacilityProvider:
    """
    Context manager supplying a FacilityContextValue to its scope.

    Usage:
        with FacilityProvider(facility) as provider:
            use_facility_context() is provider.value  # True

    Providers nest; leaving an inner provider restores the outer one.
    """

    def __init__(self, facility: Facility = MOCK_FACILITY, error: Optional[str] = None):
        self._value = FacilityContextValue(facility=facility, error=error)
        self._tokens: list[Token] = []

    @property
    def value(self) -> FacilityContextValue:
        return self._value

    def __enter__(self) -> FacilityProvider:
        self._tokens.append(_current_provider.set(self))
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _current_provider.reset(self._tokens.pop())

    async def load(self, loader: FacilityLoader) -> FacilityContextValue:
        """
        Replace the facility with the loader's result.

        loading: is_loading=True, previous facility kept
        loaded:  new facility, error cleared
        error:   is_loading=False, error message set, previous facility kept
        """
        self._value = replace(self._value, is_loading=True, error=None)
        try:
            result = loader()
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.warning("Facility load failed: %s", exc)
            self._value = replace(self._value, is_loading=False, error=str(exc))
            return self._value

        self._value = FacilityContextValue(facility=result)
        logger.debug("Facility loaded: %s", result.id)
        return self._value


def use_facility_context() -> FacilityContextValue:
    """Current facility context; raises outside a FacilityProvider."""
    provider = _current_provider.get()
    if provider is None:
        raise FacilityContextMissingException()
    return provider.value


# Short alias used by views
use_facility = use_facility_context
