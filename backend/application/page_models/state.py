"""
Load state of a page model: idle -> loading -> loaded | error.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Set

from domain.shared.exceptions import InvalidOperationException


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


ALLOWED_TRANSITIONS: Dict[LoadState, Set[LoadState]] = {
    LoadState.IDLE: {LoadState.LOADING},
    LoadState.LOADING: {LoadState.LOADED, LoadState.ERROR},
    LoadState.LOADED: {LoadState.LOADING},
    LoadState.ERROR: {LoadState.LOADING},
}


class LoadStateMachine:
    """
    Holds the current LoadState and the error message of the last failure.
    
    The error is cleared when a new load starts.
    """

    def __init__(self) -> None:
        self.state = LoadState.IDLE
        self.error: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        return self.state is LoadState.LOADING

    def _move(self, target: LoadState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise InvalidOperationException(
                f"Cannot move from '{self.state.value}' to '{target.value}'",
                current_state=self.state.value,
            )
        self.state = target

    def start(self) -> None:
        self._move(LoadState.LOADING)
        self.error = None

    def succeed(self) -> None:
        self._move(LoadState.LOADED)

    def fail(self, message: str) -> None:
        self._move(LoadState.ERROR)
        self.error = message
