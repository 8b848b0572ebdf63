"""Lifecycle states for asynchronously loaded data."""

from enum import Enum


class LoadState(str, Enum):
    """States of a question fetch."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (LoadState.LOADED, LoadState.NOT_FOUND, LoadState.FAILED)
