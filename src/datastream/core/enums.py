from __future__ import annotations

from enum import Enum


class StreamState(str, Enum):
    DRAINING = "DRAINING"
    EXHAUSTED = "EXHAUSTED"
    FAILED = "FAILED"
    CLOSED = "CLOSED"

    @property
    def is_terminal(self) -> bool:
        return self is not StreamState.DRAINING
