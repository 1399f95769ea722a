from __future__ import annotations

from .core import DataStreamError, InvalidConfiguration, StreamState
from .ports.loader import AsyncPageLoader, PageLoader
from .services import (
    AsyncPaginatedSequence,
    PaginatedSequence,
    astream_from_settings,
    create,
    create_async,
    stream_from_settings,
)

__all__ = [
    "DataStreamError",
    "InvalidConfiguration",
    "StreamState",
    "PageLoader",
    "AsyncPageLoader",
    "PaginatedSequence",
    "AsyncPaginatedSequence",
    "create",
    "create_async",
    "stream_from_settings",
    "astream_from_settings",
]
