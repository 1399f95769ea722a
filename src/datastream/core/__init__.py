from __future__ import annotations

from .enums import StreamState
from .exceptions import DataStreamError, InvalidConfiguration, validate_page_size

__all__ = [
    "StreamState",
    "DataStreamError",
    "InvalidConfiguration",
    "validate_page_size",
]
