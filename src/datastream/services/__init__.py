from .paginated import PaginatedSequence, create
from .paginated_async import AsyncPaginatedSequence, create_async
from .factory import stream_from_settings, astream_from_settings

__all__ = [
    "PaginatedSequence",
    "create",
    "AsyncPaginatedSequence",
    "create_async",
    "stream_from_settings",
    "astream_from_settings",
]
