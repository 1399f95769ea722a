from __future__ import annotations

from typing import Any

from src.config import Settings, get_settings
from src.datastream.ports.loader import AsyncPageLoader, PageLoader
from src.datastream.services.paginated import PaginatedSequence
from src.datastream.services.paginated_async import AsyncPaginatedSequence


def stream_from_settings(
    source: Any,
    loader: PageLoader,
    settings: Settings | None = None,
) -> PaginatedSequence:
    """Собрать поток с page_size из настроек (BULK_PAGE_SIZE)."""
    settings = settings or get_settings()
    return PaginatedSequence(source, loader, settings.bulk_page_size)


def astream_from_settings(
    source: Any,
    loader: AsyncPageLoader | PageLoader,
    settings: Settings | None = None,
) -> AsyncPaginatedSequence:
    settings = settings or get_settings()
    return AsyncPaginatedSequence(source, loader, settings.bulk_page_size)
