from __future__ import annotations

import inspect
import logging
from collections import deque
from typing import Any, AsyncIterator

from src.datastream.core import StreamState, validate_page_size
from src.datastream.ports.loader import AsyncPageLoader, Item, PageLoader
from src.datastream.services.logctx import ctx_prefix

logger = logging.getLogger("datastream")


class AsyncPaginatedSequence:
    """
    Async counterpart of PaginatedSequence.

    loader.load can be sync or async: an awaitable result is awaited.
    One pull = one buffer pop or one loader call, no prefetch.
    """

    def __init__(
        self,
        source: Any,
        loader: AsyncPageLoader | PageLoader,
        page_size: int,
    ) -> None:
        self._page_size = validate_page_size(page_size)
        self._source = source
        self._loader = loader

        self._buffer: deque[Item] = deque()
        self._offset = 0
        self._state = StreamState.DRAINING

        self._pages_fetched = 0
        self._items_emitted = 0

    @property
    def source(self) -> Any:
        return self._source

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def buffered(self) -> int:
        return len(self._buffer)

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def items_emitted(self) -> int:
        return self._items_emitted

    def __aiter__(self) -> AsyncIterator[Item]:
        return self

    async def __anext__(self) -> Item:
        if self._state.is_terminal:
            raise StopAsyncIteration

        if not self._buffer and not await self._load_page():
            raise StopAsyncIteration

        self._items_emitted += 1
        return self._buffer.popleft()

    async def _load_page(self) -> bool:
        ctx_str = ctx_prefix(source=self._source, page_size=self._page_size)
        logger.debug("%s fetch offset=%d limit=%d", ctx_str, self._offset, self._page_size)

        try:
            page = self._loader.load(self._source, self._offset, self._page_size)
            if inspect.isawaitable(page):
                page = await page
        except Exception:
            self._state = StreamState.FAILED
            raise

        items = list(page or ())
        logger.debug("%s fetched items=%d", ctx_str, len(items))

        if not items:
            self._state = StreamState.EXHAUSTED
            logger.info(
                "%s exhausted offset=%d pages=%d items=%d",
                ctx_str,
                self._offset,
                self._pages_fetched,
                self._items_emitted,
            )
            return False

        self._buffer.extend(items)
        self._offset += self._page_size
        self._pages_fetched += 1
        return True

    async def aclose(self) -> None:
        if self._state is StreamState.DRAINING:
            self._state = StreamState.CLOSED
        self._buffer.clear()

    async def __aenter__(self) -> AsyncPaginatedSequence:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self._source!r}, "
            f"page_size={self._page_size}, offset={self._offset}, "
            f"state={self._state.value})"
        )


def create_async(
    source: Any,
    loader: AsyncPageLoader | PageLoader,
    page_size: int,
) -> AsyncPaginatedSequence:
    return AsyncPaginatedSequence(source, loader, page_size)
