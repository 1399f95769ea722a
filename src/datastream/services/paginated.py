from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterator

from src.datastream.core import StreamState, validate_page_size
from src.datastream.ports.loader import Item, PageLoader
from src.datastream.services.logctx import ctx_prefix

logger = logging.getLogger("datastream")


class PaginatedSequence:
    """
    Lazy, forward-only stream of items pulled page by page from a loader.

    The cursor is (buffer, offset, page_size). Items are served from the
    buffer; when it is empty the loader is called with the current offset
    and the offset moves forward by a full page_size, whatever the length
    of the returned page. An empty page ends the stream.

    Nothing is fetched until the first pull.
    """

    def __init__(self, source: Any, loader: PageLoader, page_size: int) -> None:
        self._page_size = validate_page_size(page_size)
        self._source = source
        self._loader = loader

        self._buffer: deque[Item] = deque()
        self._offset = 0
        self._state = StreamState.DRAINING

        self._pages_fetched = 0
        self._items_emitted = 0

    # --- introspection ---

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

    # --- iteration ---

    def __iter__(self) -> Iterator[Item]:
        return self

    def __next__(self) -> Item:
        if self._state.is_terminal:
            raise StopIteration

        if not self._buffer and not self._load_page():
            raise StopIteration

        self._items_emitted += 1
        return self._buffer.popleft()

    def _load_page(self) -> bool:
        ctx_str = ctx_prefix(source=self._source, page_size=self._page_size)
        logger.debug("%s fetch offset=%d limit=%d", ctx_str, self._offset, self._page_size)

        try:
            page = self._loader.load(self._source, self._offset, self._page_size)
        except Exception:
            # offset stays where it was, the error goes to the caller as is
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

    # --- finalization ---

    def close(self) -> None:
        """Остановить поток досрочно. Внешних ресурсов нет, освобождать нечего."""
        if self._state is StreamState.DRAINING:
            self._state = StreamState.CLOSED
        self._buffer.clear()

    def __enter__(self) -> PaginatedSequence:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self._source!r}, "
            f"page_size={self._page_size}, offset={self._offset}, "
            f"state={self._state.value})"
        )


def create(source: Any, loader: PageLoader, page_size: int) -> PaginatedSequence:
    return PaginatedSequence(source, loader, page_size)
