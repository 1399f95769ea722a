from __future__ import annotations

from typing import Any, Protocol, Sequence


Item = Any


class PageLoader(Protocol):
    """Loader возвращает одну страницу элементов источника."""

    def load(self, source: Any, offset: int, limit: int) -> Sequence[Item]:
        """Вернуть до limit элементов начиная с offset (пустой список = данных больше нет)."""
        ...


class AsyncPageLoader(Protocol):
    async def load(self, source: Any, offset: int, limit: int) -> Sequence[Item]:
        ...
