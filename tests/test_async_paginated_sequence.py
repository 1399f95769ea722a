from unittest.mock import AsyncMock, Mock, call

import pytest

from src.datastream import InvalidConfiguration, StreamState, create_async


def make_async_loader(pages: dict[int, list]) -> Mock:
    loader = Mock()

    async def _load(source, offset, limit):
        return list(pages.get(offset, []))

    loader.load = AsyncMock(side_effect=_load)
    return loader


async def collect(seq) -> list:
    return [item async for item in seq]


@pytest.mark.asyncio
async def test_async_emits_pages_in_order():
    loader = make_async_loader({0: ["a", "b"], 2: ["c"]})

    seq = create_async("films", loader, 2)

    assert await collect(seq) == ["a", "b", "c"]
    assert loader.load.await_args_list == [
        call("films", 0, 2),
        call("films", 2, 2),
        call("films", 4, 2),
    ]
    assert seq.state is StreamState.EXHAUSTED


@pytest.mark.asyncio
async def test_async_accepts_sync_loader():
    loader = Mock()
    loader.load.side_effect = [[1, 2], [3], []]

    seq = create_async("films", loader, 2)

    assert await collect(seq) == [1, 2, 3]
    offsets = [c.args[1] for c in loader.load.call_args_list]
    assert offsets == [0, 2, 4]


@pytest.mark.asyncio
async def test_async_empty_source_single_load():
    loader = make_async_loader({})

    seq = create_async("films", loader, 5)

    with pytest.raises(StopAsyncIteration):
        await seq.__anext__()
    loader.load.assert_awaited_once_with("films", 0, 5)

    with pytest.raises(StopAsyncIteration):
        await seq.__anext__()
    loader.load.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_lazy_until_first_pull():
    loader = make_async_loader({0: [1]})

    seq = create_async("films", loader, 3)

    loader.load.assert_not_awaited()
    assert await seq.__anext__() == 1
    loader.load.assert_awaited_once()


@pytest.mark.asyncio
async def test_async_failure_propagates():
    class Boom(Exception):
        pass

    loader = Mock()
    loader.load = AsyncMock(side_effect=[["a"], Boom("es timeout")])

    seq = create_async("films", loader, 1)
    assert await seq.__anext__() == "a"

    with pytest.raises(Boom):
        await seq.__anext__()

    assert seq.offset == 1
    assert seq.state is StreamState.FAILED
    assert await collect(seq) == []
    assert loader.load.await_count == 2


@pytest.mark.asyncio
async def test_async_context_manager_closes():
    loader = make_async_loader({0: [1, 2], 2: [3]})

    async with create_async("films", loader, 2) as seq:
        assert await seq.__anext__() == 1

    assert seq.state is StreamState.CLOSED
    assert await collect(seq) == []
    loader.load.assert_awaited_once()


def test_async_invalid_page_size():
    with pytest.raises(InvalidConfiguration):
        create_async("films", make_async_loader({}), 0)
