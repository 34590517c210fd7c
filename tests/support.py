"""Rows and actions shared by the route tests."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import AsyncIterator, Iterator

type Row = dict[str, int]


def make_rows(n: int) -> list[Row]:
    return [{"a": i} for i in range(n)]


def double(d: Row) -> Row:
    return {"a": 2 * d["a"]}


def keep_even(d: Row) -> Row | None:
    if d["a"] % 2 == 0:
        return d
    return None


def duplicate(d: Row) -> list[Row]:
    return [{"a": d["a"]}, {"a": 2 * d["a"]}]


class PairSummer:
    """Hold every other row, emit the sum on its partner."""

    def __init__(self) -> None:
        self.held: int | None = None

    def __call__(self, d: Row) -> Row | None:
        if self.held is None:
            self.held = d["a"]
            return None
        result = {"a": d["a"] + self.held}
        self.held = None
        return result


def gen_rows(rows: list[Row]) -> Iterator[Row]:
    yield from rows


async def agen_rows(rows: list[Row]) -> AsyncIterator[Row]:
    for row in rows:
        yield row


class QueueSource[T]:
    """Async-only source fed by a producer task through an asyncio.Queue."""

    _END = object()

    def __init__(self, items: list[T]) -> None:
        self._items = items
        self._queue: asyncio.Queue[object] = asyncio.Queue(maxsize=1)
        self._producer: asyncio.Task[None] | None = None

    async def _produce(self) -> None:
        for item in self._items:
            await self._queue.put(item)
        await self._queue.put(self._END)

    def __aiter__(self) -> QueueSource[T]:
        if self._producer is None:
            self._producer = asyncio.create_task(self._produce())
        return self

    async def __anext__(self) -> T:
        item = await self._queue.get()
        if item is self._END:
            raise StopAsyncIteration
        return typing.cast(T, item)
