"""Async route

Same algorithm as route_sync(), but the source may be async, the action may
be a coroutine function, and its result may be an async iterable. The route
suspends while pulling from an async source and while awaiting the action
or elements of an async result; it never runs two actions at once."""

from __future__ import annotations

import inspect
import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import aclose_iterator, check_action, check_source, is_async_iterable
from .._types import Action, Source
from ..outcome import Absent, AsyncMany, Many, Single, classify

_DONE: typing.Final = object()


async def _pull(
    iterator: Iterator[typing.Any] | AsyncIterator[typing.Any],
    *,
    is_async: bool,
) -> typing.Any:
    if is_async:
        return await anext(typing.cast(AsyncIterator[typing.Any], iterator), _DONE)
    item = next(typing.cast(Iterator[typing.Any], iterator), _DONE)
    # sync sources may hold awaitables; resolve them like async items
    if inspect.isawaitable(item):
        return await item
    return item


def route[T, R](source: Source[T], action: Action[T, R]) -> AsyncIterator[R]:
    """
    Map, filter, split or merge the items of a sync or async iterable.

    The action result is awaited if awaitable, then:
    - iterable or async iterable: each element is yielded (one level)
    - None: nothing is yielded for that item
    - anything else: yielded as is

    Arguments are checked on the first step, before any item is pulled, so
    a bad argument surfaces as the failure of the first __anext__().

    Example:
        async def double(d):
            return {"a": 2 * d["a"]}

        async for item in route(rows, double):
            ...

    NOTE: Breaking out of `async for` only finalizes the route once it is
          closed; use contextlib.aclosing() to finalize the source promptly.
    """

    async def run() -> AsyncIterator[R]:
        check_source(source, allow_async=True)
        check_action(action)

        is_async = is_async_iterable(source)
        iterator: Iterator[T] | AsyncIterator[T] = (
            aiter(typing.cast(AsyncIterable[T], source))
            if is_async
            else iter(typing.cast(Iterable[T], source))
        )
        expansion: Iterator[R] | AsyncIterator[R] | None = None
        try:
            while (item := await _pull(iterator, is_async=is_async)) is not _DONE:
                match await classify(action(item)):
                    case AsyncMany(items):
                        expansion = aiter(items)
                        async for value in expansion:
                            yield value
                    case Many(items):
                        expansion = iter(items)
                        for value in expansion:
                            yield value
                    case Single(value):
                        yield value
                    case Absent():
                        pass
                expansion = None
        except GeneratorExit:
            if expansion is not None:
                await aclose_iterator(expansion)
            await aclose_iterator(iterator)
            raise

    return run()


def stage[T, R](action: Action[T, R]) -> Callable[[Source[T]], AsyncIterator[R]]:
    """Bind action now, supply the source later."""
    check_action(action)

    def apply(source: Source[T]) -> AsyncIterator[R]:
        return route(source, action)

    return apply


__all__ = ("route", "stage")
