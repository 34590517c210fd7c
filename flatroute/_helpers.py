"""Internal helpers for flatroute.

Capability probes and argument checks shared by route() and route_sync().
These are not part of the routing algorithm but are exported for callers
who want the same checks in their own stages."""

from __future__ import annotations

import inspect
import numbers
import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from ._errors import InvalidArgumentError


# Capability probes
def is_iterable(value: object) -> typing.TypeGuard[Iterable[typing.Any]]:
    """True when value supports synchronous iteration (defines __iter__)."""
    return isinstance(value, Iterable)


def is_async_iterable(value: object) -> typing.TypeGuard[AsyncIterable[typing.Any]]:
    """True when value supports asynchronous iteration (defines __aiter__)."""
    return isinstance(value, AsyncIterable)


def describe_type(value: object) -> str:
    """
    Name the kind of value for argument error messages.

    Only the documented categories are produced:
    "null", "boolean", "number", "string", "object".
    """
    if value is None:
        return "null"
    # bool before Number: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


# Argument checks
def check_source(source: object, *, allow_async: bool) -> None:
    """Raise InvalidArgumentError unless source can be iterated."""
    if is_iterable(source):
        return
    if allow_async and is_async_iterable(source):
        return
    raise InvalidArgumentError.source(allow_async=allow_async)


def check_action(action: object) -> None:
    """Raise InvalidArgumentError unless action is callable."""
    if not callable(action):
        raise InvalidArgumentError.action(describe_type(action))


# Finalization
def close_iterator(iterator: Iterator[typing.Any]) -> None:
    """Call close() on iterators that have one (generators and friends)."""
    close = getattr(iterator, "close", None)
    if callable(close):
        close()


async def aclose_iterator(iterator: Iterator[typing.Any] | AsyncIterator[typing.Any]) -> None:
    """Finalize a sync or async iterator, awaiting aclose() when present."""
    aclose = getattr(iterator, "aclose", None)
    if callable(aclose):
        result = aclose()
        if inspect.isawaitable(result):
            await result
        return
    close_iterator(typing.cast(Iterator[typing.Any], iterator))


__all__ = (
    # Probes
    "is_iterable",
    "is_async_iterable",
    "describe_type",
    # Checks
    "check_source",
    "check_action",
    # Finalization
    "close_iterator",
    "aclose_iterator",
)
