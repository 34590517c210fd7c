"""
Outcome classification
======================

An action may hand back a single value, a sequence of values, an async
sequence of values, or nothing. Each result is inspected once and tagged
with exactly one of Single, Many, AsyncMany or Absent. Flattening is one
level only: the elements of a Many are never inspected again.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import AsyncIterable, Iterable, Mapping
from dataclasses import dataclass

from ._helpers import is_async_iterable, is_iterable

# Iterable in Python (keys), but a record: routed as one item
ATOMIC_TYPES: tuple[type, ...] = (Mapping,)


@dataclass(frozen=True, slots=True)
class Single[R]:
    """Result is one output item."""

    value: R


@dataclass(frozen=True, slots=True)
class Many[R]:
    """Result is an iterable whose elements are output items."""

    items: Iterable[R]


@dataclass(frozen=True, slots=True)
class AsyncMany[R]:
    """Result is an async iterable whose elements are output items."""

    items: AsyncIterable[R]


@dataclass(frozen=True, slots=True)
class Absent:
    """Result is None: the input item produces no output."""


type Outcome[R] = Single[R] | Many[R] | AsyncMany[R] | Absent


def is_atomic(value: object) -> bool:
    return isinstance(value, ATOMIC_TYPES)


def classify_sync[R](value: typing.Any) -> Single[R] | Many[R] | Absent:
    """
    Classify an action result for route_sync().

    Async iterables are not expanded here; they come out as Single like any
    other non-iterable value.
    """
    if value is None:
        return Absent()
    if is_iterable(value) and not is_atomic(value):
        return Many(value)
    return Single(value)


async def classify[R](value: typing.Any) -> Outcome[R]:
    """
    Resolve and classify an action result for route().

    Awaitables are awaited once before classification; an awaitable that
    resolves to another awaitable is a Single.
    """
    if inspect.isawaitable(value):
        value = await value
    if value is None:
        return Absent()
    if is_atomic(value):
        return Single(value)
    if is_async_iterable(value):
        return AsyncMany(value)
    if is_iterable(value):
        return Many(value)
    return Single(value)


__all__ = (
    "ATOMIC_TYPES",
    "Single",
    "Many",
    "AsyncMany",
    "Absent",
    "Outcome",
    "is_atomic",
    "classify",
    "classify_sync",
)
