"""Collect combinators

Drain a route into a list and report the outcome as a kungfu Result instead
of raising. Bad arguments to collect itself are not captured: they are
programmer errors and raise before anything is pulled. Whatever fails during
the traversal, the action included, comes back as Error."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import check_action, check_source
from .._types import Action, Source, SyncAction
from ..routing import route, route_sync

logger = logging.getLogger(__name__)


def collect_sync[T, R](
    source: Iterable[T],
    action: SyncAction[T, R],
) -> Result[list[R], Exception]:
    """Run route_sync() to exhaustion. Ok(items) or Error(first exception)."""
    routed = route_sync(source, action)
    items: list[R] = []
    try:
        for item in routed:
            items.append(item)
    except Exception as exc:
        return Error(exc)
    logger.debug("collect_sync(): %d item(s)", len(items))
    return Ok(items)


def collect[T, R](
    source: Source[T],
    action: Action[T, R],
) -> LazyCoroResult[list[R], Exception]:
    """
    Run route() to exhaustion when awaited.

    Lazy: nothing is pulled until the result is awaited. Every await starts a
    fresh traversal, which only repeats the work for re-iterable sources.

    Example:
        result = await collect(rows, double)
        match result:
            case Ok(items): ...
            case Error(exc): ...
    """

    async def run() -> Result[list[R], Exception]:
        check_source(source, allow_async=True)
        check_action(action)
        items: list[R] = []
        try:
            async for item in route(source, action):
                items.append(item)
        except Exception as exc:
            return Error(exc)
        logger.debug("collect(): %d item(s)", len(items))
        return Ok(items)

    return LazyCoroResult(run)


__all__ = ("collect", "collect_sync")
