"""Synchronous route

Pull items from an iterable, call the action on each one and yield what it
hands back. Nothing suspends: every yield returns control to the caller."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import check_action, check_source, close_iterator
from .._types import SyncAction
from ..outcome import Absent, Many, Single, classify_sync


def route_sync[T, R](source: Iterable[T], action: SyncAction[T, R]) -> Iterator[R]:
    """
    Map, filter, split or merge the items of a sync iterable.

    - action returns an iterable: each element is yielded (one level)
    - action returns None: nothing is yielded for that item
    - otherwise: the returned value is yielded

    Arguments are checked here, before the first item is pulled. The returned
    generator is single-pass; call route_sync() again for another traversal.

    Example:
        def split(d):
            return [d, {"a": 2 * d["a"]}]

        list(route_sync([{"a": 1}], split))  # [{"a": 1}, {"a": 2}]
    """
    check_source(source, allow_async=False)
    check_action(action)

    def run() -> Iterator[R]:
        iterator = iter(source)
        try:
            for item in iterator:
                match classify_sync(action(item)):
                    case Many(items):
                        yield from items
                    case Single(value):
                        yield value
                    case Absent():
                        pass
        except GeneratorExit:
            close_iterator(iterator)
            raise

    return run()


def stage_sync[T, R](action: SyncAction[T, R]) -> Callable[[Iterable[T]], Iterator[R]]:
    """Bind action now, supply the source later."""
    check_action(action)

    def apply(source: Iterable[T]) -> Iterator[R]:
        return route_sync(source, action)

    return apply


__all__ = ("route_sync", "stage_sync")
