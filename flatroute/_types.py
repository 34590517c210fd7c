"""
Core type definitions for flatroute.

Aliases shared by the sync and async routes.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Awaitable, Callable, Iterable

# ============================================================================
# Sources
# ============================================================================

# Source = anything route() can pull items from
type Source[T] = Iterable[T] | AsyncIterable[T]

# ============================================================================
# Actions
# ============================================================================

# Emission = what an action may hand back for one item
# NOTE: None is the absent value ("no output for this item").
type Emission[R] = R | Iterable[R] | AsyncIterable[R] | None

# SyncEmission = Emission without the async branch
type SyncEmission[R] = R | Iterable[R] | None

# Action = per-item callable accepted by route(), may be a coroutine function
type Action[T, R] = Callable[[T], Emission[R] | Awaitable[Emission[R]]]

# SyncAction = per-item callable accepted by route_sync()
type SyncAction[T, R] = Callable[[T], SyncEmission[R]]

__all__ = (
    "Source",
    "Emission",
    "SyncEmission",
    "Action",
    "SyncAction",
)
