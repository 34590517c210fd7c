"""
flatroute: map, filter, split and merge items of sync and async iterables.

One primitive, two variants:
- route()      - async generator over a sync or async source (primary)
- route_sync() - generator over a sync source

The action decides per item: return a value to emit it, an iterable to emit
each element, or None to emit nothing.
"""

import logging

# Core types
from ._types import Action, Emission, Source, SyncAction, SyncEmission

# Capability probes (for custom stages)
from ._helpers import describe_type, is_async_iterable, is_iterable

# Outcome classification
from .outcome import (
    ATOMIC_TYPES,
    Absent,
    AsyncMany,
    Many,
    Outcome,
    Single,
    classify,
    classify_sync,
)

# Routes
from .routing import route, route_sync, stage, stage_sync

# Collection (kungfu Result bridge)
from .collection import collect, collect_sync

# Errors
from ._errors import InvalidArgumentError

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Primary binding
default = route

__all__ = (
    # Types
    "Action",
    "Emission",
    "Source",
    "SyncAction",
    "SyncEmission",
    # Probes
    "describe_type",
    "is_async_iterable",
    "is_iterable",
    # Outcomes
    "ATOMIC_TYPES",
    "Absent",
    "AsyncMany",
    "Many",
    "Outcome",
    "Single",
    "classify",
    "classify_sync",
    # Routes
    "default",
    "route",
    "route_sync",
    "stage",
    "stage_sync",
    # Collection
    "collect",
    "collect_sync",
    # Errors
    "InvalidArgumentError",
)
