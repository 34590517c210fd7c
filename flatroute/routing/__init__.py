from .aio import route, stage
from .sync import route_sync, stage_sync

__all__ = (
    # Async (primary)
    "route",
    "stage",
    # Sync
    "route_sync",
    "stage_sync",
)
