from .collect import collect, collect_sync

__all__ = (
    "collect",
    "collect_sync",
)
