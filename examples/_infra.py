from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Trade:
    symbol: str
    quantity: int
    price: float


TRADES: tuple[Trade, ...] = (
    Trade("AAPL", 10, 190.0),
    Trade("MSFT", -5, 410.5),
    Trade("AAPL", 0, 191.2),
    Trade("NVDA", 3, 880.0),
    Trade("MSFT", 7, 409.9),
)


async def trade_feed(delay_seconds: float = 0.01) -> AsyncIterator[Trade]:
    """Pretend market feed: one trade per tick."""
    for trade in TRADES:
        await asyncio.sleep(delay_seconds)
        yield trade


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
