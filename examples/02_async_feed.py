from __future__ import annotations

import asyncio
import contextlib

from _infra import Trade, banner, run, trade_feed

from flatroute import collect, route
from kungfu import Error, Ok


class NetPosition:
    """Emit a symbol's net position each time it trades twice."""

    def __init__(self) -> None:
        self.pending: dict[str, int] = {}

    def __call__(self, trade: Trade) -> list[tuple[str, int]] | None:
        if trade.symbol not in self.pending:
            self.pending[trade.symbol] = trade.quantity
            return None
        # a bare tuple would be flattened
        return [(trade.symbol, self.pending.pop(trade.symbol) + trade.quantity)]


async def enrich(trade: Trade) -> dict[str, object]:
    await asyncio.sleep(0.01)  # lookup
    return {"symbol": trade.symbol, "venue": "XNAS", "quantity": trade.quantity}


async def main() -> None:
    banner("02_async_feed: async source + stateful merge + early stop")

    async for symbol, net in route(trade_feed(), NetPosition()):
        print(f"{symbol}: net {net}")

    async with contextlib.aclosing(route(trade_feed(), enrich)) as enriched:
        async for row in enriched:
            print(row)
            break

    match await collect(trade_feed(), lambda t: [t.symbol])():
        case Ok(symbols):
            print(f"symbols: {symbols}")
        case Error(exc):
            print(f"error: {exc!r}")


if __name__ == "__main__":
    run(main)
