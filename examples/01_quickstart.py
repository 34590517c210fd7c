from __future__ import annotations

from _infra import TRADES, Trade, banner, run

from flatroute import route_sync


def notional(trade: Trade) -> float | None:
    # Zero-quantity fills carry no notional: drop them.
    if trade.quantity == 0:
        return None
    return abs(trade.quantity) * trade.price


def legs(trade: Trade) -> list[str]:
    side = "buy" if trade.quantity > 0 else "sell"
    return [f"{side} {trade.symbol}", f"settle {trade.symbol}"]


async def main() -> None:
    banner("01_quickstart: map + filter + split")

    for value in route_sync(TRADES, notional):
        print(f"notional {value:,.2f}")

    for leg in route_sync(TRADES[:2], legs):
        print(leg)


if __name__ == "__main__":
    run(main)
