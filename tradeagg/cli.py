"""Command line tool that aggregates trades from a CSV file into OHLC candles."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .aggregator import GenericAggregator
from .candle import candle_factory
from .components.price import Close, High, Low, Open
from .rules import TimeRule
from .types import M1, TimestampResolution, Trade
from .utils import aggregate_all_trades, load_trades_from_csv

_DEFAULT_CSV = "data/Bitmex_XBTUSD_1M.csv"


class _Side(Enum):
    BID = "bid"
    ASK = "ask"


@dataclass(frozen=True)
class _Tick:
    """A trade with an unsigned quantity and an explicit side."""

    date_stamp: int
    trade_price: float
    quantity: int
    side: _Side

    @property
    def timestamp(self) -> int:
        return self.date_stamp

    @property
    def price(self) -> float:
        return self.trade_price

    @property
    def size(self) -> float:
        return -float(self.quantity) if self.side is _Side.BID else float(self.quantity)

    def timestamp_resolution(self) -> TimestampResolution:
        return TimestampResolution.MILLISECOND

    @classmethod
    def from_trade(cls, trade: Trade) -> _Tick:
        side = _Side.ASK if trade.size > 0.0 else _Side.BID
        magnitude = abs(trade.size)
        quantity = int(magnitude) if math.isfinite(magnitude) else 0
        return cls(trade.timestamp, trade.price, quantity, side)


def _fmt(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tradeagg",
        description="Aggregate trades from a CSV file into time based OHLC candles.",
    )
    parser.add_argument(
        "csv_file",
        nargs="?",
        default=_DEFAULT_CSV,
        help="CSV file with timestamp, price and size columns",
    )
    parser.add_argument(
        "--period", type=int, default=M1, help="candle period in seconds (default: 60)"
    )
    parser.add_argument(
        "--resolution",
        choices=[r.name.lower() for r in TimestampResolution],
        default="millisecond",
        help="unit of the trade timestamps (default: millisecond)",
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="print every candle as it is created",
    )
    parser.add_argument(
        "--ticks",
        action="store_true",
        help="feed the trades as ticks with an unsigned quantity and a side",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit code."""
    args = _parse_args(argv)
    try:
        trades = load_trades_from_csv(args.csv_file)
    except (OSError, ValueError) as exc:
        print(f"Could not load trades from file: {exc}", file=sys.stderr)
        return 1

    inputs = [_Tick.from_trade(t) for t in trades] if args.ticks else trades
    resolution = TimestampResolution[args.resolution.upper()]
    factory = candle_factory(open=Open, high=High, low=Low, close=Close)
    aggregator = GenericAggregator(factory, TimeRule(args.period, resolution), False)

    if args.stream:
        for trade in inputs:
            candle = aggregator.update(trade)
            if candle is not None:
                print(
                    f"candle created with open: {_fmt(candle.open)}, "
                    f"high: {_fmt(candle.high)}, low: {_fmt(candle.low)}, "
                    f"close: {_fmt(candle.close)}"
                )
    else:
        candles = aggregate_all_trades(inputs, aggregator)
        print(f"got {len(candles)} candles")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())