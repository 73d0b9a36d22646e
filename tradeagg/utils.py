"""Helpers for loading trades and running aggregators over whole data sets."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from os import PathLike
from typing import Union

from .aggregator import Aggregator
from .candle import ModularCandle
from .types import TakerTrade, Trade

_PathLike = Union[str, "PathLike[str]"]


def candle_volume_from_time_period(
    total_volume: float, total_time_days: float, target_time_minutes: float
) -> float:
    """Volume per candle that yields as many candles as a time aggregation would.

    For example, 10 days of 1 hour candles make 240 candles; with 9840 volume
    traded over those 10 days each volume candle should hold 41.
    """
    num_candles = total_time_days * 24.0 * (60.0 / target_time_minutes)
    return total_volume / num_candles


def aggregate_all_trades(
    trades: Iterable[TakerTrade], aggregator: Aggregator
) -> list[ModularCandle]:
    """Feed every trade to the aggregator and collect the finished candles."""
    candles: list[ModularCandle] = []
    for trade in trades:
        candle = aggregator.update(trade)
        if candle is not None:
            candles.append(candle)
    return candles


def load_trades_from_csv(filename: _PathLike) -> list[Trade]:
    """Load trades from a CSV file with a header row.

    The first three columns are timestamp (integer), price and size.
    Raises OSError when the file cannot be read, csv.Error on malformed
    CSV and ValueError when a row has the wrong shape or a field does not parse.
    """
    trades: list[Trade] = []
    with open(filename, newline="") as handle:
        reader = csv.reader(handle)
        header = next(reader, None)
        while header == []:
            header = next(reader, None)
        if header is None:
            return trades
        width = len(header)
        for row in reader:
            if not row:
                continue
            if len(row) != width:
                raise ValueError(
                    f"line {reader.line_num}: found record with {len(row)} fields, "
                    f"but the previous record has {width} fields"
                )
            if len(row) < 3:
                raise ValueError(
                    f"line {reader.line_num}: expected at least 3 fields, got {len(row)}"
                )
            trades.append(
                Trade(timestamp=int(row[0]), price=float(row[1]), size=float(row[2]))
            )
    return trades