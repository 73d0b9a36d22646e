"""Rules that decide when a candle is finished."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .candle import ModularCandle
from .types import By, InvalidParamError, TakerTrade, TimestampResolution


def _truncating_rem(numerator: int, denominator: int) -> int:
    """Remainder whose sign follows the numerator."""
    remainder = abs(numerator) % abs(denominator)
    return -remainder if numerator < 0 else remainder


class AggregationRule(ABC):
    """Decides when one aggregation period is over."""

    @abstractmethod
    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool:
        """Return True when the candle is finished and a new one should start.

        ``trade`` is the newest trade; ``candle`` is the candle built so far.
        """


class TimeRule(AggregationRule):
    """Start a new candle every ``period_s`` seconds.

    The period is measured from the first trade of each candle.
    """

    def __init__(self, period_s: int, ts_res: TimestampResolution) -> None:
        self._awaiting_reference = True
        self._reference_timestamp = 0
        self._period = period_s * ts_res.per_second()

    def __repr__(self) -> str:
        return f"TimeRule(period={self._period}, reference={self._reference_timestamp})"

    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool:
        """Trigger once more than one period has passed since the reference trade."""
        if self._awaiting_reference:
            self._reference_timestamp = trade.timestamp
            self._awaiting_reference = False
        triggered = trade.timestamp - self._reference_timestamp > self._period
        if triggered:
            self._awaiting_reference = True
        return triggered


class AlignedTimeRule(AggregationRule):
    """Start a new candle every ``period_s`` seconds, aligned to multiples of the period.

    If the first trade arrives at 1:32 on 5 minute candles, the first candle
    covers only the 3 minutes from 1:32, as if it had started at 1:30.
    """

    def __init__(self, period_s: int, ts_res: TimestampResolution) -> None:
        self._reference_timestamp = 0
        self._period = period_s * ts_res.per_second()

    def __repr__(self) -> str:
        return f"AlignedTimeRule(period={self._period}, reference={self._reference_timestamp})"

    def aligned_timestamp(self, timestamp: int) -> int:
        """The start of the period that ``timestamp`` falls in."""
        return timestamp - _truncating_rem(timestamp, self._period)

    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool:
        """Trigger once the trade lies a full period past the aligned reference."""
        if self._reference_timestamp == 0:
            self._reference_timestamp = self.aligned_timestamp(trade.timestamp)
            return False
        triggered = trade.timestamp - self._reference_timestamp >= self._period
        if triggered:
            self._reference_timestamp = self.aligned_timestamp(trade.timestamp)
        return triggered


class TickRule(AggregationRule):
    """Start a new candle every ``n_ticks`` trades."""

    def __init__(self, n_ticks: int) -> None:
        self._restart = True
        self._tick_counter = 0
        self._n_ticks = n_ticks

    def __repr__(self) -> str:
        return f"TickRule(n_ticks={self._n_ticks}, counter={self._tick_counter})"

    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool:
        """Trigger on every ``n_ticks``-th trade."""
        if self._restart:
            self._tick_counter = 0
            self._restart = False
        self._tick_counter += 1
        if self._tick_counter >= self._n_ticks:
            self._restart = True
            return True
        return False


class VolumeRule(AggregationRule):
    """Start a new candle once more than ``threshold_vol`` volume has traded.

    Raises InvalidParamError if the threshold is not positive.
    """

    def __init__(self, threshold_vol: float, by: By) -> None:
        if not threshold_vol > 0.0:
            raise InvalidParamError()
        self._restart = True
        self._by = by
        self._cum_vol = 0.0
        self._threshold_vol = threshold_vol

    def __repr__(self) -> str:
        return (
            f"VolumeRule(threshold={self._threshold_vol}, by={self._by}, "
            f"cumulative={self._cum_vol})"
        )

    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool:
        """Trigger when the cumulative volume exceeds the threshold."""
        if self._restart:
            self._cum_vol = 0.0
            self._restart = False
        if self._by is By.QUOTE:
            self._cum_vol += abs(trade.size)
        else:
            self._cum_vol += abs(trade.size) / trade.price
        triggered = self._cum_vol > self._threshold_vol
        if triggered:
            self._restart = True
        return triggered


class RelativePriceRule(AggregationRule):
    """Start a new candle once the price has moved by a relative amount.

    The move is ``|p_t - p_i| / p_i`` where ``p_i`` is the reference price.
    Raises InvalidParamError if the threshold is not positive.
    """

    def __init__(self, threshold_fraction: float) -> None:
        if not threshold_fraction > 0.0:
            raise InvalidParamError()
        self._awaiting_reference = True
        self._init_price = 0.0
        self._threshold_fraction = threshold_fraction

    def __repr__(self) -> str:
        return (
            f"RelativePriceRule(threshold={self._threshold_fraction}, "
            f"reference={self._init_price})"
        )

    def _relative_move(self, price: float) -> float:
        delta = abs(price - self._init_price)
        if self._init_price == 0.0:
            return math.nan if delta == 0.0 else math.inf
        return delta / abs(self._init_price) if self._init_price < 0 else delta / self._init_price

    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool:
        """Trigger when the price moved at least the threshold from the reference."""
        if self._awaiting_reference:
            self._awaiting_reference = False
            self._init_price = trade.price
            return False
        if self._relative_move(trade.price) >= self._threshold_fraction:
            self._init_price = trade.price
            return True
        return False