"""Candle components that track trade prices."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

from ..types import TakerTrade
from .base import CandleComponent

_F64_MAX = sys.float_info.max


@dataclass
class Open(CandleComponent):
    """Opening price of a candle: the price of its first trade."""

    price: float = 0.0
    awaiting_first: bool = True

    def value(self) -> float:
        """The open price."""
        return self.price

    def reset(self) -> None:
        """Take the price of the next trade as the new open."""
        self.awaiting_first = True

    def update(self, trade: TakerTrade) -> None:
        """Record the price only if this is the first trade of the candle."""
        if self.awaiting_first:
            self.price = trade.price
            self.awaiting_first = False


@dataclass
class High(CandleComponent):
    """Highest trade price seen in a candle."""

    # A fresh component starts at zero; after a reset it starts at the lowest float.
    high: float = 0.0

    def value(self) -> float:
        """The high price."""
        return self.high

    def reset(self) -> None:
        """Start again from the lowest finite float."""
        self.high = -_F64_MAX

    def update(self, trade: TakerTrade) -> None:
        """Raise the high if the trade price exceeds it."""
        if trade.price > self.high:
            self.high = trade.price


@dataclass
class Low(CandleComponent):
    """Lowest trade price seen in a candle."""

    low: float = _F64_MAX

    def value(self) -> float:
        """The low price."""
        return self.low

    def reset(self) -> None:
        """Start again from the highest finite float."""
        self.low = _F64_MAX

    def update(self, trade: TakerTrade) -> None:
        """Lower the low if the trade price is below it."""
        if trade.price < self.low:
            self.low = trade.price


@dataclass
class Close(CandleComponent):
    """Closing price of a candle: the price of its latest trade."""

    price: float = 0.0

    def value(self) -> float:
        """The close price."""
        return self.price

    def reset(self) -> None:
        """Keep the last price; the next trade overwrites it."""

    def update(self, trade: TakerTrade) -> None:
        """Take the trade price as the close."""
        self.price = trade.price


@dataclass
class AveragePrice(CandleComponent):
    """Arithmetic mean of trade prices."""

    num_trades: float = 0.0
    price_sum: float = 0.0

    def value(self) -> float:
        """Mean price; NaN when no trades were seen."""
        if self.num_trades == 0:
            return math.nan
        return self.price_sum / self.num_trades

    def reset(self) -> None:
        """Forget all prices."""
        self.num_trades = 0.0
        self.price_sum = 0.0

    def update(self, trade: TakerTrade) -> None:
        """Add the trade price to the mean."""
        self.num_trades += 1.0
        self.price_sum += trade.price


@dataclass
class MedianPrice(CandleComponent):
    """Median of trade prices; the upper middle value for an even count."""

    prices: list[float] = field(default_factory=list)

    def value(self) -> float:
        """The median price.

        Raises ValueError when no trades were seen.
        """
        if not self.prices:
            raise ValueError("median of an empty candle is undefined")
        ordered = sorted(self.prices)
        return ordered[len(ordered) // 2]

    def reset(self) -> None:
        """Forget all prices."""
        self.prices.clear()

    def update(self, trade: TakerTrade) -> None:
        """Record the trade price."""
        self.prices.append(trade.price)


@dataclass
class WeightedPrice(CandleComponent):
    """Volume weighted average price."""

    total_weights: float = 0.0
    weighted_sum: float = 0.0

    def value(self) -> float:
        """Volume weighted price; NaN when no volume was seen."""
        if self.total_weights == 0:
            return math.nan
        return self.weighted_sum / self.total_weights

    def reset(self) -> None:
        """Forget all trades."""
        self.total_weights = 0.0
        self.weighted_sum = 0.0

    def update(self, trade: TakerTrade) -> None:
        """Weight the trade price by the absolute trade size."""
        weight = abs(trade.size)
        self.total_weights += weight
        self.weighted_sum += trade.price * weight