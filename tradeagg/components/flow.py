"""Candle components that track volume, trade counts and trade direction."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from ..types import TakerTrade
from ..welford import WelfordOnline
from .base import CandleComponent


@dataclass
class Volume(CandleComponent):
    """Cumulative absolute volume of trades."""

    volume: float = 0.0

    def value(self) -> float:
        """Total volume."""
        return self.volume

    def reset(self) -> None:
        """Set the volume back to zero."""
        self.volume = 0.0

    def update(self, trade: TakerTrade) -> None:
        """Add the absolute trade size."""
        self.volume += abs(trade.size)


@dataclass
class VolumeBuys(CandleComponent):
    """Cumulative volume of buy trades (sizes with a positive sign)."""

    buy_volume: float = 0.0

    def value(self) -> float:
        """Total buy volume."""
        return self.buy_volume

    def reset(self) -> None:
        """Set the buy volume back to zero."""
        self.buy_volume = 0.0

    def update(self, trade: TakerTrade) -> None:
        """Add the trade size if it carries a positive sign."""
        if math.copysign(1.0, trade.size) > 0:
            self.buy_volume += abs(trade.size)


@dataclass
class VolumeSells(CandleComponent):
    """Cumulative volume of sell trades (sizes with a negative sign)."""

    sell_volume: float = 0.0

    def value(self) -> float:
        """Total sell volume."""
        return self.sell_volume

    def reset(self) -> None:
        """Set the sell volume back to zero."""
        self.sell_volume = 0.0

    def update(self, trade: TakerTrade) -> None:
        """Add the absolute trade size if it carries a negative sign."""
        if math.copysign(1.0, trade.size) < 0:
            self.sell_volume += abs(trade.size)


@dataclass
class NumTrades(CandleComponent):
    """Number of trades in a candle."""

    count: int = 0

    def value(self) -> int:
        """Trade count."""
        return self.count

    def reset(self) -> None:
        """Set the count back to zero."""
        self.count = 0

    def update(self, trade: TakerTrade) -> None:
        """Count one more trade."""
        self.count += 1


@dataclass
class DirectionalTradeRatio(CandleComponent):
    """Ratio of buy trades to all trades."""

    num_buys: int = 0
    num_trades: int = 0

    def value(self) -> float:
        """Fraction of trades that were buys; NaN when no trades were seen."""
        if self.num_trades == 0:
            return math.nan
        return self.num_buys / self.num_trades

    def reset(self) -> None:
        """Forget all trades."""
        self.num_buys = 0
        self.num_trades = 0

    def update(self, trade: TakerTrade) -> None:
        """Count the trade, and count it as a buy if its size is positive."""
        self.num_trades += 1
        if trade.size > 0:
            self.num_buys += 1


@dataclass
class DirectionalVolumeRatio(CandleComponent):
    """Ratio of buy volume to total volume."""

    volume: float = 0.0
    buy_volume: float = 0.0

    def value(self) -> float:
        """Fraction of volume that was bought; NaN when no volume was seen."""
        if self.volume == 0:
            return math.nan
        return self.buy_volume / self.volume

    def reset(self) -> None:
        """Forget all volume."""
        self.volume = 0.0
        self.buy_volume = 0.0

    def update(self, trade: TakerTrade) -> None:
        """Add the trade to total volume, and to buy volume if it is a buy."""
        self.volume += abs(trade.size)
        if trade.size > 0:
            self.buy_volume += trade.size


@dataclass
class Entropy(CandleComponent):
    """Binary entropy, in bits, of whether a trade is a buy or a sell."""

    buys: int = 0
    total_observed_trades: int = 0

    def value(self) -> float:
        """Entropy of the buy/sell split; zero when it is undefined or certain."""
        if self.total_observed_trades == 0 or self.buys in (0, self.total_observed_trades):
            return 0.0
        pt = self.buys / self.total_observed_trades
        pn = 1.0 - pt
        return -(pt * math.log2(pt) + pn * math.log2(pn))

    def reset(self) -> None:
        """Forget all trades."""
        self.buys = 0
        self.total_observed_trades = 0

    def update(self, trade: TakerTrade) -> None:
        """Count the trade, and count it as a buy if its size is positive."""
        if trade.size > 0:
            self.buys += 1
        self.total_observed_trades += 1


@dataclass
class StdDevPrices(CandleComponent):
    """Sample standard deviation of trade prices."""

    welford: WelfordOnline = field(default_factory=WelfordOnline, compare=False)

    def value(self) -> float:
        """Standard deviation of prices."""
        return self.welford.std_dev()

    def reset(self) -> None:
        """Forget all prices."""
        self.welford.reset()

    def update(self, trade: TakerTrade) -> None:
        """Add the trade price."""
        self.welford.add(trade.price)


@dataclass
class StdDevSizes(CandleComponent):
    """Sample standard deviation of signed trade sizes."""

    welford: WelfordOnline = field(default_factory=WelfordOnline, compare=False)

    def value(self) -> float:
        """Standard deviation of sizes."""
        return self.welford.std_dev()

    def reset(self) -> None:
        """Forget all sizes."""
        self.welford.reset()

    def update(self, trade: TakerTrade) -> None:
        """Add the signed trade size."""
        self.welford.add(trade.size)


@dataclass
class Trades(CandleComponent):
    """Every trade observed in a candle, in arrival order."""

    trades: list[Any] = field(default_factory=list)

    def value(self) -> list[Any]:
        """A copy of the collected trades."""
        return list(self.trades)

    def reset(self) -> None:
        """Drop all collected trades."""
        self.trades.clear()

    def update(self, trade: TakerTrade) -> None:
        """Collect the trade."""
        self.trades.append(trade)