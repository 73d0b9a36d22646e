"""Online aggregation of trades into candles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Protocol

from .candle import ModularCandle
from .types import TakerTrade


class _Rule(Protocol):
    def should_trigger(self, trade: TakerTrade, candle: ModularCandle) -> bool: ...


class Aggregator(ABC):
    """Turns a stream of trades into candles."""

    @abstractmethod
    def update(self, trade: TakerTrade) -> ModularCandle | None:
        """Add a trade; return a finished candle when one was completed."""

    @abstractmethod
    def unfinished_candle(self) -> ModularCandle:
        """The candle currently being built; its rule may not be satisfied yet."""


class GenericAggregator(Aggregator):
    """An aggregator driven by any candle factory and aggregation rule.

    With ``include_trade_that_triggered_rule`` the trade that completes a
    candle is part of both that candle and the next one, so that consecutive
    closes and opens match.
    """

    def __init__(
        self,
        candle_factory: Callable[[], ModularCandle],
        aggregation_rule: _Rule,
        include_trade_that_triggered_rule: bool = False,
    ) -> None:
        self._candle = candle_factory()
        self._rule = aggregation_rule
        self._include_trigger = include_trade_that_triggered_rule

    def update(self, trade: TakerTrade) -> ModularCandle | None:
        """Add a trade; return a finished candle when the rule triggers."""
        if self._rule.should_trigger(trade, self._candle):
            if self._include_trigger:
                self._candle.update(trade)
            finished = self._candle.copy()
            self._candle.reset()
            self._candle.update(trade)
            return finished
        self._candle.update(trade)
        return None

    def unfinished_candle(self) -> ModularCandle:
        """The candle currently being built."""
        return self._candle