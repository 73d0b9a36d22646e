"""The interface every candle component implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..types import TakerTrade


class CandleComponent(ABC):
    """One piece of state in a candle, fed trade by trade."""

    @abstractmethod
    def value(self) -> Any:
        """Current value of the component."""

    @abstractmethod
    def reset(self) -> None:
        """Return the component to the state a new candle starts from."""

    @abstractmethod
    def update(self, trade: TakerTrade) -> None:
        """Fold the newest trade into the state."""