"""Core trade types, timestamp resolutions, candle periods and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

# Candle periods, in seconds.
M1 = 60
M5 = 300
M15 = 900
M30 = 1800
H1 = 3600
H2 = 7200
H4 = 14400
H8 = 28800
H12 = 43200
D1 = 86400


class InvalidParamError(ValueError):
    """Raised when a rule or component receives an invalid parameter."""

    def __init__(self, message: str = "An invalid parameter was provided") -> None:
        super().__init__(message)


class TimestampResolution(Enum):
    """The unit in which trade timestamps are measured."""

    SECOND = 1
    MILLISECOND = 1_000
    MICROSECOND = 1_000_000
    NANOSECOND = 1_000_000_000

    def per_second(self) -> int:
        """Number of timestamp units in one second."""
        return self.value


class By(Enum):
    """How trade size is summed into volume.

    Trade sizes are assumed to be denoted in the quote currency.
    """

    BASE = "base"
    """Divide size by price for the volume sum."""
    QUOTE = "quote"
    """Take the raw trade size for the volume sum."""


@runtime_checkable
class TakerTrade(Protocol):
    """Anything that can be fed into candle components and aggregation rules.

    A negative ``size`` marks a sell that took liquidity from the bid.
    """

    timestamp: int
    price: float
    size: float

    def timestamp_resolution(self) -> TimestampResolution:
        """Unit of ``timestamp``; milliseconds unless overridden."""
        return TimestampResolution.MILLISECOND


@dataclass(frozen=True)
class Trade:
    """A taker trade with a millisecond timestamp.

    A negative ``size`` indicates a taker sell order.
    """

    timestamp: int = 0
    price: float = 0.0
    size: float = 0.0

    def timestamp_resolution(self) -> TimestampResolution:
        """Unit of ``timestamp``: always milliseconds."""
        return TimestampResolution.MILLISECOND